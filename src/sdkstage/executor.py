# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os

from sdkstage import log
from sdkstage.pyutils import struct
from sdkstage.pathutils import joinSubPath
from sdkstage.strategies import selectStrategy
from sdkstage.error import SdkStageUnsafePathError, StageDestinationError

joinpath = os.path.join
isdir = os.path.isdir

RULE_STAGED   = 'staged'
RULE_SKIPPED  = 'skipped'
RULE_REJECTED = 'rejected'

RuleResult = struct('RuleResult', 'rule, destination, status, copied, uptodate, failed')

class StageReport(object):
    """
    Results of one staging run
    """

    __slots__ = ('results', 'strategy', 'outputRoot')

    def __init__(self, outputRoot = None, strategy = None):
        self.outputRoot = outputRoot
        self.strategy = strategy
        self.results = []

    def _count(self, status):
        return sum(1 for x in self.results if x.status == status)

    @property
    def rulesProcessed(self):
        """ Number of rules with any result """
        return len(self.results)

    @property
    def rulesSkipped(self):
        """ Number of rules with missing source directory """
        return self._count(RULE_SKIPPED)

    @property
    def rulesRejected(self):
        """ Number of rules with invalid destination """
        return self._count(RULE_REJECTED)

    @property
    def filesCopied(self):
        """ Number of written files """
        return sum(x.copied for x in self.results)

    @property
    def filesUpToDate(self):
        """ Number of files that didn't need copying """
        return sum(x.uptodate for x in self.results)

    @property
    def filesFailed(self):
        """ Number of files that could not be copied """
        return sum(len(x.failed) for x in self.results)

    @property
    def exitcode(self):
        """ 0 if everything is fine, 1 otherwise """
        return int(bool(self.filesFailed or self.rulesRejected))

    def summary(self):
        """ Human readable summary of the run """

        return "Processed %d rule(s): %d file(s) copied, %d up to date, " \
               "%d rule(s) skipped, %d rule(s) rejected, %d file(s) failed" % (
                    self.rulesProcessed, self.filesCopied, self.filesUpToDate,
                    self.rulesSkipped, self.rulesRejected, self.filesFailed)

class StageExecutor(object):
    """
    Executes stage rules one by one in the order of manifest.
    """

    __slots__ = ('_strategy', '_checksum')

    def __init__(self, strategy = None, checksum = False):
        """
        Param 'strategy' is a copy strategy to use for all runs. If it is
        None then the strategy is selected by target platform on each run.
        """

        self._strategy = strategy
        self._checksum = checksum

    def _prepareDestination(self, rule, index, destination, report):
        try:
            os.makedirs(destination, exist_ok = True)
            if not os.access(destination, os.W_OK):
                raise PermissionError('Permission denied: %r' % destination)
        except OSError as ex:
            raise StageDestinationError(rule, index, destination, ex, report) from ex

    def _runRule(self, rule, index, outputRoot, strategy, report):

        result = RuleResult(rule = rule, destination = None, status = RULE_STAGED,
                            copied = 0, uptodate = 0, failed = [])
        report.results.append(result)

        try:
            destination = joinSubPath(outputRoot, rule.destSubpath)
        except SdkStageUnsafePathError as ex:
            log.error("Rule #%d (%s) is rejected: %s" % (index, rule, ex))
            result.status = RULE_REJECTED
            return result

        result.destination = destination

        if not isdir(rule.sourceDir):
            log.warn("Source directory %r doesn't exist, rule #%d is skipped"
                     % (rule.sourceDir, index))
            result.status = RULE_SKIPPED
            return result

        log.printStep("Copying %s to %s" %
                      (joinpath(rule.sourceDir, rule.fileMask), destination))

        self._prepareDestination(rule, index, destination, report)

        stats = strategy.copyTree(rule.sourceDir, rule.fileMask,
                                  destination, outputRoot)
        result.copied = stats.copied
        result.uptodate = stats.uptodate
        result.failed = stats.failed
        return result

    def run(self, manifest, outputRoot, platform):
        """
        Stage all rules from manifest into outputRoot.
        Returns StageReport. Raises StageDestinationError if a destination
        directory cannot be created, remaining rules are not processed then.
        """

        strategy = self._strategy
        if strategy is None:
            strategy = selectStrategy(platform, self._checksum)

        report = StageReport(outputRoot, strategy.name)
        log.debug("staging into %r with %r copy strategy" % (outputRoot, strategy.name))

        try:
            for index, rule in enumerate(manifest, 1):
                self._runRule(rule, index, outputRoot, strategy, report)
        finally:
            log.info(report.summary())

        return report

    def stage(self, manifest, ctx):
        """
        Stage manifest for the StageContext. Nothing is done if the primary
        build failed. Returns StageReport.
        """

        if not ctx.buildSucceeded:
            log.warn("Primary build failed, nothing is staged")
            return StageReport(ctx.outputRoot)

        return self.run(manifest, ctx.outputRoot, ctx.targetPlatform)
