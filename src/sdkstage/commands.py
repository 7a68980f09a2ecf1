# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Implementations of CLI commands
"""

import platform as _platform

from sdkstage import log, stageconf, version
from sdkstage.constants import CAP_APPNAME, CWD, DEFAULT_PRESET
from sdkstage.cmd import Command as _Command
from sdkstage.context import makeContext
from sdkstage.executor import StageExecutor
from sdkstage.strategies import selectStrategy

def loadConf(cliArgs, cwd = CWD):
    """
    Get StageConf from CLI args: from the file set by --conf, from the preset
    set by --preset, from stageconf file in the cwd or from the default preset.
    """

    if cliArgs.get('conf'):
        return stageconf.load(cliArgs.conf)
    if cliArgs.get('preset'):
        return stageconf.fromPreset(cliArgs.preset)

    conf = stageconf.load(dirpath = cwd)
    if conf is None:
        log.debug("no stage config found, preset %r is used" % DEFAULT_PRESET)
        conf = stageconf.fromPreset(DEFAULT_PRESET)
    return conf

def prepare(cliArgs, cwd = CWD):
    """
    Make StageContext and Manifest from CLI args.
    Values from CLI/env override values from stage config.
    """

    conf = loadConf(cliArgs, cwd)
    ctx = makeContext(
        cliArgs.get('engineDir'),
        targetPlatform = cliArgs.get('platform') or conf.platform,
        programName = cliArgs.get('program') or conf.program,
        buildSucceeded = not cliArgs.get('buildFailed', False),
        cwd = cwd,
    )
    manifest = stageconf.makeManifest(conf, ctx)
    return ctx, manifest

class StageCommand(_Command):
    """
    Copy files by stage rules.
    It's implementation of command 'stage'.
    """

    def _run(self, cliArgs):

        ctx, manifest = prepare(cliArgs)
        executor = StageExecutor(checksum = cliArgs.get('checksum', False))
        report = executor.stage(manifest, ctx)
        return report.exitcode

class ShowCommand(_Command):
    """
    Print resolved stage rules.
    It's implementation of command 'show'.
    """

    COLOR = 'CYAN'

    def _run(self, cliArgs):

        ctx, manifest = prepare(cliArgs)
        strategy = selectStrategy(ctx.targetPlatform, cliArgs.get('checksum', False))

        lines = [
            'Engine dir      : %s' % ctx.engineDir,
            'Target platform : %s' % ctx.targetPlatform,
            'Program         : %s' % ctx.programName,
            'Output root     : %s' % ctx.outputRoot,
            'Copy strategy   : %s' % strategy.name,
            'Rules:',
        ]
        for index, rule in enumerate(manifest, 1):
            lines.append('  %2d) %s' % (index, rule))

        self._info('\n'.join(lines))
        return 0

class VersionCommand(_Command):
    """
    Print version of the program.
    It's implementation of command 'version'.
    """

    def _run(self, cliArgs):

        msg = "{} version {}".format(CAP_APPNAME, version.current())
        if cliArgs.verbose >= 1:
            msg += '\nPython version: %s' % _platform.python_version()
            msg += '\nPython implementation: %s' % _platform.python_implementation()

        self._info(msg)
        return 0

COMMANDS = {
    'stage'   : StageCommand,
    'show'    : ShowCommand,
    'version' : VersionCommand,
}
