# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
from collections import namedtuple

from sdkstage.pyutils import maptype, stringtype, pathtypes
from sdkstage.error import SdkStageConfTypeError
from sdkstage.constants import DEFAULT_FILE_MASK

class StageRule(namedtuple('StageRule', 'sourceDir, fileMask, destSubpath')):
    """
    One directive to copy files matched by 'fileMask' from 'sourceDir'
    into 'destSubpath' under the output root.
    """

    __slots__ = ()

    def __str__(self):
        return '%s -> %s' % (os.path.join(self.sourceDir, self.fileMask),
                             self.destSubpath)

class Manifest(object):
    """
    Read-only ordered sequence of stage rules.
    """

    __slots__ = ('_rules', )

    def __init__(self, rules = ()):
        self._rules = tuple(rules)

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __eq__(self, other):
        if not isinstance(other, Manifest):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self):
        return hash(self._rules)

    def __repr__(self):
        return 'Manifest(%r)' % (list(self._rules), )

class ManifestBuilder(object):
    """
    Collects stage rules in the order of declaration.
    """

    __slots__ = ('_rules', )

    def __init__(self):
        self._rules = []

    @staticmethod
    def _checkType(name, value, types):
        if not isinstance(value, types):
            msg = "Param %r of stage rule should be string, not %r" \
                  % (name, type(value).__name__)
            raise SdkStageConfTypeError(msg)

    def addRule(self, sourceDir, fileMask, destSubpath):
        """
        Append one rule. Paths are not checked here: they are resolved when
        the rule is executed.
        Returns the new rule.
        """

        self._checkType('sourceDir', sourceDir, pathtypes)
        self._checkType('fileMask', fileMask, stringtype)
        self._checkType('destSubpath', destSubpath, stringtype)

        rule = StageRule(os.fspath(sourceDir), fileMask, destSubpath)
        self._rules.append(rule)
        return rule

    def addRules(self, items):
        """
        Append rules from iterable of maps with keys 'src', 'mask', 'dest'
        or from iterable of tuples (sourceDir, fileMask, destSubpath).
        """

        for item in items:
            if isinstance(item, maptype):
                self.addRule(item['src'], item.get('mask', DEFAULT_FILE_MASK),
                             item['dest'])
            else:
                self.addRule(*item)

    @property
    def rules(self):
        """ Copy of the current list of rules """
        return list(self._rules)

    def build(self):
        """ Make read-only manifest with the current rules """
        return Manifest(self._rules)
