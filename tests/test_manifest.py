# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pathlib
import pytest

from sdkstage.manifest import StageRule, Manifest, ManifestBuilder
from sdkstage.error import SdkStageConfTypeError

def testAddRule():

    builder = ManifestBuilder()
    rule = builder.addRule('/src/docs', '*.*', 'Documentation')
    assert rule == StageRule('/src/docs', '*.*', 'Documentation')
    assert rule.sourceDir == '/src/docs'
    assert rule.fileMask == '*.*'
    assert rule.destSubpath == 'Documentation'
    assert builder.rules == [rule]

    # path-like source dir is converted into string
    rule = builder.addRule(pathlib.Path('/src/include'), '*.h', 'Public')
    assert rule.sourceDir == os.fspath(pathlib.Path('/src/include'))

def testAddRuleWrongTypes():

    builder = ManifestBuilder()
    with pytest.raises(SdkStageConfTypeError):
        builder.addRule(None, '*.*', 'Documentation')
    with pytest.raises(SdkStageConfTypeError):
        builder.addRule('/src', ['*.h'], 'Public')
    with pytest.raises(SdkStageConfTypeError):
        builder.addRule('/src', '*.h', 12)
    assert not builder.rules

def testAddRuleDoesNotCheckPaths():
    builder = ManifestBuilder()
    builder.addRule('/not/existing/dir', '*.h', '../outside')
    assert len(builder.build()) == 1

def testAddRules():

    builder = ManifestBuilder()
    builder.addRules([
        { 'src' : '/a', 'mask' : '*.h', 'dest' : 'Public' },
        { 'src' : '/b', 'dest' : 'Private' },
        ('/c', '*.txt', 'Documentation'),
    ])

    assert builder.rules == [
        StageRule('/a', '*.h', 'Public'),
        StageRule('/b', '*.*', 'Private'),
        StageRule('/c', '*.txt', 'Documentation'),
    ]

def testOrderAndImmutability():

    builder = ManifestBuilder()
    names = ['d%d' % i for i in range(10)]
    for name in names:
        builder.addRule('/src/' + name, '*.*', name)

    manifest = builder.build()
    assert [x.destSubpath for x in manifest] == names
    assert manifest[0].destSubpath == 'd0'
    assert len(manifest) == len(names)

    # rules are immutable
    with pytest.raises(AttributeError):
        manifest[0].fileMask = '*.h'

    # manifest is read-only
    with pytest.raises(TypeError):
        manifest[0] = StageRule('/x', '*.*', 'x') # pylint: disable = unsupported-assignment-operation
    assert not hasattr(manifest, 'append')

    # later changes of the builder don't affect built manifest
    builder.addRule('/src/extra', '*.*', 'extra')
    assert len(manifest) == len(names)
    assert len(builder.build()) == len(names) + 1

def testManifestEquality():
    rules = [StageRule('/a', '*.h', 'Public'), StageRule('/b', '*.*', 'Private')]
    assert Manifest(rules) == Manifest(list(rules))
    assert Manifest(rules) != Manifest(reversed(rules))
    assert 'Public' in repr(Manifest(rules))

def testStageRuleStr():
    rule = StageRule(os.path.join('src', 'docs'), '*.*', 'Documentation')
    assert str(rule) == '%s -> Documentation' % os.path.join('src', 'docs', '*.*')
