# coding=utf-8
#

# pylint: disable = missing-docstring

"""
 Copyright (c) 2021, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest
from sdkstage.pyutils import struct

Stats = struct('Stats', 'copied, uptodate failed')

def testStructInit():

    stats = Stats(1, 2, [])
    assert stats.copied == 1
    assert stats.uptodate == 2
    assert stats.failed == []

    stats = Stats(copied = 3)
    assert stats.copied == 3
    assert not hasattr(stats, 'uptodate')

    with pytest.raises(TypeError):
        Stats(1, 2, 3, 4)
    with pytest.raises(TypeError):
        Stats(skipped = 1)

def testStructSlots():

    stats = Stats(1, 2, [])
    stats.copied = 10
    assert stats.copied == 10
    with pytest.raises(AttributeError):
        stats.skipped = 1

def testStructEqAndRepr():

    assert Stats(1, 2, []) == Stats(1, 2, [])
    assert Stats(1, 2, []) != Stats(1, 3, [])
    assert Stats(1, 2, []) != (1, 2, [])
    assert repr(Stats(1, 2, [])) == 'Stats(copied=1, uptodate=2, failed=[])'
    assert Stats.__doc__ == 'Stats(copied, uptodate, failed)'

    with pytest.raises(TypeError):
        hash(Stats(1, 2, []))
