# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

class AutoDict(dict):
    """
    Dict with dot notation and auto creation of missing items.
    It's used for declarative CLI config and parsed CLI args only.
    """

    def __missing__(self, key):
        val = AutoDict()
        self[key] = val
        return val

    def __getattr__(self, name):
        if name.startswith('__'):
            # don't break copy/pickle protocols
            raise AttributeError(name)
        return self[name] # this calls __missing__ if name doesn't exist

    def __setattr__(self, name, value):
        self[name] = value

    def __copy__(self):
        return self.copy()

    def copy(self):
        """ shallow copy """
        return AutoDict(super(AutoDict, self).copy())
