# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
from fnmatch import fnmatch

from sdkstage.constants import CWD
from sdkstage.utils import toList
from sdkstage.error import SdkStageUnsafePathError

_joinpath = os.path.join
_normpath = os.path.normpath
_realpath = os.path.realpath
_isabs = os.path.isabs
_abspath = os.path.abspath
_expanduser = os.path.expanduser
_commonpath = os.path.commonpath
_splitdrive = os.path.splitdrive

# masks that select any file, even one without extension
_ANY_FILE_MASKS = frozenset(('*', '*.*'))

def unfoldPath(path, cwd = CWD):
    """
    Unfold path applying os.path.expanduser and joining 'path' with 'cwd' in
    the beginning if the 'path' is not absolute path.
    Returns real path.
    """

    if not path:
        return path

    path = _expanduser(os.fspath(path))
    if not _isabs(path):
        path = _joinpath(cwd, path)

    # It is better to use os.path.realpath than os.path.abspath here
    # Since python 3.8 the os.path.realpath resolves symbolic links, junctions
    # and short file names (8.3 notation) on Windows.
    return _realpath(path)

def getNativePath(path):
    """
    Return native path from POSIX path
    """
    if not path:
        return path
    return path.replace('/', os.sep) if os.sep != '/' else path

def joinSubPath(rootdir, subpath):
    """
    Join 'subpath' to 'rootdir' and return normalized path.
    The 'subpath' must be relative and must stay inside 'rootdir' after
    normalization, SdkStageUnsafePathError is raised otherwise.
    """

    rootdir = _normpath(rootdir)
    native = getNativePath(subpath or '')
    if _isabs(native) or _splitdrive(native)[0]:
        raise SdkStageUnsafePathError(subpath, rootdir,
                    "Path %r must be relative to %r." % (subpath, rootdir))

    path = _normpath(_joinpath(rootdir, native))
    absroot = _abspath(rootdir)
    if _commonpath([absroot, _abspath(path)]) != absroot:
        raise SdkStageUnsafePathError(subpath, rootdir)
    return path

def makeMaskMatcher(masks):
    """
    Make function to check a file name (not a path) by file mask(s).
    Param 'masks' can be a string with masks separated by spaces
    or a list of masks. Mask '*.*' matches any file like '*' does.
    Case sensitivity of matching is the same as for the host file system.
    """

    patterns = []
    for mask in toList(masks):
        if mask in _ANY_FILE_MASKS:
            return lambda name: True
        patterns.append(mask)
        if mask.endswith('.*'):
            # 'name.*' matches 'name' as well
            patterns.append(mask[:-2])

    return lambda name: any(fnmatch(name, x) for x in patterns)
