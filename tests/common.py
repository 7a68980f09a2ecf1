# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import io

joinpath = os.path.join

def makeFiles(rootdir, relpaths):
    """
    Create files with their relative paths as the content.
    Returns list of absolute paths.
    """

    result = []
    for relpath in relpaths:
        path = joinpath(rootdir, *relpath.split('/'))
        os.makedirs(os.path.dirname(path), exist_ok = True)
        with io.open(path, 'wt', encoding = 'utf-8') as file:
            file.write(relpath)
        result.append(path)
    return result

def readTree(rootdir):
    """
    Return map: relative POSIX path -> bytes content for all files in rootdir
    """

    result = {}
    for dirpath, _, filenames in os.walk(rootdir):
        for name in filenames:
            path = joinpath(dirpath, name)
            relpath = os.path.relpath(path, rootdir).replace(os.sep, '/')
            with open(path, 'rb') as file:
                result[relpath] = file.read()
    return result

def mtimes(rootdir):
    """ Return map: relative POSIX path -> st_mtime_ns """

    result = {}
    for dirpath, _, filenames in os.walk(rootdir):
        for name in filenames:
            path = joinpath(dirpath, name)
            relpath = os.path.relpath(path, rootdir).replace(os.sep, '/')
            result[relpath] = os.stat(path).st_mtime_ns
    return result

def levelRecords(records, level):
    """ Filter loguru records by level name """
    return [x for x in records if x['level'].name == level]

def isRoot():
    return hasattr(os, 'geteuid') and os.geteuid() == 0
