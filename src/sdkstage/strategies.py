# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Copy strategies for stage rules. The overwrite copy works like
 'xcopy /R /Y /S' and the sync copy works like 'rsync -r -t'.
"""

import os
import stat
import shutil

from sdkstage import log
from sdkstage.pathutils import makeMaskMatcher
from sdkstage.context import isWindowsFamily
from sdkstage.utils import hashFile
from sdkstage.pyutils import struct

joinpath = os.path.join
relpath = os.path.relpath
realpath = os.path.realpath
isfile = os.path.isfile

CopyStats = struct('CopyStats', 'copied, uptodate, failed')

class CopyStrategy(object):
    """
    Base class for strategies to copy files of one stage rule.
    """

    name = None

    def copyTree(self, srcDir, masks, destDir, skipDir = None):
        """
        Copy files matched by 'masks' from 'srcDir' into 'destDir' with
        subdirectories. The 'destDir' must exist.
        Directory 'skipDir' ('destDir' by default) is not entered when
        it is inside of 'srcDir', so staged files are never copied again.
        Failure of one file doesn't stop copying of other files.
        Returns CopyStats.
        """

        stats = CopyStats(copied = 0, uptodate = 0, failed = [])
        matches = makeMaskMatcher(masks)
        skipDir = realpath(skipDir or destDir)

        def onWalkError(ex):
            log.warn("Cannot read directory %r: %s" % (ex.filename, ex.strerror))
            stats.failed.append((ex.filename, ex))

        for dirpath, dirnames, filenames in os.walk(srcDir, onerror = onWalkError):
            # make order stable
            dirnames[:] = sorted(x for x in dirnames \
                                 if realpath(joinpath(dirpath, x)) != skipDir)
            subdir = relpath(dirpath, srcDir)
            for name in sorted(filenames):
                if not matches(name):
                    continue

                src = joinpath(dirpath, name)
                dst = os.path.normpath(joinpath(destDir, subdir, name))
                try:
                    os.makedirs(os.path.dirname(dst), exist_ok = True)
                    written = self.copyFile(src, dst)
                except OSError as ex:
                    log.warn("Cannot copy %r to %r: %s" % (src, dst, ex))
                    stats.failed.append((src, ex))
                    continue

                if written:
                    log.debug("copied %r" % dst)
                    stats.copied += 1
                else:
                    stats.uptodate += 1

        return stats

    def copyFile(self, src, dst):
        """
        Copy one file. Returns True if the file was written.
        """
        raise NotImplementedError

class OverwriteCopyStrategy(CopyStrategy):
    """
    Always copy files, existing read-only files are overwritten as well.
    """

    name = 'overwrite'

    def copyFile(self, src, dst):
        if isfile(dst) and not os.access(dst, os.W_OK):
            os.chmod(dst, os.stat(dst).st_mode | stat.S_IWRITE)
        shutil.copy2(src, dst)
        return True

class SyncCopyStrategy(CopyStrategy):
    """
    Copy only files which are missing or differ in size or modification
    time, or in content with 'checksum' = True. Modification time is preserved.
    """

    name = 'sync'

    def __init__(self, checksum = False):
        self.checksum = checksum

    def isUpToDate(self, src, dst):
        """ Check that 'dst' doesn't need to be updated from 'src' """

        try:
            dstStat = os.stat(dst)
        except FileNotFoundError:
            return False

        srcStat = os.stat(src)
        if srcStat.st_size != dstStat.st_size:
            return False
        if self.checksum:
            if hashFile(src) != hashFile(dst):
                return False
            # the same content: only times are synced like 'rsync -c -t' does
            if int(srcStat.st_mtime) != int(dstStat.st_mtime):
                shutil.copystat(src, dst)
            return True
        # the same one second resolution as rsync uses by default
        return int(srcStat.st_mtime) == int(dstStat.st_mtime)

    def copyFile(self, src, dst):
        if self.isUpToDate(src, dst):
            return False

        # write into temporary file and then replace to not leave
        # broken file in case of failure
        tmp = joinpath(os.path.dirname(dst), '.%s.sdkstage~' % os.path.basename(dst))
        try:
            shutil.copy2(src, tmp)
            os.replace(tmp, dst)
        except OSError:
            if os.path.lexists(tmp):
                os.remove(tmp)
            raise
        return True

def selectStrategy(platform, checksum = False):
    """
    Select copy strategy for the engine target platform.
    """

    if isWindowsFamily(platform):
        return OverwriteCopyStrategy()
    return SyncCopyStrategy(checksum)
