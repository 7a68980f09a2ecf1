# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import traceback

verbose = 0

class SdkStageError(Exception):
    """Base class for all SdkStage errors"""

    def __init__(self, msg = None, ex = None):
        super(SdkStageError, self).__init__()

        if msg is None:
            msg = ''
        self.msg = msg
        self.stack = []
        if ex:
            if not msg:
                self.msg = str(ex)
            if isinstance(ex, SdkStageError):
                self.stack = list(ex.stack)
            else:
                self.stack = traceback.extract_tb(sys.exc_info()[2])

        if verbose > 1:
            # it's not cheap so it's gathered only for verbose output
            self.stack += traceback.extract_stack()[:-1]

        self.fullmsg = ''.join(traceback.format_list(self.stack)) + str(self.msg)

    def __str__(self):
        return str(self.msg)

class SdkStageLogicError(SdkStageError):
    """Some logic/programming error"""

class SdkStageConfError(SdkStageError):
    """Invalid stage config file error"""

    def __init__(self, msg = None, ex = None, confpath = None):
        if msg is None:
            msg = ''
        if ex and not msg:
            msg = str(ex)
        if confpath and msg:
            _msg = "Error in the file %r:" % confpath
            for line in msg.splitlines():
                _msg += "\n  %s" % line
            msg = _msg
        self.confpath = confpath
        super(SdkStageConfError, self).__init__(msg, ex)

class SdkStageConfTypeError(SdkStageConfError):
    """Invalid param type error"""

class SdkStageConfValueError(SdkStageConfError):
    """Invalid param value error"""

class SdkStagePathNotFoundError(SdkStageError):
    """ Path doesn't exist """

    def __init__(self, path, msg = None):
        self.path = path
        if not msg:
            msg = "Path %r doesn't exist." % path
        super(SdkStagePathNotFoundError, self).__init__(msg)

class SdkStageDirNotFoundError(SdkStagePathNotFoundError):
    """ Directory doesn't exist """

    def __init__(self, path, msg = None):
        if not msg:
            msg = "Directory %r doesn't exist." % path
        super(SdkStageDirNotFoundError, self).__init__(path, msg)

class SdkStageUnsafePathError(SdkStageError):
    """ Path goes out of its root directory """

    def __init__(self, path, rootdir, msg = None):
        self.path = path
        self.rootdir = rootdir
        if not msg:
            msg = "Path %r is outside of the directory %r." % (path, rootdir)
        super(SdkStageUnsafePathError, self).__init__(msg)

class StageDestinationError(SdkStageError):
    """
    Destination directory of a stage rule cannot be created or written.
    It stops the staging.
    """

    def __init__(self, rule, index, destination, ex, report = None):
        self.rule = rule
        self.index = index
        self.destination = destination
        self.oserror = ex
        self.report = report

        msg = "Rule #%d (%s -> %s) failed: cannot create " \
              "destination directory %r: %s" \
              % (index, rule.sourceDir, rule.destSubpath, destination, ex)
        super(StageDestinationError, self).__init__(msg, ex)
