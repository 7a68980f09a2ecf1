# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import struct as _struct

from sdkstage.constants import HOST_OS, CPU_ARCH, BINARIES_DIRNAME
from sdkstage.constants import DEFAULT_PROGRAM_NAME, WINDOWS_TARGET_PLATFORMS
from sdkstage.pathutils import unfoldPath
from sdkstage.error import SdkStageError, SdkStageDirNotFoundError

joinpath = os.path.join

def detectTargetPlatform(hostOS = HOST_OS, arch = CPU_ARCH):
    """
    Return name of the engine platform for the host: Win64/Win32, Linux,
    LinuxArm64, Mac or capitalized name of the host OS for others.
    """

    if hostOS == 'windows':
        is64 = arch in ('x86_64', 'aarch64') or _struct.calcsize('P') == 8
        return 'Win64' if is64 else 'Win32'
    if hostOS == 'linux':
        return 'LinuxArm64' if arch == 'aarch64' else 'Linux'
    if hostOS == 'macos':
        return 'Mac'
    return hostOS.capitalize()

def isWindowsFamily(targetPlatform):
    """ Return True if the engine platform is one of MS Windows platforms """
    return targetPlatform.lower() in WINDOWS_TARGET_PLATFORMS

class StageContext(object):
    """
    Build context which the staging gets from the build orchestrator.
    """

    __slots__ = ('engineDir', 'targetPlatform', 'programName', 'buildSucceeded')

    def __init__(self, engineDir, targetPlatform, programName, buildSucceeded = True):
        self.engineDir = engineDir
        self.targetPlatform = targetPlatform
        self.programName = programName
        self.buildSucceeded = buildSucceeded

    def __repr__(self):
        return 'StageContext(engineDir=%r, targetPlatform=%r, programName=%r, ' \
               'buildSucceeded=%r)' % (self.engineDir, self.targetPlatform,
                                      self.programName, self.buildSucceeded)

    @property
    def outputRoot(self):
        """ Directory for staged files: {engine}/Binaries/{platform}/{program} """
        return joinpath(self.engineDir, BINARIES_DIRNAME,
                        self.targetPlatform, self.programName)

    @property
    def isWindowsFamily(self):
        """ Is target platform one of MS Windows platforms """
        return isWindowsFamily(self.targetPlatform)

    def builtInVars(self):
        """ Variables for $(VAR) substitution in stage rules """
        return {
            'EngineDir' : self.engineDir,
            'TargetPlatform' : self.targetPlatform,
            'ProgramName' : self.programName,
            'OutputRoot' : self.outputRoot,
        }

def makeContext(engineDir, targetPlatform = None, programName = None,
                buildSucceeded = True, cwd = None):
    """
    Make StageContext with checking of the engine directory.
    """

    if not engineDir:
        raise SdkStageError("Engine directory is not set. Use the option "
                            "--engine-dir or the env var ENGINE_DIR.")

    kwargs = {} if cwd is None else { 'cwd' : cwd }
    engineDir = unfoldPath(engineDir, **kwargs)
    if not os.path.isdir(engineDir):
        raise SdkStageDirNotFoundError(engineDir,
                    "Engine directory %r doesn't exist." % engineDir)

    if not targetPlatform:
        targetPlatform = detectTargetPlatform()
    if not programName:
        programName = DEFAULT_PROGRAM_NAME

    return StageContext(engineDir, targetPlatform, programName, buildSucceeded)
