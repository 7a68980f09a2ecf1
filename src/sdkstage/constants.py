# coding=utf-8
#

"""
 Copyright (c) 2019 Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
from sdkstage import utils

APPNAME = 'sdkstage'
CAP_APPNAME = 'SdkStage'
AUTHOR = 'Alexander Magola'

STAGECONF_NAME = 'stageconf'
STAGECONF_EXTS = ['.py', '.yaml', '.yml']
STAGECONF_FILENAMES = ['%s%s' % (STAGECONF_NAME, x) for x in STAGECONF_EXTS]

BINARIES_DIRNAME = 'Binaries'
DEFAULT_PROGRAM_NAME = 'DatasmithSDK'
DEFAULT_PRESET = 'datasmith-sdk'
DEFAULT_FILE_MASK = '*.*'

# names of engine platforms which are staged with the overwrite copy
WINDOWS_TARGET_PLATFORMS = frozenset(('win64', 'win32', 'windows'))

CWD = os.getcwd()
PLATFORM = utils.platform()
HOST_OS = utils.hostOS()
CPU_ARCH = utils.cpuArch()
