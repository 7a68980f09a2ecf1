# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Built-in stage configs. They have the same structure as stageconf files.
"""

from copy import deepcopy

PRESETS = {

    # Datasmith SDK: documentation, public headers of the SDK modules and
    # headers of modules they depend on but which are not part of the API.
    'datasmith-sdk' : {
        'target' : {
            'program' : 'DatasmithSDK',
        },
        'rules' : [
            {
                'src' : '$(EngineDir)/Source/Programs/Enterprise/Datasmith/DatasmithSDK/Documentation',
                'mask' : '*.*',
                'dest' : 'Documentation',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/Datasmith/DatasmithCore/Public',
                'mask' : '*.h',
                'dest' : 'Public',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/Datasmith/DirectLink/Public',
                'mask' : '*.h',
                'dest' : 'Public',
            },
            {
                'src' : '$(EngineDir)/Source/Developer/Datasmith/DatasmithExporter/Public',
                'mask' : '*.h',
                'dest' : 'Public',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/TraceLog/Public',
                'mask' : '*.*',
                'dest' : 'Private',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/Messaging/Public',
                'mask' : '*.h',
                'dest' : 'Private',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/Core/Public',
                'mask' : '*.*',
                'dest' : 'Private',
            },
            {
                'src' : '$(EngineDir)/Source/Runtime/CoreUObject/Public',
                'mask' : '*.h',
                'dest' : 'Private',
            },
        ],
    },
}

def names():
    """ Names of all presets """
    return sorted(PRESETS.keys())

def get(name):
    """
    Get copy of preset config by name. Returns None if not found.
    """

    preset = PRESETS.get(name)
    return deepcopy(preset) if preset is not None else None
