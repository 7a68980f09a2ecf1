# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name, redefined-outer-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest

import tests.common as cmn
from sdkstage import starter, commands, version, error
from sdkstage.constants import APPNAME, CAP_APPNAME
from sdkstage.autodict import AutoDict

joinpath = os.path.join

DATASMITH_SOURCES = [
    'Source/Programs/Enterprise/Datasmith/DatasmithSDK/Documentation/readme.txt',
    'Source/Programs/Enterprise/Datasmith/DatasmithSDK/Documentation/guide.pdf',
    'Source/Runtime/Datasmith/DatasmithCore/Public/DatasmithCore.h',
    'Source/Runtime/Datasmith/DatasmithCore/Public/DatasmithTypes.h',
    'Source/Runtime/Datasmith/DirectLink/Public/DirectLinkCommon.h',
    'Source/Developer/Datasmith/DatasmithExporter/Public/DatasmithExporter.h',
    'Source/Developer/Datasmith/DatasmithExporter/Public/README',
    'Source/Runtime/TraceLog/Public/Trace/Trace.h',
    'Source/Runtime/TraceLog/Public/Trace/Trace.inl',
    'Source/Runtime/Core/Public/CoreMinimal.h',
    'Source/Runtime/Core/Public/Misc/Build.h',
    'Source/Runtime/Core/Public/Misc/notes',
    'Source/Runtime/CoreUObject/Public/UObject/Object.h',
    'Source/Runtime/CoreUObject/Public/UObject/Object.cpp',
    # Messaging is absent in this engine configuration
]

@pytest.fixture
def engine(engineDir):
    cmn.makeFiles(engineDir, DATASMITH_SOURCES)
    return engineDir

def _run(*args):
    return starter.run([APPNAME] + list(args))

@pytest.mark.usefixtures("unsetEnviron")
def testStagePreset(engine, capsys):

    exitcode = _run('stage', '-e', engine, '-p', 'Linux', '-P', 'datasmith-sdk')
    assert exitcode == 0

    outRoot = joinpath(engine, 'Binaries', 'Linux', 'DatasmithSDK')
    assert sorted(cmn.readTree(outRoot)) == [
        'Documentation/guide.pdf',
        'Documentation/readme.txt',
        'Private/CoreMinimal.h',
        'Private/Misc/Build.h',
        'Private/Misc/notes',
        'Private/Trace/Trace.h',
        'Private/Trace/Trace.inl',
        'Private/UObject/Object.h',
        'Public/DatasmithCore.h',
        'Public/DatasmithExporter.h',
        'Public/DatasmithTypes.h',
        'Public/DirectLinkCommon.h',
    ]

    captured = capsys.readouterr()
    assert 'Copying' in captured.out
    assert 'Processed 8 rule(s)' in captured.out
    # missing Messaging module
    assert 'Messaging' in captured.err
    assert "doesn't exist" in captured.err

    # second run with the same result
    assert _run('stage', '-e', engine, '-p', 'Linux', '-P', 'datasmith-sdk') == 0
    captured = capsys.readouterr()
    assert '0 file(s) copied, 12 up to date' in captured.out

@pytest.mark.usefixtures("unsetEnviron")
def testStageByEnv(engine, monkeypatch):

    monkeypatch.setenv('ENGINE_DIR', engine)
    monkeypatch.setenv('TARGET_PLATFORM', 'Win64')
    monkeypatch.setenv('SDKSTAGE_PROGRAM', 'MySDK')

    assert _run('stage', '-P', 'datasmith-sdk') == 0
    outRoot = joinpath(engine, 'Binaries', 'Win64', 'MySDK')
    assert os.path.isfile(joinpath(outRoot, 'Public', 'DatasmithCore.h'))

@pytest.mark.usefixtures("unsetEnviron")
def testStageConfFile(engine, tmpdir):

    confFile = tmpdir.join('stageconf.yaml')
    confFile.write("""
target:
  program: CoreSDK
  platform: Mac
rules:
  - src: $(EngineDir)/Source/Runtime/Core/Public
    mask: "*.h"
    dest: Include
""")

    assert _run('stage', '-e', engine, '-c', str(confFile)) == 0
    outRoot = joinpath(engine, 'Binaries', 'Mac', 'CoreSDK')
    assert sorted(cmn.readTree(outRoot)) == ['Include/CoreMinimal.h', 'Include/Misc/Build.h']

    # CLI overrides values from the config
    assert _run('stage', '-e', engine, '-c', str(confFile), '-n', 'Other') == 0
    assert os.path.isdir(joinpath(engine, 'Binaries', 'Mac', 'Other', 'Include'))

@pytest.mark.usefixtures("unsetEnviron")
def testBuildFailed(engine, capsys):

    exitcode = _run('stage', '-e', engine, '-p', 'Linux', '--build-failed')
    assert exitcode == 0
    assert not os.path.exists(joinpath(engine, 'Binaries'))
    assert 'Primary build failed' in capsys.readouterr().err

@pytest.mark.usefixtures("unsetEnviron")
def testErrors(engine, tmpdir, capsys):

    # no engine dir
    assert _run('stage', '-P', 'datasmith-sdk') == 1
    assert 'Engine directory is not set' in capsys.readouterr().err

    path = str(tmpdir.join('noengine'))
    assert _run('stage', '-e', path, '-P', 'datasmith-sdk') == 1
    assert "doesn't exist" in capsys.readouterr().err

    confFile = tmpdir.join('bad.yaml')
    confFile.write("rules:\n  - src: a\n")
    assert _run('show', '-e', engine, '-c', str(confFile)) == 1
    assert 'bad.yaml' in capsys.readouterr().err

    confFile.write("rules:\n  - src: $(EngineDir)/Source\n    dest: ../../outside\n")
    assert _run('stage', '-e', engine, '-p', 'Linux', '-c', str(confFile)) == 1
    assert 'rejected' in capsys.readouterr().err

@pytest.mark.usefixtures("unsetEnviron")
def testFatalError(engine, mocker, capsys):

    mocker.patch('os.makedirs', side_effect = PermissionError(13, 'Permission denied'))

    assert _run('stage', '-e', engine, '-p', 'Linux', '-P', 'datasmith-sdk') == 1
    err = capsys.readouterr().err
    assert 'Rule #1' in err
    assert 'Documentation' in err
    assert 'Permission denied' in err

@pytest.mark.usefixtures("unsetEnviron")
def testInterrupted(engine, mocker, capsys):

    mocker.patch.object(commands.StageCommand, '_run', side_effect = KeyboardInterrupt)
    assert _run('stage', '-e', engine) == starter.EXITCODE_INTERRUPTED
    assert 'Interrupted' in capsys.readouterr().out

@pytest.mark.usefixtures("unsetEnviron")
def testShow(engine, capsys):

    assert _run('show', '-e', engine, '-p', 'Win32', '-P', 'datasmith-sdk') == 0
    out = capsys.readouterr().out
    assert 'Copy strategy   : overwrite' in out
    assert joinpath(engine, 'Binaries', 'Win32', 'DatasmithSDK') in out
    assert ' 8) ' in out
    # show copies nothing
    assert not os.path.exists(joinpath(engine, 'Binaries'))

@pytest.mark.usefixtures("unsetEnviron")
def testVersion(capsys):

    assert _run('version') == 0
    out = capsys.readouterr().out
    assert '%s version %s' % (CAP_APPNAME, version.current()) in out

    assert _run('--version', '-v') == 0
    assert 'Python version' in capsys.readouterr().out

def testLoadConfDefaultPreset(engine, tmpdir):

    cwd = str(tmpdir.mkdir('project'))
    cliArgs = AutoDict(engineDir = engine, platform = 'Linux')

    ctx, manifest = commands.prepare(cliArgs, cwd = cwd)
    assert ctx.programName == 'DatasmithSDK'
    assert len(manifest) == 8

    # stageconf in cwd
    with open(joinpath(cwd, 'stageconf.yml'), 'w') as file:
        file.write("rules:\n  - src: docs\n    dest: Documentation\n")
    ctx, manifest = commands.prepare(cliArgs, cwd = cwd)
    assert len(manifest) == 1
    assert manifest[0].sourceDir == joinpath(cwd, 'docs')

@pytest.mark.usefixtures("unsetEnviron")
def testErrorVerboseOutput(engine, capsys):

    assert _run('stage', '-vv', '-e', joinpath(engine, 'nothing')) == 1
    assert error.verbose == 2
    captured = capsys.readouterr()
    assert "doesn't exist" in captured.err
    # traceback goes before the error message
    assert 'makeContext' in captured.out
