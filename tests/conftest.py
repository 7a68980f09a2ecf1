# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest
from loguru import logger

ENV_VARS = (
    'ENGINE_DIR', 'TARGET_PLATFORM', 'SDKSTAGE_PROGRAM',
    'NOCOLOR', 'SDKSTAGE_ON_TTY',
)

def pytest_report_header(config):
    from sdkstage import version
    from sdkstage.constants import PLATFORM, HOST_OS, CPU_ARCH
    return "sdkstage %s, platform: %s, host OS: %s, arch: %s" % (
        version.current(), PLATFORM, HOST_OS, CPU_ARCH)

@pytest.fixture
def unsetEnviron(monkeypatch):
    for v in ENV_VARS:
        monkeypatch.delenv(v, raising = False)

@pytest.fixture
def logRecords():
    """ All loguru records emitted while a test runs """

    records = []
    handlerId = logger.add(lambda m: records.append(m.record),
                           level = 'DEBUG', format = '{message}')
    yield records
    logger.remove(handlerId)

@pytest.fixture
def engineDir(tmpdir):
    return str(tmpdir.mkdir('Engine').realpath())

@pytest.fixture(autouse = True)
def resetLogSettings():
    yield
    from sdkstage import log, error
    error.verbose = 0
    log.setVerbose(0)
    log.enableColorsByCli('no')
