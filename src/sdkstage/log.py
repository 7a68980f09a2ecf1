# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
from loguru import logger

from sdkstage.constants import PLATFORM
from sdkstage.utils import envValToBool

class _Colors(object):
    """
    Names of loguru color markups. Any name can be used as an attribute or
    as a call argument: colors.CYAN or colors('CYAN').
    """

    _NAMES = {
        'NORMAL' : 'normal', 'BOLD' : 'bold',
        'RED' : 'red', 'GREEN' : 'green', 'YELLOW' : 'yellow',
        'BLUE' : 'blue', 'PINK' : 'magenta', 'CYAN' : 'cyan',
        'GREY' : 'white',
    }

    def __getattr__(self, name):
        return self(name)

    def __call__(self, name):
        return self._NAMES.get(name.upper(), 'normal')

colors = _Colors()

_LEVEL_COLORS = {
    'DEBUG'   : 'blue',
    'INFO'    : 'normal',
    'WARNING' : 'yellow',
    'ERROR'   : 'red',
}

_settings = {
    'colors' : False,
    'verbose' : 0,
    'handlers' : [],
}

def _formatRecord(record):
    color = record['extra'].get('color') or _LEVEL_COLORS.get(record['level'].name)
    fmt = '{message}'
    if color and color != 'normal':
        fmt = '<%s>{message}</%s>' % (color, color)
    return fmt + '\n{exception}'

# sinks are resolved on each call to follow replaced sys.stdout/sys.stderr
def _writeOut(message):
    sys.stdout.write(message)
    sys.stdout.flush()

def _writeErr(message):
    sys.stderr.write(message)
    sys.stderr.flush()

def _setup():
    for handlerId in _settings['handlers']:
        logger.remove(handlerId)

    level = 'DEBUG' if _settings['verbose'] > 0 else 'INFO'
    colorize = _settings['colors']

    _settings['handlers'] = [
        logger.add(_writeOut, level = level, format = _formatRecord,
                   colorize = colorize,
                   filter = lambda r: r['level'].no < logger.level('WARNING').no),
        logger.add(_writeErr, level = 'WARNING', format = _formatRecord,
                   colorize = colorize),
    ]

# loguru adds its own stderr handler with id 0
logger.remove()
_setup()

def _log(level, msg, color = None):
    logger.bind(color = color).opt(depth = 2).log(level, '{}', msg)

def debug(msg, color = None):
    """ Log debug message """
    _log('DEBUG', msg, color)

def info(msg, color = None):
    """ Log info message """
    _log('INFO', msg, color)

def warn(msg, color = None):
    """ Log warning message """
    _log('WARNING', msg, color)

def error(msg, color = None):
    """ Log error message """
    _log('ERROR', msg, color)

def pprint(color, msg):
    """ Print message with selected color """
    _log('INFO', msg, colors(color))

def enableColorsByCli(colorArg):
    """
    Set up log colors by arg from CLI
    """

    setting = {'yes' : 2, 'auto' : 1, 'no' : 0}[colorArg]
    if setting == 1:
        onTTY = os.environ.get('SDKSTAGE_ON_TTY')
        if onTTY:
            onTTY = envValToBool(onTTY)
        else:
            onTTY = sys.stderr.isatty() or sys.stdout.isatty()
        if not onTTY:
            setting = 0

    if setting == 1:
        defaultTerm = 'dumb'
        if PLATFORM == 'windows':
            defaultTerm = ''
        if os.environ.get('TERM', defaultTerm) in ('dumb', 'emacs'):
            setting = 0

    _settings['colors'] = bool(setting)
    _setup()

def colorsEnabled():
    """ Return True if color output is enabled """
    return _settings['colors']

def verbose():
    """ Get current verbosity level """
    return _settings['verbose']

def setVerbose(value):
    """ Set verbosity level: 0 shows info and above, 1+ shows debug too """
    _settings['verbose'] = value or 0
    _setup()

def printStep(msg):
    """
    Log some step in sdkstage command
    """

    info(msg, color = colors.CYAN)
