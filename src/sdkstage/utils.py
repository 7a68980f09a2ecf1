# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import re
import io
import platform as _platform
from hashlib import sha1
from types import ModuleType

from sdkstage.pyutils import stringtype
from sdkstage.error import SdkStageError

_RE_TOLIST = re.compile(r"""((?:[^\s"']|"[^"]*"|'[^']*')+)""", re.ASCII)
_RE_SUBST_BUILTINVARS = re.compile(r"\$\((\s*(\w+)\s*)\)", re.ASCII)

def platform():
    """
    Return current system platform. It is always 'windows' for MS Windows.
    """

    result = sys.platform
    if result.startswith('win32'):
        return 'windows' # pragma: no cover
    if result.startswith('java'):
        return os.name # pragma: no cover

    # strip version digits, e.g. 'freebsd12' -> 'freebsd'
    return re.split(r'\d+$', result)[0]

PLATFORM = platform()

def hostOS():
    """
    Return current host operating system base name.
    It is 'windows' for MS Windows, MSYS2 and cygwin;
    'linux' for GNU/Linux; 'macos' for Mac OS, etc.
    """

    selector = {
        'cygwin' : 'windows',
        'msys'   : 'windows',
        'darwin' : 'macos',
    }

    return selector.get(PLATFORM, PLATFORM)

def toPosixArchName(name):
    """
    Get 'standard' POSIX names for machine architecture type.
    It means that for 'amd64' it returns 'x86_64', etc.
    """

    name = name.lower()
    namesMap = {
        'x86_64'  : 'x86_64',
        'amd64'   : 'x86_64',
        'i386'    : 'i386',
        'i686'    : 'i386',
        'x86'     : 'i386',
        'arm64'   : 'aarch64',
        'aarch64' : 'aarch64',
    }

    return namesMap.get(name, name)

def cpuArch():
    """ Return POSIX name of the machine architecture """
    return toPosixArchName(_platform.machine())

def stripQuotes(val):
    """
    Strip quotes ' or " from the begin and the end of a string but do it only
    if they are the same on both sides.
    """

    if len(val) < 2:
        return val

    first = val[0]
    last = val[-1]
    if first == last and first in ("'", '"'):
        return val[1:-1]

    return val


def toList(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    Quoted substrings with spaces are preserved.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val

    if not ('"' in val or "'" in val): # optimization
        return val.split()

    return [stripQuotes(x) for x in _RE_TOLIST.split(val)[1::2]]

def envValToBool(rawVal):
    """
    Return env val as native bool value.
    Returns False if not recognized.
    """

    result = False
    if rawVal:
        try:
            # value from os.environ is a string but it may be a digit
            result = bool(int(rawVal))
        except ValueError:
            result = rawVal in ('true', 'True', 'yes')

    return result

def substBuiltInVars(strval, svars, notHandled = None):
    """
    Return string with $(VAR) replaced by the value of VAR taken from a dict.
    Names of variables that were not found are added into 'notHandled'
    if it is not None, such variables are left as is.
    """

    if '$' not in strval: # optimization
        return strval

    def replaceVar(match):
        foundName = match.group(2)
        result = svars.get(foundName)
        if result is None:
            if notHandled is not None:
                notHandled.add(foundName)
            return match.group(0)
        return result

    return _RE_SUBST_BUILTINVARS.sub(replaceVar, strval)

def _hashFile(hashobj, path):

    with open(path, 'rb') as file:
        result = True
        while result:
            result = file.read(200000)
            hashobj.update(result)
    return hashobj

def hashFile(path):
    """ Hash file by using sha1 """
    return _hashFile(sha1(), path).digest()

def loadPyFile(filepath, name = None):
    """
    Load python file as a module object without importing it: the module
    is not stored in sys.modules.
    """

    if name is None:
        name = os.path.splitext(os.path.basename(filepath))[0]

    try:
        with io.open(filepath, 'rt', encoding = 'utf-8') as file:
            code = file.read()
    except EnvironmentError as pex:
        raise SdkStageError('Could not read the file %r' % filepath) from pex

    module = ModuleType(name)
    module.__file__ = filepath
    module.__package__ = ''

    # pylint: disable = exec-used
    exec(compile(code, filepath, 'exec'), module.__dict__)
    return module
