# coding=utf-8
#

"""
 Copyright (c) 2021, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Loading and validation of stage config files (stageconf.yaml/.yml/.py)
"""

__all__ = [
    'StageConf',
    'findConfFile',
    'load',
    'fromPreset',
    'makeManifest',
]

import os
import io

import yaml

from sdkstage import presets, log
from sdkstage.constants import CWD, STAGECONF_FILENAMES, DEFAULT_FILE_MASK
from sdkstage.error import SdkStageConfError, SdkStageConfTypeError
from sdkstage.error import SdkStageConfValueError, SdkStagePathNotFoundError
from sdkstage.pyutils import maptype, stringtype
from sdkstage.utils import loadPyFile, substBuiltInVars
from sdkstage.pathutils import getNativePath
from sdkstage.manifest import ManifestBuilder

try:
    YamlLoader = yaml.CSafeLoader
except AttributeError:
    YamlLoader = yaml.SafeLoader

isfile = os.path.isfile
joinpath = os.path.join
normpath = os.path.normpath

_TOP_KEYS = ('target', 'preset', 'rules')
_TARGET_KEYS = ('program', 'platform')
_RULE_KEYS = ('src', 'mask', 'dest')
# built-in variables with absolute paths
_SRC_ONLY_VARS = ('OutputRoot', 'EngineDir')

class StageConf(object):
    """
    Validated stage config
    """

    __slots__ = ('path', 'startdir', 'target', 'preset', 'rules')

    def __init__(self, data, path = None):
        self.path = path
        self.startdir = os.path.dirname(path) if path else CWD
        self.target = dict(data.get('target') or {})
        self.preset = data.get('preset')
        self.rules = list(data.get('rules') or [])

    @property
    def program(self):
        """ Program name from the config or from its preset """
        program = self.target.get('program')
        if not program and self.preset:
            program = presets.get(self.preset)['target'].get('program')
        return program

    @property
    def platform(self):
        """ Target platform from the config """
        return self.target.get('platform')

def _checkStr(value, fullkey, confpath):
    if not isinstance(value, stringtype):
        msg = "Param %r should be string, not `%r`." % (fullkey, value)
        raise SdkStageConfTypeError(msg, confpath = confpath)

def _checkKeys(node, allowed, fullkey, confpath):
    if not isinstance(node, maptype):
        msg = "Param %r should be a dict/another map type." % fullkey
        raise SdkStageConfTypeError(msg, confpath = confpath)

    for key in node:
        if key not in allowed:
            msg = "Unknown name %r in %r. Allowed names: %s." \
                  % (key, fullkey, ', '.join(allowed))
            raise SdkStageConfValueError(msg, confpath = confpath)

def _validateRule(rule, fullkey, confpath):

    _checkKeys(rule, _RULE_KEYS, fullkey, confpath)

    for key in ('src', 'dest'):
        if key not in rule:
            msg = "Param %r is required in %r." % (key, fullkey)
            raise SdkStageConfValueError(msg, confpath = confpath)
        _checkStr(rule[key], '%s.%s' % (fullkey, key), confpath)

    mask = rule.get('mask', DEFAULT_FILE_MASK)
    masks = mask if isinstance(mask, list) else [mask]
    if not masks:
        msg = "Param '%s.mask' should not be empty." % fullkey
        raise SdkStageConfValueError(msg, confpath = confpath)
    for item in masks:
        _checkStr(item, '%s.mask' % fullkey, confpath)

def validate(data, confpath = None):
    """
    Validate data of stage config. Raises SdkStageConfError if it's invalid.
    """

    _checkKeys(data, _TOP_KEYS, 'stageconf', confpath)

    target = data.get('target')
    if target is not None:
        _checkKeys(target, _TARGET_KEYS, 'target', confpath)
        for key, value in target.items():
            _checkStr(value, 'target.%s' % key, confpath)

    preset = data.get('preset')
    if preset is not None:
        _checkStr(preset, 'preset', confpath)
        if presets.get(preset) is None:
            msg = "Unknown preset %r. Known presets: %s." \
                  % (preset, ', '.join(presets.names()))
            raise SdkStageConfValueError(msg, confpath = confpath)

    rules = data.get('rules')
    if rules is not None:
        if not isinstance(rules, list):
            msg = "Param 'rules' should be list of dicts."
            raise SdkStageConfTypeError(msg, confpath = confpath)
        for i, rule in enumerate(rules):
            _validateRule(rule, 'rules[%d]' % i, confpath)

def _loadYaml(filepath):

    with io.open(filepath, 'rt', encoding = 'utf-8') as stream:
        try:
            data = yaml.load(stream, YamlLoader)
        except yaml.YAMLError as ex:
            raise SdkStageConfError(ex = ex, confpath = filepath) from ex

    if data is None:
        raise SdkStageConfError("File %r has no config data" % filepath)

    if not isinstance(data, maptype):
        raise SdkStageConfError("File %r has invalid structure" % filepath)

    return data

def _loadPy(filepath):

    module = loadPyFile(filepath)
    return { k:v for k, v in vars(module).items() if k in _TOP_KEYS }

def findConfFile(dpath, fname = None):
    """
    Try to find stageconf file.
    Returns filename if found or None
    """
    if fname:
        if isfile(joinpath(dpath, fname)):
            return fname
        return None

    for name in STAGECONF_FILENAMES:
        if isfile(joinpath(dpath, name)):
            return name
    return None

def load(filepath = None, dirpath = CWD):
    """
    Load and validate stage config.
    If 'filepath' is not set then stageconf file is searched in 'dirpath'.
    Returns StageConf or None if file was not found in 'dirpath'.
    """

    if filepath:
        filepath = os.path.abspath(filepath)
        if not isfile(filepath):
            raise SdkStagePathNotFoundError(filepath,
                        "Stage config %r doesn't exist." % filepath)
    else:
        filename = findConfFile(dirpath)
        if not filename:
            return None
        filepath = joinpath(dirpath, filename)

    log.debug("loading stage config %r" % filepath)

    if filepath.endswith('.py'):
        data = _loadPy(filepath)
    else:
        data = _loadYaml(filepath)

    validate(data, filepath)
    return StageConf(data, filepath)

def fromPreset(name):
    """
    Make StageConf from a built-in preset
    """

    data = { 'preset' : name }
    validate(data)
    return StageConf(data)

def _substVars(value, svars, fullkey, confpath, forbidden = ()):
    notHandled = set()
    value = substBuiltInVars(value, svars, notHandled)
    for name in forbidden:
        if name in notHandled:
            msg = "Variable $(%s) can't be used in %r: it makes the path " \
                  "absolute but destination is relative to the output root." \
                  % (name, fullkey)
            raise SdkStageConfValueError(msg, confpath = confpath)
    if notHandled:
        msg = "Unknown variable(s) %s in %r." \
              % (', '.join(sorted(notHandled)), fullkey)
        raise SdkStageConfValueError(msg, confpath = confpath)
    return getNativePath(value)

def makeManifest(conf, ctx):
    """
    Make Manifest from StageConf for the StageContext.
    Rules of preset go first.
    """

    svars = ctx.builtInVars()
    destVars = { k:v for k, v in svars.items() if k not in _SRC_ONLY_VARS }
    rules = []
    if conf.preset:
        rules.extend(presets.get(conf.preset)['rules'])
    rules.extend(conf.rules)

    builder = ManifestBuilder()
    for i, rule in enumerate(rules):
        fullkey = 'rules[%d]' % i
        src = _substVars(rule['src'], svars, fullkey + '.src', conf.path)
        if not os.path.isabs(src):
            src = joinpath(conf.startdir, src)
        dest = _substVars(rule['dest'], destVars, fullkey + '.dest',
                          conf.path, _SRC_ONLY_VARS)

        mask = rule.get('mask', DEFAULT_FILE_MASK)
        if isinstance(mask, list):
            mask = ' '.join(mask)

        builder.addRule(normpath(src), mask, dest)

    return builder.build()
