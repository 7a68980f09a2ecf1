# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import argparse

from sdkstage.constants import APPNAME, CAP_APPNAME, CWD
from sdkstage.pyutils import struct
from sdkstage.pathutils import unfoldPath
from sdkstage import log, presets
from sdkstage.error import SdkStageLogicError
from sdkstage.autodict import AutoDict as _AutoDict

ParsedCommand = struct('ParsedCommand', 'name, args')

"""
Contains configurable 'commands' and 'options'
"""
config = _AutoDict()

class Command(_AutoDict):
    """ Class to set up a command for CLI """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setdefault('aliases', [])
        self.setdefault('usageTextTempl', "%s [options]")

# Declarative list of commands in CLI
config.commands = [
    Command(
        name = 'help',
        description = 'show help for a given topic or a help overview',
        usageTextTempl = "%s [command/topic]",
    ),
    Command(
        name = 'stage',
        aliases = ['st'],
        description = 'copy documentation and headers into the program binaries dir',
    ),
    Command(
        name = 'show',
        aliases = ['ls'],
        description = 'show resolved stage rules without copying',
    ),
    Command(
        name = 'version',
        aliases = ['ver'],
        description = 'print version of %s' % APPNAME,
    ),
]

def _makeCmdNameMap(commands):
    """ Make map: cmd name/alias -> Command """

    cmdNameMap = {}
    for cmd in commands:
        for name in [cmd.name] + cmd.aliases:
            if name in cmdNameMap:
                raise SdkStageLogicError("Command name/alias %r is used "
                                         "more than once" % name)
            cmdNameMap[name] = cmd
    return cmdNameMap

class Option(_AutoDict):
    """ Class to set up an option for CLI """

    NOTARGPARSE_FIELDS = ('names', 'commands', 'isglobal')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setdefault('isglobal', False)
        self.setdefault('commands', [])
        self.setdefault('action', 'store')
        self.setdefault('type', None)
        self.setdefault('choices', None)
        self.setdefault('default', None)

# All commands which use stage rules
STAGE_CMD_NAMES = ['stage', 'show']

# Declarative list of options in CLI
config.options = [
    # global options that are used before command in cmd line
    Option(
        names = ['-h', '--help'],
        isglobal = True,
        action = 'help',
        help = 'show this help message and exit',
    ),
    Option(
        names = ['--version'],
        isglobal = True,
        action = 'store_true',
        help = 'alias for command "version"',
    ),
    # command options
    Option(
        names = ['-h', '--help'],
        action = 'help',
        commands = [x.name for x in config.commands], # for all commands
        help = 'show this help message for command and exit',
    ),
    Option(
        names = ['-e', '--engine-dir'],
        dest = 'engineDir',
        commands = STAGE_CMD_NAMES,
        help = 'engine root directory',
    ),
    Option(
        names = ['-p', '--platform'],
        commands = STAGE_CMD_NAMES,
        help = 'target platform, e.g. Win64, Linux, Mac (detected if not set)',
    ),
    Option(
        names = ['-n', '--program'],
        commands = STAGE_CMD_NAMES,
        help = 'program name, it is the last dir of the output root',
    ),
    Option(
        names = ['-c', '--conf'],
        commands = STAGE_CMD_NAMES,
        help = 'stage config file [default: stageconf.py/.yaml/.yml in cwd]',
    ),
    Option(
        names = ['-P', '--preset'],
        choices = presets.names(),
        commands = STAGE_CMD_NAMES,
        help = 'built-in stage rules',
    ),
    Option(
        names = ['--build-failed'],
        dest = 'buildFailed',
        action = "store_true",
        commands = ['stage'],
        help = 'primary build failed: nothing is staged',
    ),
    Option(
        names = ['-S', '--checksum'],
        action = "store_true",
        commands = ['stage', 'show'],
        help = 'compare files by content instead of size and time (non-Windows)',
    ),
    Option(
        names = ['-v', '--verbose'],
        action = "count",
        commands = [x.name for x in config.commands if x.name != 'help'],
        help = 'verbosity level -v or -vv',
    ),
    Option(
        names = ['--color'],
        choices = ('yes', 'no', 'auto'),
        commands = [x.name for x in config.commands if x.name != 'version'],
        help = 'whether to use colors (yes/no/auto)',
    ),
]

def _getOptDefaults():

    # env vars are read on each parsing, not once at import
    _getenv = os.environ.get
    return {
        'verbose' : 0,
        'color' : _getenv('NOCOLOR', '') and 'no' or 'auto',
        'engine-dir' : _getenv('ENGINE_DIR', None),
        'platform' : _getenv('TARGET_PLATFORM', None),
        'program' : _getenv('SDKSTAGE_PROGRAM', None),
    }

class _HelpFormatter(argparse.HelpFormatter):
    """ Some customization"""

    def __init__(self, prog):
        super().__init__(prog, max_help_position = 27)
        self._action_max_length = 23

class CmdLineParser(object):
    """
    CLI for SdkStage.
    """

    __slots__ = ('_parser', '_cmdHelps', '_cmdNameMap', '_command')

    def __init__(self, progName):

        self._command = None
        self._cmdNameMap = _makeCmdNameMap(config.commands)
        self._cmdHelps = {}
        defaults = _getOptDefaults()

        self._parser = argparse.ArgumentParser(
            prog = progName,
            formatter_class = _HelpFormatter,
            description = '%s: stages SDK documentation and headers '
                          'after a build' % CAP_APPNAME,
            usage = "%(prog)s <command> [options]",
            add_help = False,
        )

        group = self._parser.add_argument_group('global options')
        for opt in config.options:
            if opt.isglobal:
                self._addOption(group, opt, defaults)

        subparsers = self._parser.add_subparsers(title = 'list of commands',
                                    help = '', metavar = '', dest = 'command')

        for cmd in config.commands:
            names = '|'.join([cmd.name] + cmd.aliases)
            kwargs = dict(
                usage = "%s " % progName + cmd.usageTextTempl % names,
                help = cmd.description,
                description = cmd.description.capitalize(),
                aliases = cmd.aliases,
                formatter_class = _HelpFormatter,
            )

            if cmd.name == 'help':
                cmdParser = subparsers.add_parser(cmd.name, **kwargs)
                cmdParser.add_argument('topic', nargs = '?', default = 'overview')
                self._cmdHelps[cmd.name] = cmd.description
                continue

            cmdParser = subparsers.add_parser(cmd.name, add_help = False, **kwargs)
            group = cmdParser.add_argument_group('command options')
            for opt in config.options:
                if not opt.isglobal and cmd.name in opt.commands:
                    self._addOption(group, opt, defaults)
            self._cmdHelps[cmd.name] = cmdParser.format_help()

    @staticmethod
    def _addOption(target, opt, defaults):

        kwargs = { k:v for k, v in opt.items() \
                    if v is not None and k not in Option.NOTARGPARSE_FIELDS }

        default = defaults.get(opt.names[-1].lstrip('-'))
        if default is not None:
            kwargs['default'] = default
            kwargs['help'] += ' [default: %r]' % default

        target.add_argument(*opt.names, **kwargs)

    def _showHelp(self, topic):
        if topic == 'overview':
            self._parser.print_help()
            return True

        cmd = self._cmdNameMap.get(topic)
        if cmd is None:
            log.error("Unknown command/topic to show help: '%s'" % topic)
            return False

        print(self._cmdHelps[cmd.name])
        return True

    def parse(self, args = None, defaultCmd = 'stage'):
        """ Parse command line args """

        if args is None:
            args = sys.argv[1:]
        args = list(args)

        if args and args[0] == '--version':
            args[0] = 'version'
        elif not args or args[0].startswith('-'):
            # global help is not for the default command
            if not any(x in ('-h', '--help') for x in args):
                args.insert(0, defaultCmd)

        parsedArgs = _AutoDict(vars(self._parser.parse_args(args)))
        parsedArgs.pop('version', None)
        cmd = self._cmdNameMap[parsedArgs.pop('command')]
        self._command = ParsedCommand(name = cmd.name, args = parsedArgs)

        if cmd.name == 'help':
            sys.exit(not self._showHelp(parsedArgs.topic))

        for name in ('engineDir', 'conf'):
            if parsedArgs.get(name):
                parsedArgs[name] = unfoldPath(parsedArgs[name], CWD)

        return self._command

    @property
    def command(self):
        """ current command after last parsing of command line"""
        return self._command

def parseAll(args):
    """
    Parse all command line args with CmdLineParser.
    Param 'args' is like sys.argv: the first item is the program name.
    Returns selected command as object of ParsedCommand
    """

    return CmdLineParser(APPNAME).parse(args[1:])
