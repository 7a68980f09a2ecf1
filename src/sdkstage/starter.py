# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
if sys.hexversion < 0x3060000:
    raise ImportError('Python >= 3.6 is required')

#pylint: disable=wrong-import-position
from sdkstage import log, error

EXITCODE_INTERRUPTED = 68

def handleCLI(args):
    """
    Handle CLI and return command object
    """
    from sdkstage import cli
    return cli.parseAll(args)

def _reportError(ex, verbose):
    if verbose > 1:
        log.pprint('RED', ex.fullmsg)
    log.error(ex.msg)

def run(args = None):
    """
    Prepare and run SdkStage command. Returns exit code.
    """

    from sdkstage.commands import COMMANDS

    if args is None:
        args = sys.argv

    cmd = None
    try:
        cmd = handleCLI(args)

        verbose = cmd.args.verbose or 0
        error.verbose = verbose
        log.setVerbose(verbose)

        return COMMANDS[cmd.name]().run(cmd.args)

    except error.SdkStageError as ex:
        _reportError(ex, cmd.args.verbose if cmd else 0)
        return 1
    except KeyboardInterrupt:
        log.pprint('RED', 'Interrupted')
        return EXITCODE_INTERRUPTED

def main():
    """ Entry point for console script """
    sys.exit(run())
