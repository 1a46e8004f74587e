#!/usr/bin/env python3

from __future__ import annotations

import argparse
import os.path
import pprint
import sys
from typing import List, Optional

import i3ipc

from i3nextws import cli_util
from i3nextws import config as config_lib
from i3nextws import controller as numbering_controller
from i3nextws import i3_proxy
from i3nextws import log_util
from i3nextws.errors import WorkspaceNumberingError

_DESCRIPTION = 'Move the focused container to the next free i3 workspace.'
_EPILOG = '''
modes:
  [no args]     Move the focused container to the lowest unused workspace
                number
  --switch      Move the focused container to the lowest unused workspace
                number and switch to it
  --renumber    Renumber all workspaces to remove gaps, keeping their windows
                and the focused workspace
  [other args]  Show this help message
'''

init_logger = log_util.init_logger
logger = log_util.logger


def _create_args_parser() -> cli_util.ArgumentParserNoExit:
    parser = cli_util.ArgumentParserNoExit(
        prog='i3-next-workspace',
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        '--switch',
        action='store_true',
        help='Switch to the new workspace after moving the focused container.')
    parser.add_argument(
        '--renumber',
        action='store_true',
        help='Renumber all workspaces to be consecutive, starting from 1.')
    cli_util.add_common_args(parser)
    return parser


def run_command(i3_connection, args, config):
    logger.debug('Using merged config:\n%s', pprint.pformat(config))
    controller = numbering_controller.WorkspaceNumberingController(
        i3_proxy.I3Proxy(i3_connection, config['dry_run']))
    if args.renumber:
        return controller.renumber_workspaces()
    return controller.move_to_new_workspace(config['switch'])


def main(argv: Optional[List[str]] = None) -> None:
    parser = _create_args_parser()
    try:
        args = parser.parse_args(argv)
    except cli_util.ExitCalledError as e:
        # Unknown arguments only print the usage, nothing is done.
        if e.status != 0:
            if e.message:
                sys.stderr.write(f'{e.message}\n')
            parser.print_help()
        sys.exit(0)
    try:
        config = cli_util.get_config_with_overrides(args)
    except config_lib.ConfigError as e:
        sys.exit(str(e))
    init_logger(os.path.basename(sys.argv[0]), config['log_level'])
    try:
        i3_connection = i3ipc.Connection()
    # i3ipc raises a plain Exception when the IPC socket can't be found.
    except Exception as e:  # pylint: disable=broad-except
        logger.error('Failed connecting to i3: %s', e)
        sys.exit(1)
    try:
        run_command(i3_connection, args, config)
    except WorkspaceNumberingError as e:
        logger.error('%s', e)
        sys.exit(1)


if __name__ == '__main__':
    main()
