import argparse
from typing import Optional

from i3nextws import config as config_lib

_LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical']


class ExitCalledError(Exception):

    def __init__(self, parser: argparse.ArgumentParser, status: int,
                 message: Optional[str]):
        super().__init__(message)
        self.parser = parser
        self.status = status
        self.message = message


class ArgumentParserNoExit(argparse.ArgumentParser):
    """An ArgumentParser that raises ExitCalledError instead of exiting.

    This lets the caller decide what to print and which status to exit with
    on usage errors.
    """

    def exit(self, status=0, message=None):
        raise ExitCalledError(self, status, message)

    def error(self, message):
        raise ExitCalledError(self, 2, f'error: {message}')


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--dry-run',
        action='store_true',
        default=None,
        help='If true, will only log the i3 commands instead of sending them.')
    parser.add_argument('--log-level',
                        choices=_LOG_LEVELS,
                        default=None,
                        help='Logging level for stderr and syslog.')
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a TOML config file. Defaults to '
        f'{config_lib.CONFIG_PATH} if it exists.')


def get_config_with_overrides(args: argparse.Namespace):
    if args.config:
        config = config_lib.get_config_with_defaults(args.config,
                                                     fail_if_missing=True)
    else:
        config = config_lib.get_config_with_defaults()
    for key in ['dry_run', 'log_level']:
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    if getattr(args, 'switch', False):
        config['switch'] = True
    return config
