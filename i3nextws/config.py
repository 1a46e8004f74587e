import os

import toml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__),
                                   'default_config.toml')
XDG_CONFIG_HOME = os.environ.get('XDG_CONFIG_HOME',
                                 os.path.expandvars('$HOME/.config'))
CONFIG_PATH = os.path.join(XDG_CONFIG_HOME, 'i3-next-workspace',
                           'config.toml')

_CONFIG_TYPES = {
    'log_level': str,
    'switch': bool,
    'dry_run': bool,
}


class ConfigError(Exception):
    pass


def merge_config(merge_from, merge_into):
    for key, value in merge_from.items():
        if isinstance(value, dict):
            merge_config(value, merge_into.setdefault(key, {}))
        elif key not in merge_into:
            merge_into[key] = value


def validate_config(config) -> None:
    for key, value in config.items():
        if key not in _CONFIG_TYPES:
            raise ConfigError(f'Unknown config key: "{key}"')
        expected_type = _CONFIG_TYPES[key]
        if not isinstance(value, expected_type):
            raise ConfigError(
                f'Config key "{key}" must be of type '
                f'{expected_type.__name__}, got: {value!r}')


def _load(path):
    try:
        return toml.load(path)
    except toml.TomlDecodeError as e:
        raise ConfigError(f'Failed parsing config file {path}: {e}') from e


def get_config_with_defaults(path=None, fail_if_missing=False):
    if path is None:
        path = CONFIG_PATH
    if fail_if_missing and not os.path.exists(path):
        raise ConfigError(f'No config file found in {path}')
    config = {}
    if os.path.exists(path):
        config = _load(path)
    merge_config(_load(DEFAULT_CONFIG_PATH), config)
    validate_config(config)
    return config
