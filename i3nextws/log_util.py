import logging
import logging.handlers
import os

_LOG_FMT_STDERR = (
    '%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s')
_LOG_FMT_SYSLOG = '%(levelname)s [%(filename)s:%(lineno)d] %(message)s'
_SYSLOG_ADDRESS = '/dev/log'

logger = logging.getLogger()

# Handlers added by init_logger, so that a second call replaces them.
_handlers = []


def parse_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def _create_syslog_handler(name: str):
    # Containers and some minimal systems don't run a syslog daemon.
    if not os.path.exists(_SYSLOG_ADDRESS):
        return None
    handler = logging.handlers.SysLogHandler(address=_SYSLOG_ADDRESS)
    handler.setFormatter(logging.Formatter(f'{name}: {_LOG_FMT_SYSLOG}'))
    return handler


def init_logger(name: str, level_name: str = 'warning') -> None:
    for handler in _handlers:
        logger.removeHandler(handler)
    _handlers.clear()
    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(logging.Formatter(_LOG_FMT_STDERR))
    _handlers.append(stderr_handler)
    syslog_handler = _create_syslog_handler(name)
    if syslog_handler is not None:
        _handlers.append(syslog_handler)
    for handler in _handlers:
        logger.addHandler(handler)
    logger.setLevel(parse_level(level_name))
