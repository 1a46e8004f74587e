import logging

import pytest

from i3nextws import log_util


@pytest.mark.parametrize('level_name,level', [
    ('debug', logging.DEBUG),
    ('INFO', logging.INFO),
    ('warning', logging.WARNING),
    ('critical', logging.CRITICAL),
    ('verbose', logging.WARNING),
])
def test_parse_level(level_name, level):
    assert log_util.parse_level(level_name) == level


def test_init_logger_replaces_handlers(monkeypatch, tmp_path):
    monkeypatch.setattr(log_util, '_SYSLOG_ADDRESS',
                        str(tmp_path / 'missing-log-socket'))
    previous_level = log_util.logger.level
    try:
        log_util.init_logger('i3-next-workspace', 'debug')
        log_util.init_logger('i3-next-workspace', 'info')
        added = [
            h for h in log_util.logger.handlers if h in log_util._handlers  # pylint: disable=protected-access
        ]
        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert log_util.logger.level == logging.INFO
    finally:
        for handler in log_util._handlers:  # pylint: disable=protected-access
            log_util.logger.removeHandler(handler)
        log_util._handlers.clear()  # pylint: disable=protected-access
        log_util.logger.setLevel(previous_level)
