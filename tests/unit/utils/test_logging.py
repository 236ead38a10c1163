"""Unit tests for JSON logging in logging.py.

Test coverage includes:

1. JsonFormatter output
   - UTC millisecond timestamps, level, logger and message.
   - Outcome fields (event, shortUrl, errorCode) first, then other `extra` fields and formatted exceptions.

2. initialize_logging() configuration
"""

import json
import sys
import logging

import pytest
from freezegun import freeze_time

from numshortener.utils.logging import JsonFormatter, initialize_logging


def make_record(msg: str = 'Shortened URL. Responding with 200.', exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name='numshortener.lambdas.shorten_url.app',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


# -------------------------------
# 1. JsonFormatter output
# -------------------------------


@freeze_time('2026-10-18 12:00:00')
def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '2026-10-18T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'numshortener.lambdas.shorten_url.app',
        'message': 'Shortened URL. Responding with 200.',
    }


def test_json_formatter_includes_extra_fields():
    log = json.loads(JsonFormatter().format(make_record(event='URL_SHORTENED', shortUrl=2)))

    assert log['event'] == 'URL_SHORTENED'
    assert log['shortUrl'] == 2
    assert 'pathname' not in log
    assert 'args' not in log


def test_json_formatter_orders_outcome_fields_after_message():
    record = make_record(reason='timed out', errorCode='validation:unresolvable_host', shortUrl=2, event='INVALID_URL')

    keys = list(json.loads(JsonFormatter().format(record)))

    assert keys == ['timestamp', 'level', 'logger', 'message', 'event', 'shortUrl', 'errorCode', 'reason']


def test_json_formatter_serializes_unknown_types():
    log = json.loads(JsonFormatter().format(make_record(config={'memory': {}}, backend=object())))

    assert log['config'] == {'memory': {}}
    assert log['backend'].startswith('<object object')


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record('Failed to register URL.', exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']
    assert 'Traceback' in log['exception']


# -------------------------------
# 2. initialize_logging() configuration
# -------------------------------


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize('log_level, expected', [(None, logging.INFO), ('debug', logging.DEBUG), ('WARNING', logging.WARNING)])
def test_initialize_logging(monkeypatch, restore_root_logger, log_level, expected):
    if log_level is None:
        monkeypatch.delenv('LOG_LEVEL', raising=False)
    else:
        monkeypatch.setenv('LOG_LEVEL', log_level)

    initialize_logging()

    assert restore_root_logger.level == expected
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in restore_root_logger.handlers)
