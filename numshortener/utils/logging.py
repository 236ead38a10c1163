"""JSON logs on stdout, one object per line, for CloudWatch.

Each lambda package calls `initialize_logging()` from its `__init__.py`, so
the configuration is in place before the handler module logs anything.

A line looks like:

    {"timestamp": "2026-10-18T12:00:00.000Z", "level": "INFO",
     "logger": "numshortener.lambdas.redirect_url.app",
     "message": "Redirecting client to original URL. Responding with 302.",
     "event": "REDIRECT_SUCCESS", "shortUrl": "2"}

The outcome fields handlers attach (`event`, `shortUrl`, `errorCode`) always
follow the message, then any other `extra` values, then the traceback.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from numshortener.constants import ENV


# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime', 'taskName'}

OUTCOME_FIELDS = ('event', 'shortUrl', 'errorCode')


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, its outcome fields and extras as one JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}

        line = {
            'timestamp': _utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        line.update((field, extras.pop(field)) for field in OUTCOME_FIELDS if field in extras)
        line.update(extras)

        if record.exc_info:
            line['exception'] = self.formatException(record.exc_info)

        return json.dumps(line, default=str)


def initialize_logging() -> None:
    """Send JSON logs at `LOG_LEVEL` (default INFO) to stdout"""
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {'class': 'logging.StreamHandler', 'formatter': 'json', 'stream': 'ext://sys.stdout'},
            },
            'root': {'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(), 'handlers': ['stdout']},
        }
    )
