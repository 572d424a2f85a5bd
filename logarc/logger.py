"""
Diagnostic channel for the client itself.

Failed deliveries are reported on the `logarc` logger before the error is
re-raised to the caller. The logger is only given a JSON stderr handler when
the host application has left it untouched; any level or handler the
application sets on `logarc` wins.
"""

import json
import logging
from datetime import datetime, timezone

DIAGNOSTIC_LOGGER_NAME = 'logarc'


class JSONFormatter(logging.Formatter):
    """
    One JSON object per failed delivery:
    {"timestamp": "...Z", "level": "ERROR", "logger": "logarc",
     "message": "LogArc request failed", "context": {"status": 500, "body": ...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc)
                                 .replace(tzinfo=None).isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # status/body or network error message, passed via extra={'context': ...}
        context = getattr(record, 'context', None)
        if context:
            entry['context'] = context

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc),
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def get_logger(name: str = DIAGNOSTIC_LOGGER_NAME) -> logging.Logger:
    """
    Default diagnostic sink for LogClient.

    A logger with no handlers and no level of its own gets a stderr handler
    with JSONFormatter and level WARNING. A logger the application already
    configured is returned unchanged.
    """
    logger = logging.getLogger(name)

    if not logger.handlers and logger.level == logging.NOTSET:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger
