"""
Log event record plus the metadata helpers that feed it.
"""

import inspect
import json
from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum
from typing import Any, Collection, Dict, Optional, Tuple

UNKNOWN_CLASS = 'UnknownClass'

# Wire format: local wall-clock time with a literal Z appended
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

_MACHINERY_MODULES = frozenset({'logarc.event', 'logarc.client'})


class LogLevel(str, Enum):
    """Severity levels accepted by the LogArc service"""
    DEBUG = 'debug'
    INFO = 'info'
    NOTICE = 'notice'
    WARNING = 'warning'
    ERROR = 'error'
    CRITICAL = 'critical'
    ALERT = 'alert'
    EMERGENCY = 'emergency'


@dataclass
class LogEvent:
    """Single structured record sent per logging call"""
    level: LogLevel
    message: Optional[str]
    data: Any
    timestamp: str
    class_name: str
    method_name: str
    line_number: int
    environment: str
    project_key: str
    user: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation, keyed the way the server expects"""
        return {
            'project_key': self.project_key,
            'log_timestamp': self.timestamp,
            'app_env': self.environment,
            'level': self.level.value,
            'class_name': self.class_name,
            'method_name': self.method_name,
            'line_number': self.line_number,
            'message': self.message,
            'data': self.data,
            'user': self.user,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), default=str)


def format_timestamp(tz: tzinfo, now: Optional[datetime] = None) -> str:
    """
    Format the current time in `tz` as YYYY-MM-DDTHH:MM:SSZ.

    The Z is literal: the digits are local time in `tz`, not UTC.
    """
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    return now.strftime(TIMESTAMP_FORMAT)


def caller_info(skip_modules: Collection[str] = _MACHINERY_MODULES) -> Tuple[str, str, int]:
    """
    Best-effort (class_name, method_name, line_number) of the code that
    called into the client.

    Walks up from the current frame past every frame that belongs to
    `skip_modules`. class_name is the class of `self`/`cls` for methods and
    the module name for plain functions. Never raises; falls back to
    ('UnknownClass', 'UnknownClass', 0).
    """
    frame = None
    try:
        frame = inspect.currentframe()
        while frame is not None and frame.f_globals.get('__name__') in skip_modules:
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_CLASS, UNKNOWN_CLASS, 0

        method_name = frame.f_code.co_name
        owner = frame.f_locals.get('self', frame.f_locals.get('cls'))
        if isinstance(owner, type):
            class_name = owner.__name__
        elif owner is not None:
            class_name = type(owner).__name__
        else:
            class_name = frame.f_globals.get('__name__') or UNKNOWN_CLASS

        return class_name, method_name, frame.f_lineno or 0
    except Exception:
        return UNKNOWN_CLASS, UNKNOWN_CLASS, 0
    finally:
        del frame
