"""
logarc: Client library for the LogArc remote logging service

Formats leveled log events with timestamp, environment, caller location and
optional user context, and POSTs each one to the configured endpoint.
"""

from logarc.client import LogClient
from logarc.config import AppEnv, LogClientConfig, load_config
from logarc.event import LogEvent, LogLevel
from logarc.exceptions import (
    InvalidConfigurationError,
    InvalidCredentialError,
    LogArcError,
    MissingCredentialError
)

__all__ = [
    'LogClient', 'LogClientConfig', 'AppEnv', 'LogLevel', 'LogEvent', 'load_config',
    'LogArcError', 'MissingCredentialError', 'InvalidConfigurationError', 'InvalidCredentialError'
]
__version__ = '1.0.0'
