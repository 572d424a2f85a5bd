"""
Error taxonomy for the LogArc client.
"""


class LogArcError(Exception):
    """Base class for errors raised by logarc"""


class MissingCredentialError(LogArcError):
    """Project key not found in configuration"""

    def __init__(self, message: str = "Project key not found in configuration."):
        super().__init__(message)


class InvalidConfigurationError(LogArcError):
    """Configuration value is not acceptable (environment, timezone, ...)"""


class InvalidCredentialError(LogArcError):
    """Server rejected the project key (HTTP 422)"""

    def __init__(self, message: str = "Invalid project key provided."):
        super().__init__(message)
