"""
Client configuration: environment enum, validated config object, YAML loading.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from logarc.exceptions import InvalidConfigurationError, MissingCredentialError

DEFAULT_ENDPOINT = 'https://logarc.com/api'
DEFAULT_TIMEZONE = 'UTC'


class AppEnv(str, Enum):
    """Supported application environments"""
    LOCAL = 'local'
    DEVELOPMENT = 'development'
    STAGING = 'staging'
    PRODUCTION = 'production'


@dataclass(frozen=True)
class LogClientConfig:
    """
    Immutable LogArc client configuration.

    Validation happens on construction:
    - missing/empty project_key raises MissingCredentialError
    - environment outside AppEnv raises InvalidConfigurationError
    - unknown IANA timezone raises InvalidConfigurationError

    Empty endpoint/environment/timezone fall back to their defaults.
    """
    project_key: Optional[str] = None
    endpoint: str = DEFAULT_ENDPOINT
    environment: Union[AppEnv, str] = AppEnv.PRODUCTION
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self):
        if not self.project_key:
            raise MissingCredentialError()

        # frozen dataclass, so normalized values go through object.__setattr__
        endpoint = (self.endpoint or DEFAULT_ENDPOINT).rstrip('/')
        object.__setattr__(self, 'endpoint', endpoint)

        env = self.environment or AppEnv.PRODUCTION
        try:
            env = AppEnv(env)
        except ValueError:
            raise InvalidConfigurationError(f"Invalid environment: {env}") from None
        object.__setattr__(self, 'environment', env)

        timezone = self.timezone or DEFAULT_TIMEZONE
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            raise InvalidConfigurationError(f"Invalid timezone: {timezone}") from None
        object.__setattr__(self, 'timezone', timezone)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'LogClientConfig':
        """
        Build a config from a plain dict.

        Accepts `env` as an alias of `environment` and `projectKey` as an
        alias of `project_key`. Unknown keys are ignored.
        """
        if not isinstance(mapping, Mapping):
            raise InvalidConfigurationError(
                f"Configuration must be a mapping, got {type(mapping).__name__}"
            )

        return cls(
            project_key=mapping.get('project_key', mapping.get('projectKey')),
            endpoint=mapping.get('endpoint') or DEFAULT_ENDPOINT,
            environment=mapping.get('environment', mapping.get('env')) or AppEnv.PRODUCTION,
            timezone=mapping.get('timezone') or DEFAULT_TIMEZONE,
        )


def load_config(path: Union[str, Path], section: str = 'logarc') -> LogClientConfig:
    """
    Load client configuration from a YAML file.

    Args:
        path: Path to the YAML file
        section: Top-level key holding the client settings. When the key is
            absent the whole document is used.

    Returns:
        Validated LogClientConfig

    Example config.yml:
        logarc:
          project_key: abc123
          environment: staging
          timezone: Asia/Kathmandu
    """
    config_path = Path(path)
    with config_path.open() as f:
        config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, Mapping):
        raise InvalidConfigurationError(f"{config_path} does not contain a mapping")

    settings = config_data.get(section, config_data)
    if not isinstance(settings, Mapping):
        raise InvalidConfigurationError(f"'{section}' section in {config_path} is not a mapping")

    return LogClientConfig.from_mapping(settings)
