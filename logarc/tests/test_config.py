"""
Unit tests for client configuration.
"""

from pathlib import Path

import pytest

from logarc.config import AppEnv, LogClientConfig, load_config, DEFAULT_ENDPOINT
from logarc.exceptions import InvalidConfigurationError, MissingCredentialError


class TestLogClientConfig:
    """Test LogClientConfig validation and defaults"""

    def test_defaults(self):
        """Should fill endpoint, environment and timezone defaults"""
        config = LogClientConfig(project_key='abc')

        assert config.project_key == 'abc'
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.environment is AppEnv.PRODUCTION
        assert config.timezone == 'UTC'

    @pytest.mark.parametrize('project_key', [None, ''])
    def test_missing_project_key(self, project_key):
        """Should refuse to construct without a project key"""
        with pytest.raises(MissingCredentialError):
            LogClientConfig(project_key=project_key)

    @pytest.mark.parametrize('env', ['local', 'development', 'staging', 'production'])
    def test_accepts_each_environment_string(self, env):
        """Should normalize environment strings to AppEnv members"""
        config = LogClientConfig(project_key='abc', environment=env)

        assert config.environment is AppEnv(env)

    @pytest.mark.parametrize('env', ['qa', 'PRODUCTION', 'prod', 42])
    def test_invalid_environment(self, env):
        """Should reject environments outside AppEnv"""
        with pytest.raises(InvalidConfigurationError, match='Invalid environment'):
            LogClientConfig(project_key='abc', environment=env)

    def test_invalid_timezone(self):
        """Should reject unknown timezone names"""
        with pytest.raises(InvalidConfigurationError, match='Invalid timezone'):
            LogClientConfig(project_key='abc', timezone='Mars/Olympus_Mons')

    def test_endpoint_trailing_slash_stripped(self):
        """Should strip trailing slash so the log URL has a single separator"""
        config = LogClientConfig(project_key='abc', endpoint='http://localhost:8000/api/')

        assert config.endpoint == 'http://localhost:8000/api'

    def test_empty_values_fall_back_to_defaults(self):
        """Should treat empty endpoint/environment/timezone as unset"""
        config = LogClientConfig(project_key='abc', endpoint='', environment='', timezone='')

        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.environment is AppEnv.PRODUCTION
        assert config.timezone == 'UTC'

    def test_config_is_immutable(self):
        """Should not allow mutation after construction"""
        config = LogClientConfig(project_key='abc')

        with pytest.raises(AttributeError):
            config.project_key = 'other'


class TestFromMapping:
    """Test LogClientConfig.from_mapping"""

    def test_wire_style_keys(self):
        config = LogClientConfig.from_mapping({
            'project_key': 'abc',
            'endpoint': 'http://localhost:9000',
            'environment': 'staging',
            'timezone': 'Asia/Kathmandu',
        })

        assert config.project_key == 'abc'
        assert config.endpoint == 'http://localhost:9000'
        assert config.environment is AppEnv.STAGING
        assert config.timezone == 'Asia/Kathmandu'

    def test_aliases(self):
        """Should accept env and projectKey aliases"""
        config = LogClientConfig.from_mapping({'projectKey': 'abc', 'env': 'local'})

        assert config.project_key == 'abc'
        assert config.environment is AppEnv.LOCAL

    def test_ignores_unknown_keys(self):
        config = LogClientConfig.from_mapping({'project_key': 'abc', 'retries': 3})

        assert config.project_key == 'abc'

    def test_missing_project_key(self):
        with pytest.raises(MissingCredentialError):
            LogClientConfig.from_mapping({'environment': 'local'})

    def test_non_mapping(self):
        """Should reject input that is not a mapping"""
        with pytest.raises(InvalidConfigurationError, match="must be a mapping"):
            LogClientConfig.from_mapping([('project_key', 'abc')])


class TestLoadConfig:
    """Test YAML config loading"""

    def test_load_section(self, tmp_path: Path):
        """Should read settings from the logarc section"""
        config_file = tmp_path / 'config.yml'
        config_file.write_text(
            'port: 8000\n'
            'logarc:\n'
            '  project_key: abc123\n'
            '  environment: development\n'
            '  timezone: Europe/Berlin\n'
        )

        config = load_config(config_file)

        assert config.project_key == 'abc123'
        assert config.environment is AppEnv.DEVELOPMENT
        assert config.timezone == 'Europe/Berlin'

    def test_load_whole_document_without_section(self, tmp_path: Path):
        """Should fall back to the top-level mapping"""
        config_file = tmp_path / 'logarc.yml'
        config_file.write_text('project_key: abc123\nendpoint: http://logs.internal/api\n')

        config = load_config(config_file)

        assert config.project_key == 'abc123'
        assert config.endpoint == 'http://logs.internal/api'

    def test_custom_section_name(self, tmp_path: Path):
        config_file = tmp_path / 'config.yml'
        config_file.write_text('logging:\n  project_key: xyz\n')

        config = load_config(config_file, section='logging')

        assert config.project_key == 'xyz'

    def test_non_mapping_section(self, tmp_path: Path):
        """Should reject a section that is not a mapping"""
        config_file = tmp_path / 'config.yml'
        config_file.write_text('logarc:\n  - project_key\n')

        with pytest.raises(InvalidConfigurationError):
            load_config(config_file)

    def test_empty_file_missing_key(self, tmp_path: Path):
        config_file = tmp_path / 'config.yml'
        config_file.write_text('')

        with pytest.raises(MissingCredentialError):
            load_config(config_file)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'nope.yml')
