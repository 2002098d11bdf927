"""Tests for configuration loading and validation."""

import pydantic
import pytest

from datadog_api import ConfigurationError, DatadogConfig, DEFAULT_HOST, EU_HOST

ENV_VARS = ("DATADOG_HOST", "DD_API_KEY", "DD_APP_KEY", "DATADOG_LOG_LEVEL", "DATADOG_LOG_FORMAT")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear the client's environment; returns a path for an (absent) .env file."""
    for name in ENV_VARS:
        # Registering a value first makes monkeypatch remove anything a
        # dotenv file sets during the test.
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return str(tmp_path / ".env")


class TestDatadogConfig:

    def test_defaults_to_us_host(self) -> None:
        config = DatadogConfig(api_key="k", application_key="a")
        assert config.host == DEFAULT_HOST == "https://api.datadoghq.com"

    def test_eu_host(self) -> None:
        config = DatadogConfig(host=EU_HOST, api_key="k", application_key="a")
        assert config.host == "https://api.datadoghq.eu"

    def test_trailing_slash_is_stripped(self) -> None:
        config = DatadogConfig(host="https://api.datadoghq.com/", api_key="k", application_key="a")
        assert config.host == "https://api.datadoghq.com"

    def test_rejects_non_http_host(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DatadogConfig(host="api.datadoghq.com", api_key="k", application_key="a")

    def test_rejects_empty_keys(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DatadogConfig(api_key="", application_key="a")

    def test_log_level_is_normalized(self) -> None:
        config = DatadogConfig(api_key="k", application_key="a", log_level="debug")
        assert config.log_level == "DEBUG"

    def test_is_frozen(self) -> None:
        config = DatadogConfig(api_key="k", application_key="a")
        with pytest.raises(pydantic.ValidationError):
            config.api_key = "other"


class TestFromEnv:

    def test_reads_environment(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("DD_API_KEY", "env-api")
        monkeypatch.setenv("DD_APP_KEY", "env-app")
        monkeypatch.setenv("DATADOG_HOST", EU_HOST)

        config = DatadogConfig.from_env(clean_env)

        assert config.api_key == "env-api"
        assert config.application_key == "env-app"
        assert config.host == EU_HOST

    def test_host_defaults_when_unset(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("DD_API_KEY", "env-api")
        monkeypatch.setenv("DD_APP_KEY", "env-app")

        assert DatadogConfig.from_env(clean_env).host == DEFAULT_HOST

    def test_missing_api_key(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("DD_APP_KEY", "env-app")

        with pytest.raises(ConfigurationError) as exc_info:
            DatadogConfig.from_env(clean_env)

        assert exc_info.value.config_key == "DD_API_KEY"

    def test_missing_application_key(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("DD_API_KEY", "env-api")

        with pytest.raises(ConfigurationError) as exc_info:
            DatadogConfig.from_env(clean_env)

        assert exc_info.value.config_key == "DD_APP_KEY"

    def test_invalid_value_becomes_configuration_error(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("DD_API_KEY", "env-api")
        monkeypatch.setenv("DD_APP_KEY", "env-app")
        monkeypatch.setenv("DATADOG_HOST", "ftp://example.com")

        with pytest.raises(ConfigurationError) as exc_info:
            DatadogConfig.from_env(clean_env)

        assert exc_info.value.config_key == "host"

    def test_reads_dotenv_file(self, clean_env, monkeypatch) -> None:
        with open(clean_env, "w") as f:
            f.write("DD_API_KEY=file-api\nDD_APP_KEY=file-app\n")
        monkeypatch.setenv("DD_APP_KEY", "process-app")

        config = DatadogConfig.from_env(clean_env)

        assert config.api_key == "file-api"
        assert config.application_key == "process-app"
