# tests/test_settings.py

import pytest

from config import Settings, AppConfig, load_settings

ENV_VARS = ["ENVIRONMENT", "LOG_LEVEL", "API_HOST", "API_PORT", "DEBUG"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    loaded = load_settings()

    assert loaded.app.api_host == "0.0.0.0"
    assert loaded.app.api_port == 8080
    assert loaded.app.environment == "development"
    assert loaded.app.log_level == "INFO"
    assert loaded.app.debug is False


def test_environment_overrides(clean_env):
    clean_env.setenv("API_HOST", "127.0.0.1")
    clean_env.setenv("API_PORT", "9090")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("DEBUG", "true")
    clean_env.setenv("ENVIRONMENT", "staging")

    loaded = load_settings()

    assert loaded.app.api_host == "127.0.0.1"
    assert loaded.app.api_port == 9090
    assert loaded.app.log_level == "DEBUG"
    assert loaded.app.debug is True
    assert loaded.app.environment == "staging"


@pytest.mark.parametrize("name, value", [
    ("API_PORT", "0"),
    ("API_PORT", "70000"),
    ("API_PORT", "not-a-port"),
    ("LOG_LEVEL", "LOUD"),
    ("ENVIRONMENT", "qa"),
    ("API_HOST", ""),
])
def test_invalid_values_are_rejected(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        load_settings()


def test_validate_raises_value_error():
    bad = Settings(app=AppConfig(api_port=-1))

    with pytest.raises(ValueError, match="API_PORT"):
        bad.validate()
