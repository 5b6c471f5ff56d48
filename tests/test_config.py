import logging

from backend.config import AppConfig, load_config_from_env


def test_defaults_without_env(monkeypatch):
    for name in ["HOUSEHOLD_API_HOST", "HOUSEHOLD_API_PORT", "HOUSEHOLD_DEBUG", "HOUSEHOLD_LOG_LEVEL", "HOUSEHOLD_START_YEAR"]:
        monkeypatch.delenv(name, raising=False)

    config = load_config_from_env()

    assert config.host == "127.0.0.1"
    assert config.port == 8000
    assert config.dashboard_port == 8050
    assert config.debug is False
    assert config.log_level == "INFO"
    assert config.start_year == AppConfig().start_year


def test_env_overrides_and_bad_values(monkeypatch):
    monkeypatch.setenv("HOUSEHOLD_API_PORT", "9100")
    monkeypatch.setenv("HOUSEHOLD_DEBUG", "yes")
    monkeypatch.setenv("HOUSEHOLD_LOG_LEVEL", "debug")
    monkeypatch.setenv("HOUSEHOLD_START_YEAR", "next year")

    config = load_config_from_env()

    assert config.port == 9100
    assert config.debug is True
    assert logging.getLevelName(config.log_level) == logging.DEBUG
    assert config.start_year == AppConfig().start_year

    monkeypatch.setenv("HOUSEHOLD_LOG_LEVEL", "chatty")
    assert load_config_from_env().log_level == "INFO"
