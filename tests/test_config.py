"""Tests for the configuration layer."""

import pytest
from pydantic import ValidationError

from metronet.config import AppConfig, ObservabilityConfig, get_config, reset_config
from metronet.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.network.network_file == "metro.txt"
    assert config.network.network_path.parts[-2:] == ("data", "metro.txt")
    assert config.network.skip_malformed is False
    assert config.analysis.max_cut_size == 2
    assert config.observability.level == "WARNING"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reset_config_reloads():
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("METRONET_NETWORK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("METRONET_NETWORK_NETWORK_FILE", "paris.txt")
    monkeypatch.setenv("METRONET_NETWORK_SKIP_MALFORMED", "true")
    monkeypatch.setenv("METRONET_ANALYSIS_MAX_CUT_SIZE", "3")
    monkeypatch.setenv("METRONET_LOG_LEVEL", "DEBUG")

    config = AppConfig()

    assert config.network.network_path == tmp_path / "paris.txt"
    assert config.network.skip_malformed is True
    assert config.analysis.max_cut_size == 3
    assert config.observability.level == "DEBUG"


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("METRONET_LOG_LEVEL", "debug")

    assert get_config().observability.level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="verbose")


def test_invalid_environment_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("METRONET_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError) as exc_info:
        get_config()

    assert exc_info.value.setting_name.endswith("level")
    assert "Invalid setting" in str(exc_info.value)
