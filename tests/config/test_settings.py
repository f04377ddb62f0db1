"""
Tests for Settings.
"""

from pathlib import Path

import pytest

from heyps.config.settings import Settings
from heyps.entities.application import VersionSelector
from heyps.exceptions import ConfigurationError

ENV_KEYS = (
    "XDG_DATA_HOME",
    "HEYPS_SCRIPTS_DIR",
    "HEYPS_DEFAULT_TARGET",
    "HEYPS_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.home_dir == clean_env
        assert settings.data_home == clean_env / ".local" / "share"
        assert settings.scripts_dir == clean_env / ".local" / "share" / "scripts"
        assert settings.default_target == "latest"
        assert settings.log_level == "WARNING"

    def test_xdg_data_home(self, clean_env, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", "/data")

        settings = Settings()

        assert settings.data_home == Path("/data")
        assert settings.scripts_dir == Path("/data/scripts")

    def test_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("HEYPS_SCRIPTS_DIR", "/opt/scripts")
        monkeypatch.setenv("HEYPS_DEFAULT_TARGET", "2023")
        monkeypatch.setenv("HEYPS_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.scripts_dir == Path("/opt/scripts")
        assert settings.default_target == "2023"
        assert settings.log_level == "DEBUG"

    def test_default_selector(self, clean_env, monkeypatch):
        monkeypatch.setenv("HEYPS_DEFAULT_TARGET", " beta ")

        assert Settings().default_selector() == VersionSelector.parse("beta")

    def test_invalid_default_target_is_reported_when_used(self, clean_env, monkeypatch):
        monkeypatch.setenv("HEYPS_DEFAULT_TARGET", "newest")

        settings = Settings()

        assert settings.default_target == "newest"
        with pytest.raises(ConfigurationError, match="Invalid HEYPS_DEFAULT_TARGET"):
            settings.default_selector()

    def test_invalid_log_level(self, clean_env, monkeypatch):
        monkeypatch.setenv("HEYPS_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError, match="unknown log level 'CHATTY'"):
            Settings()
