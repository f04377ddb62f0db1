"""
Configuration settings for heyps.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from heyps.entities.application import VersionSelector
from heyps.exceptions import ConfigurationError, InputError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Settings loaded from environment variables, resolved once per process."""

    def __init__(self):
        self.home_dir: Path = Path(self._get_env("HOME", str(Path.home())))
        self.data_home: Path = Path(
            self._get_env("XDG_DATA_HOME", str(self.home_dir / ".local" / "share"))
        )
        self.scripts_dir: Path = Path(
            self._get_env("HEYPS_SCRIPTS_DIR", str(self.data_home / "scripts"))
        ).expanduser()
        self.default_target: str = self._get_env("HEYPS_DEFAULT_TARGET", "latest").strip()
        self.log_level: str = self._get_log_level("HEYPS_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value (empty counts as unset)."""
        return os.getenv(key) or default

    def default_selector(self) -> VersionSelector:
        """Parse the default target, raise error if it is not a valid target."""
        try:
            return VersionSelector.parse(self.default_target)
        except InputError as e:
            raise ConfigurationError(f"Invalid HEYPS_DEFAULT_TARGET: {e}")

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        value = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Invalid {key}: unknown log level '{value}'")
        return value
