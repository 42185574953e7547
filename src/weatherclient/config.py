from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_ENV_FILE = '.env'
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class WeatherSettings:
    """Configuration shared by the geocoding and weather clients."""
    api_key: str
    timeout: float = DEFAULT_TIMEOUT
    units: str = 'imperial'

    @staticmethod
    def load_env_file(path: Optional[str] = None) -> str:
        """Load a .env file into os.environ; a missing file is fatal.

        Variables already set in the process environment win over the file.
        """
        env_path = path or DEFAULT_ENV_FILE
        if not os.path.isfile(env_path):
            raise ConfigError("Error loading .env file")
        try:
            load_dotenv(env_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError("Error loading .env file") from e
        return env_path

    @staticmethod
    def log_level() -> int:
        """Resolve LOG_LEVEL (default WARNING) to a logging level number."""
        name = os.environ.get('LOG_LEVEL', '').strip().upper() or 'WARNING'
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Invalid LOG_LEVEL: {name!r}")
        return level

    @staticmethod
    def from_env() -> 'WeatherSettings':
        """Create weather settings from environment variables."""
        api_key = os.environ.get('OPENWEATHER_API_KEY', '').strip()
        if not api_key:
            raise ConfigError("Please set OPENWEATHER_API_KEY in .env file")

        raw_timeout = os.environ.get('OPENWEATHER_TIMEOUT')
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigError(f"Malformed OPENWEATHER_TIMEOUT: {raw_timeout!r}") from e
            if timeout <= 0:
                raise ConfigError(f"OPENWEATHER_TIMEOUT must be positive, got {raw_timeout!r}")

        return WeatherSettings(api_key=api_key, timeout=timeout)
