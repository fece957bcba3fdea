"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calendar_duration.errors import InvalidTimezoneError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "calendar-duration" / "config.ini"
DEFAULT_TIMEZONE = "UTC"
TIMEZONE_ENV_VAR = "CALENDAR_DURATION_TZ"
SECTION = "calendar_duration"


@dataclass
class Config:
    """Settings for the demo program."""

    timezone: str = DEFAULT_TIMEZONE

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            return cls(timezone=os.environ[TIMEZONE_ENV_VAR])
        except KeyError:
            return None

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        return cls(timezone=config.get(SECTION, "timezone", fallback=DEFAULT_TIMEZONE))

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config[SECTION] = {"timezone": self.timezone}
        with path.open("w") as config_file:
            config.write(config_file)

    def tzinfo(self) -> ZoneInfo:
        """Resolve the configured timezone name."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {self.timezone!r}"
            raise InvalidTimezoneError(msg) from exc
