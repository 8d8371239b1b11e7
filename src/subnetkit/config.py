"""
Configuration management for subnetkit.

Loads CLI settings from environment variables or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_MAX_DISPLAY = 256

ENV_LOCATIONS = [
    Path.home() / ".subnetkit" / ".env",
    Path.home() / ".config" / "subnetkit" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found in the common locations."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class CalcConfig:
    """Command line settings."""

    # Longest listing printed before output is truncated
    max_display: int = DEFAULT_MAX_DISPLAY

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Load configuration from environment variables."""
        raw_max = os.getenv("SUBNETKIT_MAX_DISPLAY", "")
        try:
            max_display = int(raw_max) if raw_max else DEFAULT_MAX_DISPLAY
        except ValueError:
            raise ValueError(f"SUBNETKIT_MAX_DISPLAY must be an integer, got '{raw_max}'")
        if max_display < 1:
            raise ValueError(f"SUBNETKIT_MAX_DISPLAY must be positive, got {max_display}")

        return cls(
            max_display=max_display,
            log_level=os.getenv("SUBNETKIT_LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("SUBNETKIT_LOG_FILE", ""),
        )


# Global config instance
_config: CalcConfig | None = None


def get_config() -> CalcConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = CalcConfig.from_env()
    return _config


def set_config(config: CalcConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
