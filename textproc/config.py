"""
AppConfig — runtime configuration shared by the GUI and the CLI.

Values come from the dataclass defaults, optionally overridden by environment
variables through ``AppConfig.from_env()``:

  TEXTPROC_LOG_LEVEL       — DEBUG | INFO | WARNING | ERROR | CRITICAL
  TEXTPROC_WINDOW_WIDTH    — main window width in pixels
  TEXTPROC_WINDOW_HEIGHT   — main window height in pixels
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from textproc.exceptions import ConfigError

__all__ = ["AppConfig"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@dataclass
class AppConfig:
    """Runtime configuration for MainWindow and the CLI."""
    window_title:  str = "Text Processing Tool"
    window_width:  int = 800
    window_height: int = 600
    log_level:     str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build a config from *env* (default: ``os.environ``).

        Raises:
            ConfigError: a variable is set but cannot be parsed.
        """
        env = os.environ if env is None else env
        level = env.get("TEXTPROC_LOG_LEVEL", "").strip().upper() or cls.log_level
        if level not in _LOG_LEVELS:
            raise ConfigError(f"TEXTPROC_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        config = cls(
            window_width=_int_setting(env, "TEXTPROC_WINDOW_WIDTH", cls.window_width),
            window_height=_int_setting(env, "TEXTPROC_WINDOW_HEIGHT", cls.window_height),
            log_level=level,
        )
        logger.debug("Loaded %s", config)
        return config

    @property
    def logging_level(self) -> int:
        """The ``logging`` module constant for log_level."""
        return getattr(logging, self.log_level)
