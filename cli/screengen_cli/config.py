"""
Screengen CLI configuration — all environment variables in one place.

Read from the environment at access time; command line flags override.
There are no configuration files.

  SCREENGEN_PROFILE      Render every screen for this device profile instead of
                         the display each screen was designed for
  SCREENGEN_OUTPUT_DIR   Directory generated files are written to
  SCREENGEN_LOG_LEVEL    Logging level name (DEBUG, INFO, WARNING, ...)
"""

from __future__ import annotations

import logging
import os


class Settings:
    """CLI settings from environment variables."""

    DEFAULT_OUTPUT_DIR: str = "generated"
    DEFAULT_LOG_LEVEL: str = "WARNING"

    @property
    def PROFILE(self) -> str | None:
        return os.environ.get("SCREENGEN_PROFILE") or None

    @property
    def OUTPUT_DIR(self) -> str:
        return os.environ.get("SCREENGEN_OUTPUT_DIR") or self.DEFAULT_OUTPUT_DIR

    @property
    def LOG_LEVEL(self) -> int:
        name = (os.environ.get("SCREENGEN_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        # getLevelName returns "Level X" for names it does not know
        return level if isinstance(level, int) else logging.WARNING


# Singleton instance
settings = Settings()
