"""
Configuration settings for datejuggler.

**Conceptual**: This module provides a strongly-typed configuration object
loaded from environment variables (via .env files). Settings are validated on
load, so a malformed seed or log level fails fast with a clear error instead
of surfacing halfway through a fixture run.

**What is configurable?**
  - The seed of the process-wide random sampler (reproducible fixture runs
    without touching code).
  - The log level of the datejuggler logger.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op when the file is absent)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

_LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DateJugglerSettings:
    """
    Settings for random date generation.

    Attributes:
        seed: Seed for the default RangeSampler. None means fresh OS entropy
              on every process start (non-deterministic output).
        log_level: Name of the logging level for the datejuggler logger
                   (default "WARNING").
    """
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level not in _LOG_LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVEL_NAMES)}, got: {self.log_level}"
            )

    @classmethod
    def from_env(cls) -> "DateJugglerSettings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - DATEJUGGLER_SEED (optional): Integer seed for the default sampler.
            Unset or empty means unseeded.
          - DATEJUGGLER_LOG_LEVEL (optional): DEBUG, INFO, WARNING, ERROR or
            CRITICAL (case-insensitive). Defaults to WARNING.

        Returns:
            DateJugglerSettings with values loaded from environment.

        Raises:
            ValueError: If DATEJUGGLER_SEED is not an integer or
                        DATEJUGGLER_LOG_LEVEL is not a known level.

        Usage example:
            >>> # In .env file:
            >>> # DATEJUGGLER_SEED=1234
            >>>
            >>> settings = DateJugglerSettings.from_env()
            >>> settings.seed
            1234
        """
        seed_str = os.getenv("DATEJUGGLER_SEED", "").strip()
        log_level = os.getenv("DATEJUGGLER_LOG_LEVEL", "WARNING").strip().upper()

        seed = None
        if seed_str:
            try:
                seed = int(seed_str)
            except ValueError:
                raise ValueError(
                    f"DATEJUGGLER_SEED must be an integer, got: {seed_str}"
                )

        if log_level not in _LOG_LEVEL_NAMES:
            raise ValueError(
                f"DATEJUGGLER_LOG_LEVEL must be one of {', '.join(_LOG_LEVEL_NAMES)}, "
                f"got: {log_level}"
            )

        return cls(seed=seed, log_level=log_level)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level matching log_level."""
        return getattr(logging, self.log_level)


# Lazily loaded on first get_settings() call; tests can construct
# DateJugglerSettings directly or call reset_settings().
_default_settings: Optional[DateJugglerSettings] = None


def get_settings() -> DateJugglerSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global DateJugglerSettings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = DateJugglerSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("DATEJUGGLER_SEED", "7")
          reset_settings()
          assert get_settings().seed == 7
      ```
    """
    global _default_settings
    _default_settings = None
