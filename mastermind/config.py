"""
Single place to:
- Load a local .env if present
- Read the game settings from the environment
- Fail at startup with a clear message when a value makes no sense

Variables:
  MASTERMIND_CODE_LENGTH   pegs per code (default 5)
  MASTERMIND_MAX_ATTEMPTS  guesses per game (default 12)
  MASTERMIND_RANDOM_SOURCE local | random.org (default local)
  MASTERMIND_LOG_LEVEL     DEBUG, INFO, WARNING... (default WARNING)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .random_client import SOURCES

DEFAULT_CODE_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 12


@dataclass(frozen=True)
class Settings:
    code_length: int = DEFAULT_CODE_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    random_source: str = "local"
    log_level: str = "WARNING"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got '{raw}'.") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {value}.")
    return value


def load_settings() -> Settings:
    # dev convenience; a real shell environment wins over .env
    load_dotenv()

    source = os.getenv("MASTERMIND_RANDOM_SOURCE", "local").strip().lower()
    if source not in SOURCES:
        raise RuntimeError(
            f"MASTERMIND_RANDOM_SOURCE must be one of {', '.join(SOURCES)}, got '{source}'."
        )

    level = os.getenv("MASTERMIND_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"MASTERMIND_LOG_LEVEL is not a logging level: '{level}'.")

    return Settings(
        code_length=_positive_int("MASTERMIND_CODE_LENGTH", DEFAULT_CODE_LENGTH),
        max_attempts=_positive_int("MASTERMIND_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        random_source=source,
        log_level=level,
    )
