from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from exceptions import ConfigError

ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
SAMPLE_DECK_PATH = DATA_DIR / "sample_sentences.csv"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

load_dotenv(ROOT_DIR / ".env")


def env_int(
    name: str,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read an integer setting, raising ConfigError if unparsable or out of range."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, raw) from None
    if (minimum is not None and value < minimum) or (
        maximum is not None and value > maximum
    ):
        raise ConfigError(name, raw)
    return value


def env_log_level(name: str, default: str = "INFO") -> str:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(name, raw)
    return level


CORRECT_THRESHOLD = env_int("CORRECT_THRESHOLD", 70, minimum=0, maximum=100)
MAX_SCORED_LENGTH = env_int("MAX_SCORED_LENGTH", 2000, minimum=1)
MAX_DECK_ROWS = env_int("MAX_DECK_ROWS", 1000, minimum=1)
LOG_LEVEL = env_log_level("LOG_LEVEL")
