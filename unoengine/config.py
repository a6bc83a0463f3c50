"""Settings read from the environment (and a .env file, if present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from unoengine.engine.errors import InvalidConfigurationError
from unoengine.engine.game import DEFAULT_TARGET_SCORE
from unoengine.engine.hand import DEFAULT_CARDS_PER_PLAYER


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _log_level_env(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidConfigurationError(f"{name} must be a logging level name, got {level!r}")
    return level


@dataclass
class Settings:
    """Defaults for the CLI; command-line options take precedence."""

    target_score: int = DEFAULT_TARGET_SCORE
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from UNO_* environment variables."""
        if dotenv:
            load_dotenv()
        return cls(
            target_score=_int_env("UNO_TARGET_SCORE", DEFAULT_TARGET_SCORE),
            cards_per_player=_int_env("UNO_CARDS_PER_PLAYER", DEFAULT_CARDS_PER_PLAYER),
            seed=_int_env("UNO_SEED", None),
            log_level=_log_level_env("UNO_LOG_LEVEL", "WARNING"),
        )
