# Area: Shared
"""
worduel.config — Engine settings
================================

Limits and durations of the duel engine, loaded from (lowest to
highest precedence) built-in defaults, an optional JSON config file, a
``.env`` file and the process environment.

Usage:
    settings = load_settings()                      # defaults + environment
    settings = load_settings("worduel.json")        # plus a config file
    service = WorduelService(settings=settings)

Environment variables:
    WORDUEL_MIN_WORDSIZE, WORDUEL_MAX_WORDSIZE,
    WORDUEL_TIMED_INVITE_EXPIRY, WORDUEL_TURN_INVITE_EXPIRY,
    WORDUEL_TIMED_GAME_EXPIRY, WORDUEL_CLEANUP_INTERVAL,
    WORDCLASH_DICTIONARY, WORDUEL_LOG_FILE
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from .constants import (
    CLEANUP_INTERVAL,
    DICT_VARNAME,
    MAX_WORDSIZE,
    MIN_WORDSIZE,
    TIMED_GAME_EXPIRY,
    TIMED_INVITE_EXPIRY,
    TURN_INVITE_EXPIRY,
)
from .errors import ConfigError
from ._game.enums import GameVariant

ENV_MAPPINGS = {
    "WORDUEL_MIN_WORDSIZE": "min_wordsize",
    "WORDUEL_MAX_WORDSIZE": "max_wordsize",
    "WORDUEL_TIMED_INVITE_EXPIRY": "timed_invite_expiry",
    "WORDUEL_TURN_INVITE_EXPIRY": "turn_invite_expiry",
    "WORDUEL_TIMED_GAME_EXPIRY": "timed_game_expiry",
    "WORDUEL_CLEANUP_INTERVAL": "cleanup_interval",
    DICT_VARNAME: "dictionary_path",
    "WORDUEL_LOG_FILE": "log_file",
}


class EngineSettings(BaseModel):
    """Validated engine settings. Durations are in seconds."""

    min_wordsize: int = Field(MIN_WORDSIZE, ge=1)
    max_wordsize: int = Field(MAX_WORDSIZE, ge=1)
    timed_invite_expiry: float = Field(TIMED_INVITE_EXPIRY, gt=0)
    turn_invite_expiry: float = Field(TURN_INVITE_EXPIRY, gt=0)
    timed_game_expiry: float = Field(TIMED_GAME_EXPIRY, gt=0)
    cleanup_interval: float = Field(CLEANUP_INTERVAL, gt=0)
    dictionary_path: Optional[str] = None
    log_file: Optional[str] = "worduel.log"

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def check_word_bounds(self) -> "EngineSettings":
        if self.min_wordsize > self.max_wordsize:
            raise ValueError(
                f"min_wordsize ({self.min_wordsize}) exceeds max_wordsize ({self.max_wordsize})"
            )
        return self

    def invite_expiry(self, variant: GameVariant) -> float:
        """Invite time-to-live for ``variant``."""
        if variant is GameVariant.TIMED:
            return self.timed_invite_expiry
        return self.turn_invite_expiry


def load_settings(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> EngineSettings:
    """
    Load settings from a config file and the environment.

    Args:
        config_path: Optional JSON file with EngineSettings fields
        env_file: Optional .env file; defaults to the nearest one found
            from the working directory

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        try:
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(config, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object")

    load_dotenv(env_file or find_dotenv(usecwd=True))

    # Override with environment variables
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    try:
        return EngineSettings(**config)
    except ValidationError as e:
        raise ConfigError(f"Invalid engine configuration: {e}") from e
