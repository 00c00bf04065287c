# Area: Registry
"""
Registries - who plays which duel.

This package handles:
- Per-user game bindings and pending invites
- The game arena and id allocation
- The cumulative leaderboard
- Operation outcomes and the standard in-game operations
"""

from .player_data import Invite, GameSlot, SingleSlot, KeyedSlot, PlayerData
from .player_registry import PlayerRegistry
from .game_registry import GameRegistry
from .scores import ScoreManager
from .outcome import Continue, Remove, Outcome, as_outcome
from .operations import (
    GuessReport,
    ForfeitReport,
    guess_operation,
    forfeit_operation,
    keyboard_operation,
    status_operation,
)

__all__ = [
    "Invite",
    "GameSlot",
    "SingleSlot",
    "KeyedSlot",
    "PlayerData",
    "PlayerRegistry",
    "GameRegistry",
    "ScoreManager",
    "Continue",
    "Remove",
    "Outcome",
    "as_outcome",
    "GuessReport",
    "ForfeitReport",
    "guess_operation",
    "forfeit_operation",
    "keyboard_operation",
    "status_operation",
]
