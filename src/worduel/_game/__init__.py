# Area: Game
"""
Duel engine - one two-player word duel.

This package handles:
- Duel variants and the progress state machine
- Per-side guess history and keyboard
- Variant scoring strategies
- Text rendering and snapshots
"""

from .enums import GameVariant, GameProgress, ProgressState
from .side import GameSide, GuessRecord
from .scoring import ScoringStrategy, TimedScoring, TurnScoring, strategy_for
from .multiplayer import GameMP
from .render import render_view, render_views, render_keyboard, render_stateline
from .snapshot import build_game_snapshot

__all__ = [
    "GameVariant",
    "GameProgress",
    "ProgressState",
    "GameSide",
    "GuessRecord",
    "ScoringStrategy",
    "TimedScoring",
    "TurnScoring",
    "strategy_for",
    "GameMP",
    "render_view",
    "render_views",
    "render_keyboard",
    "render_stateline",
    "build_game_snapshot",
]
