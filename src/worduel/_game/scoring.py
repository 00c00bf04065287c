# Area: Game
"""
worduel._game.scoring — Variant scoring strategies
==================================================

Each variant carries one strategy, picked once when the duel is
created. A strategy is only consulted for a victorious side; the engine
scores everyone else 0.
"""

from __future__ import annotations

from typing import Dict

from .enums import GameVariant
from .side import GameSide


class ScoringStrategy:
    """Base class for per-variant scoring."""

    name = "base"

    def score(
        self,
        side: GameSide,
        opponent: GameSide,
        seconds_advantage: int,
        max_guesses: int,
        word_length: int,
    ) -> int:
        raise NotImplementedError


class TimedScoring(ScoringStrategy):
    """Rewards finishing earlier than the opponent and using few guesses."""

    name = "timed"

    def score(self, side, opponent, seconds_advantage, max_guesses, word_length):
        return side.calculate_timed_score(seconds_advantage, max_guesses)


class TurnScoring(ScoringStrategy):
    """
    Rewards guess efficiency, boosted super-linearly by how many more
    guesses the opponent needed, and scaled by word length.
    """

    name = "turn_based"

    def score(self, side, opponent, seconds_advantage, max_guesses, word_length):
        diff = max(0, opponent.guess_count - side.guess_count)
        return side.calculate_turn_score(max_guesses, diff, word_length)


SCORING_STRATEGIES: Dict[GameVariant, ScoringStrategy] = {
    GameVariant.TIMED: TimedScoring(),
    GameVariant.TURN_BASED: TurnScoring(),
}


def strategy_for(variant: GameVariant) -> ScoringStrategy:
    """Return the scoring strategy of ``variant``."""
    return SCORING_STRATEGIES[variant]
