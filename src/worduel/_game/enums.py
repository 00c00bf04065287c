# Area: Game
"""
worduel._game.enums — Duel variants and progress states
=======================================================

Defines the duel variant and the forward-only progress state machine
values of a single duel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameVariant(Enum):
    """
    Ruleset of a duel, fixed at creation.

    TIMED: one active duel per user, scored on speed and guess count.
    TURN_BASED: one active duel per opponent, scored on guess count.
    """
    TIMED = "timed"
    TURN_BASED = "turn_based"


class ProgressState(Enum):
    """
    States of a duel.

    State transitions:
    WAITING -> STARTED (challenged player responds with a secret)
    STARTED -> ENDING (one side wins or runs out of guesses)
    ENDING -> OVER (the other side wins or runs out of guesses)
    """
    WAITING = "waiting"
    STARTED = "started"
    ENDING = "ending"
    OVER = "over"


_ORDER = {
    ProgressState.WAITING: 0,
    ProgressState.STARTED: 1,
    ProgressState.ENDING: 2,
    ProgressState.OVER: 3,
}


@dataclass(frozen=True)
class GameProgress:
    """
    Progress of a duel.

    Attributes:
        state: The current state
        side: For ENDING, the side that finished first. For OVER, the
            winning side, or None on a draw. Unused otherwise.
    """

    state: ProgressState
    side: Optional[int] = None

    @classmethod
    def waiting(cls) -> "GameProgress":
        return cls(ProgressState.WAITING)

    @classmethod
    def started(cls) -> "GameProgress":
        return cls(ProgressState.STARTED)

    @classmethod
    def ending(cls, side: int) -> "GameProgress":
        return cls(ProgressState.ENDING, side)

    @classmethod
    def over(cls, winner: Optional[int]) -> "GameProgress":
        return cls(ProgressState.OVER, winner)

    @property
    def is_waiting(self) -> bool:
        return self.state is ProgressState.WAITING

    @property
    def is_over(self) -> bool:
        return self.state is ProgressState.OVER

    @property
    def winner(self) -> Optional[int]:
        """Winning side once OVER; None while playing or on a draw."""
        return self.side if self.is_over else None

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.side is None

    def rank(self) -> int:
        """Position in the state chain, for monotonicity checks."""
        return _ORDER[self.state]

    def __str__(self) -> str:
        if self.state is ProgressState.ENDING:
            return f"ending({self.side})"
        if self.state is ProgressState.OVER:
            return "over(draw)" if self.side is None else f"over({self.side})"
        return self.state.value
