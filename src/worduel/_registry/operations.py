# Area: Registry
"""
worduel._registry.operations — Standard in-game operations
==========================================================

Ready-made operations for ``WorduelService.act_on_game``. Each factory
takes the caller's user id (and arguments) and returns a callable with
the ``(player_data, game_id, game)`` signature that act_on_game expects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable

from .._game.enums import GameProgress
from .._game.multiplayer import GameMP
from .._game.render import render_keyboard, render_stateline, render_views
from .._game.snapshot import build_game_snapshot
from ..errors import ForfeitBadUserError, GameStartedError
from .outcome import Continue, Outcome, Remove
from .player_data import PlayerData

logger = logging.getLogger("worduel.operations")

Operation = Callable[[PlayerData, int, GameMP], object]


@dataclass(frozen=True)
class GuessReport:
    """
    Result of one guess.

    Attributes:
        accepted: False if the guess was rejected without effect
        progress: Duel progress after the guess
        views: Both boards side by side
        state_line: One-line progress summary
    """
    accepted: bool
    progress: GameProgress
    views: str
    state_line: str


@dataclass(frozen=True)
class ForfeitReport:
    """
    Result of a forfeit.

    Attributes:
        was_waiting: True if the duel had not started yet
        views: Both boards at the time of the forfeit
        state_line: One-line progress summary before removal
    """
    was_waiting: bool
    views: str
    state_line: str


def _side_index(game: GameMP, user_id: Hashable) -> int:
    index = game.match_user(user_id)
    if index is None:
        # Bindings always point at games the user plays in
        raise LookupError(f"User {user_id!r} is not part of this game")
    return index


def guess_operation(user_id: Hashable, word: str) -> Operation:
    """Send ``word`` as the caller's next guess."""

    def operation(data: PlayerData, game_id: int, game: GameMP) -> Outcome:
        if game.progress.is_waiting:
            raise GameStartedError(expected_started=True)
        index = _side_index(game, user_id)
        accepted = game.send_guess(index, word.lower())
        report = GuessReport(
            accepted=accepted,
            progress=game.progress,
            views=render_views(game),
            state_line=render_stateline(game),
        )
        if game.progress.is_over:
            return Remove(report, commit_scores=True)
        return Continue(report)

    return operation


def forfeit_operation(user_id: Hashable, named_opponent: Hashable) -> Operation:
    """Abandon the duel. The caller must name the actual opponent."""

    def operation(data: PlayerData, game_id: int, game: GameMP) -> Outcome:
        if game.opponent_of(user_id) != named_opponent:
            raise ForfeitBadUserError()
        report = ForfeitReport(
            was_waiting=game.progress.is_waiting,
            views=render_views(game),
            state_line=render_stateline(game, want_scores=False),
        )
        logger.info("Game %d forfeited by %s", game_id, user_id)
        return Remove(report, commit_scores=False)

    return operation


def keyboard_operation(user_id: Hashable) -> Operation:
    """Render the caller's keyboard."""

    def operation(data: PlayerData, game_id: int, game: GameMP) -> Outcome:
        return Continue(render_keyboard(game, _side_index(game, user_id)))

    return operation


def status_operation() -> Operation:
    """Snapshot the duel."""

    def operation(data: PlayerData, game_id: int, game: GameMP) -> Outcome:
        return Continue(build_game_snapshot(game))

    return operation
