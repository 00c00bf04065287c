# Area: Registry
"""
worduel._registry.scores — Cumulative leaderboard
=================================================

Running score totals per user. Has its own reader/writer lock and takes
it inside every method. When scores are posted while the player and
game registry locks are held, this lock is always the last one taken.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Optional, Tuple

from .._game.multiplayer import GameMP
from .._shared.rwlock import RWLock
from ..errors import InvalidScoreError

logger = logging.getLogger("worduel.registry.scores")


class ScoreManager:
    """
    Leaderboard keyed by user id.

    Ties in ``list_top`` keep the order in which users first appeared
    on the leaderboard.
    """

    def __init__(self) -> None:
        self._scores: Dict[Hashable, int] = {}
        self._lock = RWLock()

    def add(self, player: Hashable, score: int) -> None:
        """
        Add ``score`` to the player's total.

        Raises:
            InvalidScoreError: If ``score`` is negative
        """
        if score < 0:
            raise InvalidScoreError(score)
        with self._lock.write():
            self._scores[player] = self._scores.get(player, 0) + score

    def add_from_game(self, game: GameMP) -> None:
        """Post both sides' final scores of a finished duel."""
        for user_id, score in zip(game.user_ids, game.scores):
            self.add(user_id, score)
        logger.info("Scores posted: %s", dict(zip(game.user_ids, game.scores)))

    def get(self, player: Hashable) -> Optional[int]:
        with self._lock.read():
            return self._scores.get(player)

    def list_top(self, count: int) -> List[Tuple[Hashable, int]]:
        """Return at most ``count`` (user, score) pairs, highest first."""
        if count <= 0:
            return []
        with self._lock.read():
            ranked = sorted(self._scores.items(), key=lambda item: item[1], reverse=True)
        return ranked[:count]

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._scores)
