# Area: Registry
"""
worduel._registry.game_registry — Duel arena
============================================

Sole owner of every live duel, keyed by game id. Everything else stores
ids only. Guarded by a reader/writer lock that callers hold around every
access, always after the player registry's lock.

Game ids come from an ``itertools.count``; ``next()`` on it is atomic
under the interpreter lock, so allocation needs no registry lock and an
id is never handed out twice.
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterator, Optional, Tuple

from .._game.multiplayer import GameMP
from .._shared.rwlock import RWLock

logger = logging.getLogger("worduel.registry.games")


class GameRegistry:
    """
    Registry of live duels.

    Methods other than ``pull_game_id`` do not lock; wrap them in
    ``read()`` or ``write()``.
    """

    def __init__(self) -> None:
        self._games: Dict[int, GameMP] = {}
        self._lock = RWLock()
        self._ids = itertools.count(1)

    def read(self):
        return self._lock.read()

    def write(self):
        return self._lock.write()

    def pull_game_id(self) -> int:
        """Allocate a fresh, never reused game id."""
        return next(self._ids)

    def insert(self, game_id: int, game: GameMP) -> None:
        if game_id in self._games:
            raise KeyError(f"Game id {game_id} already in use")
        self._games[game_id] = game

    def get(self, game_id: int) -> Optional[GameMP]:
        return self._games.get(game_id)

    def remove(self, game_id: int) -> Optional[GameMP]:
        game = self._games.pop(game_id, None)
        if game is not None:
            logger.debug("Game %d removed", game_id)
        return game

    def items(self) -> Iterator[Tuple[int, GameMP]]:
        return iter(list(self._games.items()))

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: int) -> bool:
        return game_id in self._games
