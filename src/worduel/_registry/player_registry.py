# Area: Registry
"""
worduel._registry.player_registry — User records
================================================

Maps user ids to their PlayerData. Guarded by a reader/writer lock that
callers hold around every access. In multi-registry operations this
lock is always taken before the game registry's.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterator, Optional, Tuple

from .._shared.rwlock import RWLock
from .player_data import PlayerData

logger = logging.getLogger("worduel.registry.players")


class PlayerRegistry:
    """
    Registry of per-user data.

    Methods do not lock; wrap them in ``read()`` or ``write()``.
    """

    def __init__(self) -> None:
        self._players: Dict[Hashable, PlayerData] = {}
        self._lock = RWLock()

    def read(self):
        return self._lock.read()

    def write(self):
        return self._lock.write()

    def get(self, user_id: Hashable) -> Optional[PlayerData]:
        return self._players.get(user_id)

    def entry(self, user_id: Hashable) -> PlayerData:
        """Return the user's data, creating an empty record if needed."""
        data = self._players.get(user_id)
        if data is None:
            data = self._players[user_id] = PlayerData()
        return data

    def items(self) -> Iterator[Tuple[Hashable, PlayerData]]:
        return iter(list(self._players.items()))

    def prune(self) -> int:
        """Drop records with no binding and no invite. Returns how many."""
        empty = [uid for uid, data in self._players.items() if data.is_empty()]
        for uid in empty:
            del self._players[uid]
        if empty:
            logger.debug("Pruned %d empty player records", len(empty))
        return len(empty)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, user_id: Hashable) -> bool:
        return user_id in self._players
