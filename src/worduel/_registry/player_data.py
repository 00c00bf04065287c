# Area: Registry
"""
worduel._registry.player_data — Per-user bindings and invites
=============================================================

Each user has one game slot per variant and a table of pending invites
per variant, keyed by challenger. Slots and invites only hold game
ids; the game registry owns the games themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple

from .._game.enums import GameVariant


@dataclass(frozen=True)
class Invite:
    """
    A pending challenge.

    Attributes:
        game_id: Game waiting for the invitee's answer
        expiry: Monotonic time after which the invite is void
    """

    game_id: int
    expiry: float

    def expired(self, now: float) -> bool:
        return now >= self.expiry


class GameSlot:
    """
    Active game bindings of one user for one variant.

    Subclasses decide the cardinality; callers always go through
    bind/unbind/lookup with the opponent as key.
    """

    def lookup(self, opponent: Optional[Hashable] = None) -> Optional[int]:
        raise NotImplementedError

    def bind(self, opponent: Hashable, game_id: int) -> None:
        raise NotImplementedError

    def unbind(self, opponent: Optional[Hashable] = None) -> Optional[int]:
        raise NotImplementedError

    def game_ids(self) -> List[int]:
        raise NotImplementedError

    def occupied(self, opponent: Optional[Hashable] = None) -> bool:
        """True if binding a game against ``opponent`` would clash."""
        return self.lookup(opponent) is not None

    def unbind_game(self, game_id: int) -> bool:
        """Drop whichever binding points at ``game_id``."""
        raise NotImplementedError

    def __bool__(self) -> bool:
        return bool(self.game_ids())


class SingleSlot(GameSlot):
    """At most one game, whoever the opponent is (timed duels)."""

    def __init__(self) -> None:
        self._game_id: Optional[int] = None

    def lookup(self, opponent=None):
        return self._game_id

    def bind(self, opponent, game_id):
        self._game_id = game_id

    def unbind(self, opponent=None):
        game_id, self._game_id = self._game_id, None
        return game_id

    def game_ids(self):
        return [] if self._game_id is None else [self._game_id]

    def unbind_game(self, game_id):
        if self._game_id == game_id:
            self._game_id = None
            return True
        return False


class KeyedSlot(GameSlot):
    """One game per distinct opponent (turn-based duels)."""

    def __init__(self) -> None:
        self._games: Dict[Hashable, int] = {}

    def lookup(self, opponent=None):
        if opponent is None:
            return None
        return self._games.get(opponent)

    def bind(self, opponent, game_id):
        self._games[opponent] = game_id

    def unbind(self, opponent=None):
        if opponent is None:
            return None
        return self._games.pop(opponent, None)

    def game_ids(self):
        return list(self._games.values())

    def unbind_game(self, game_id):
        for opponent, bound in list(self._games.items()):
            if bound == game_id:
                del self._games[opponent]
                return True
        return False


SLOT_TYPES = {
    GameVariant.TIMED: SingleSlot,
    GameVariant.TURN_BASED: KeyedSlot,
}


class PlayerData:
    """Game bindings and pending invites of one user."""

    def __init__(self) -> None:
        self._slots: Dict[GameVariant, GameSlot] = {
            variant: SLOT_TYPES[variant]() for variant in GameVariant
        }
        self._invites: Dict[GameVariant, Dict[Hashable, Invite]] = {
            variant: {} for variant in GameVariant
        }

    def slot(self, variant: GameVariant) -> GameSlot:
        return self._slots[variant]

    # ── Invites ──────────────────────────────────────────────

    def invite(self, variant: GameVariant, challenger: Hashable, invite: Invite) -> Optional[Invite]:
        """Install an invite, replacing and returning any previous one from ``challenger``."""
        previous = self._invites[variant].get(challenger)
        self._invites[variant][challenger] = invite
        return previous

    def get_invite(self, variant: GameVariant, challenger: Hashable) -> Optional[Invite]:
        return self._invites[variant].get(challenger)

    def remove_invite(self, variant: GameVariant, challenger: Hashable) -> Optional[Invite]:
        return self._invites[variant].pop(challenger, None)

    def list_invites(self, variant: GameVariant) -> Dict[Hashable, Invite]:
        return dict(self._invites[variant])

    def clean_invites(self, now: float) -> List[Tuple[GameVariant, Hashable, Invite]]:
        """Remove and return every invite, of both variants, expired at ``now``."""
        expired = []
        for variant, invites in self._invites.items():
            for challenger, invite in list(invites.items()):
                if invite.expired(now):
                    del invites[challenger]
                    expired.append((variant, challenger, invite))
        return expired

    def is_empty(self) -> bool:
        """True if the user has no binding and no pending invite."""
        return not any(self._slots.values()) and not any(self._invites.values())
