# Area: Service
"""
worduel.service — Session coordinator
=====================================

Single entry point for hosts. Issues challenges, answers invites, runs
in-game operations against the caller's bound duel and sweeps expired
invites and duels.

Usage:
    service = WorduelService(dictionary=load_dictionary())
    service.challenge("alice", "bob", GameVariant.TIMED, "north")
    service.accept_invite("bob", "alice", GameVariant.TIMED, "slide")
    report = service.guess("alice", GameVariant.TIMED, "slide")

Locks are always taken in the order players, games, scores.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Union

from ._dict.dictionary import Dictionary
from ._dict.queries import check_length, ensure_word
from ._game.enums import GameVariant
from ._game.multiplayer import GameMP
from ._registry.game_registry import GameRegistry
from ._registry.operations import (
    forfeit_operation,
    guess_operation,
    keyboard_operation,
    status_operation,
)
from ._registry.outcome import Remove, as_outcome
from ._registry.player_data import Invite, PlayerData
from ._registry.player_registry import PlayerRegistry
from ._registry.scores import ScoreManager
from .config import EngineSettings
from .errors import (
    AlreadyInGameError,
    GameDeletedError,
    GameStartedError,
    NoGameError,
    NoInviteError,
    SelfChallengeError,
    WordNotFoundError,
)

logger = logging.getLogger("worduel.service")


@dataclass
class SweepReport:
    """
    What one sweep removed.

    Attributes:
        expired_invites: Game ids deleted because their invite expired
        expired_games: Game ids of timed duels deleted for running too long
    """
    expired_invites: List[int] = field(default_factory=list)
    expired_games: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.expired_invites) + len(self.expired_games)


class WorduelService:
    """
    Coordinates players, duels and the leaderboard.

    Attributes:
        settings: Engine limits and durations
        dictionary: Word list used to validate words, or None to only
            check word lengths
        players: Per-user bindings and invites
        games: Live duels
        scores: Cumulative leaderboard
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        dictionary: Optional[Dictionary] = None,
    ):
        self.settings = settings or EngineSettings()
        self.dictionary = dictionary
        self.players = PlayerRegistry()
        self.games = GameRegistry()
        self.scores = ScoreManager()

    def _resolve_word(self, raw: Union[str, int]) -> str:
        """Turn a word or a length request into a secret word."""
        if self.dictionary is not None:
            return ensure_word(self.dictionary, str(raw), self.settings)
        word = str(raw).strip().lower()
        check_length(len(word), self.settings)
        return word

    # ── Invite protocol ──────────────────────────────────────

    def challenge(
        self,
        owner: Hashable,
        opponent: Hashable,
        variant: GameVariant,
        word: Union[str, int],
    ) -> int:
        """
        Challenge ``opponent`` to a duel on ``owner``'s secret word.

        Args:
            word: Secret word, or a length for a random dictionary word

        Returns:
            Id of the new, waiting duel

        Raises:
            SelfChallengeError: If owner and opponent are the same user
            AlreadyInGameError: If either side's slot is already taken
            BadWordLengthError, WordNotFoundError: If the word is invalid
        """
        if owner == opponent:
            raise SelfChallengeError()
        secret = self._resolve_word(word)
        now = time.monotonic()

        with self.players.write():
            owner_data = self.players.get(owner)
            if owner_data is not None and owner_data.slot(variant).occupied(opponent):
                raise AlreadyInGameError(target=False)
            target_data = self.players.get(opponent)
            if target_data is not None and target_data.slot(variant).occupied(owner):
                raise AlreadyInGameError(target=True)

            game_id = self.games.pull_game_id()
            game = GameMP(owner, opponent, secret, variant)
            invite = Invite(game_id, now + self.settings.invite_expiry(variant))

            with self.games.write():
                self.games.insert(game_id, game)
                previous = self.players.entry(opponent).invite(variant, owner, invite)
                if previous is not None and self.games.remove(previous.game_id) is not None:
                    logger.info("Invite for game %d replaced by game %d", previous.game_id, game_id)
            self.players.entry(owner).slot(variant).bind(opponent, game_id)

        logger.info(
            "Game %d created: %s challenged %s (%s)",
            game_id, owner, opponent, variant.value,
        )
        return game_id

    def accept_invite(
        self,
        acceptor: Hashable,
        challenger: Hashable,
        variant: GameVariant,
        word: Union[str, int],
    ) -> int:
        """
        Accept ``challenger``'s invite and start the duel.

        The invite is kept if the word has the wrong length, so the
        acceptor can retry with another word.

        Returns:
            Id of the started duel

        Raises:
            NoInviteError: If no live invite from ``challenger`` exists
            AlreadyInGameError: If the acceptor's slot is already taken
            GameDeletedError: If the invited duel no longer exists
            GameStartedError: If the invited duel already started
            BadWordLengthError: If the word length differs from the challenge
        """
        secret = self._resolve_word(word)
        now = time.monotonic()

        with self.players.write():
            data = self.players.get(acceptor)
            invite = self._live_invite(data, acceptor, challenger, variant, now)
            if data.slot(variant).occupied(challenger):
                raise AlreadyInGameError(target=False)

            with self.games.write():
                game = self.games.get(invite.game_id)
                if game is None:
                    data.remove_invite(variant, challenger)
                    logger.warning(
                        "Invite from %s to %s points at deleted game %d",
                        challenger, acceptor, invite.game_id,
                    )
                    raise GameDeletedError(invite.game_id)
                if not game.progress.is_waiting:
                    data.remove_invite(variant, challenger)
                    raise GameStartedError(expected_started=False)
                game.respond(secret, acceptor)

            data.remove_invite(variant, challenger)
            data.slot(variant).bind(challenger, invite.game_id)

        logger.info("Game %d started: %s accepted %s", invite.game_id, acceptor, challenger)
        return invite.game_id

    def reject_invite(
        self,
        rejecter: Hashable,
        challenger: Hashable,
        variant: GameVariant,
    ) -> Optional[GameMP]:
        """
        Decline ``challenger``'s invite and delete the waiting duel.

        Returns:
            The deleted duel, or None if it had already vanished

        Raises:
            NoInviteError: If no live invite from ``challenger`` exists
        """
        now = time.monotonic()
        with self.players.write():
            data = self.players.get(rejecter)
            invite = self._live_invite(data, rejecter, challenger, variant, now)
            data.remove_invite(variant, challenger)
            with self.games.write():
                game = self.games.remove(invite.game_id)
            challenger_data = self.players.get(challenger)
            if challenger_data is not None:
                challenger_data.slot(variant).unbind_game(invite.game_id)

        logger.info("Game %d rejected by %s", invite.game_id, rejecter)
        return game

    def invites(self, user: Hashable, variant: GameVariant) -> Dict[Hashable, Invite]:
        """Pending invites of ``user``, keyed by challenger."""
        with self.players.read():
            data = self.players.get(user)
            return data.list_invites(variant) if data is not None else {}

    def _live_invite(
        self,
        data: Optional[PlayerData],
        user: Hashable,
        challenger: Hashable,
        variant: GameVariant,
        now: float,
    ) -> Invite:
        """Return the unexpired invite, purging it if expired. Players lock held."""
        invite = data.get_invite(variant, challenger) if data is not None else None
        if invite is None:
            raise NoInviteError()
        if invite.expired(now):
            data.remove_invite(variant, challenger)
            with self.games.write():
                self.games.remove(invite.game_id)
            challenger_data = self.players.get(challenger)
            if challenger_data is not None:
                challenger_data.slot(variant).unbind_game(invite.game_id)
            logger.info("Invite for game %d to %s expired", invite.game_id, user)
            raise NoInviteError()
        return invite

    # ── In-game operations ───────────────────────────────────

    def act_on_game(
        self,
        owner: Hashable,
        variant: GameVariant,
        operation: Callable[[PlayerData, int, GameMP], Any],
        opponent: Optional[Hashable] = None,
    ) -> Any:
        """
        Run ``operation`` on the duel ``owner`` is bound to.

        The operation receives ``(player_data, game_id, game)`` and
        returns ``Continue(value)``, ``Remove(value, commit_scores)`` or
        a bare value. On Remove the duel is deleted, both players are
        unbound and, with ``commit_scores``, both final scores are posted.

        Args:
            opponent: Selects the duel for turn-based play

        Returns:
            The operation's value

        Raises:
            NoGameError: If the owner has no duel in this slot
            GameDeletedError: If the binding pointed at a deleted duel
        """
        with self.players.write():
            data = self.players.get(owner)
            game_id = data.slot(variant).lookup(opponent) if data is not None else None
            if game_id is None:
                raise NoGameError()

            with self.games.write():
                game = self.games.get(game_id)
                if game is None:
                    data.slot(variant).unbind_game(game_id)
                    logger.warning("%s was bound to deleted game %d", owner, game_id)
                    raise GameDeletedError(game_id)

                outcome = as_outcome(operation(data, game_id, game))
                if isinstance(outcome, Remove):
                    self._remove_game(game_id, game)
                    if outcome.commit_scores:
                        self.scores.add_from_game(game)

        return outcome.value

    def _remove_game(self, game_id: int, game: GameMP) -> None:
        """Delete a duel with every binding and invite to it. Both locks held."""
        self.games.remove(game_id)
        challenger, challenged = game.user_ids
        for user_id in (challenger, challenged):
            data = self.players.get(user_id)
            if data is not None:
                data.slot(game.variant).unbind_game(game_id)
        challenged_data = self.players.get(challenged)
        if challenged_data is not None:
            invite = challenged_data.get_invite(game.variant, challenger)
            if invite is not None and invite.game_id == game_id:
                challenged_data.remove_invite(game.variant, challenger)
        logger.info("Game %d removed (%s)", game_id, game.progress)

    def guess(
        self,
        user: Hashable,
        variant: GameVariant,
        word: str,
        opponent: Optional[Hashable] = None,
    ):
        """Send a guess; returns a GuessReport. Finished duels are removed and scored."""
        word = word.strip().lower()
        if self.dictionary is not None and not self.dictionary.contains(word):
            raise WordNotFoundError(word)
        return self.act_on_game(user, variant, guess_operation(user, word), opponent)

    def forfeit(self, user: Hashable, variant: GameVariant, named_opponent: Hashable):
        """Abandon the duel against ``named_opponent``; returns a ForfeitReport."""
        return self.act_on_game(
            user, variant, forfeit_operation(user, named_opponent), named_opponent,
        )

    def keyboard(self, user: Hashable, variant: GameVariant, opponent: Optional[Hashable] = None) -> str:
        return self.act_on_game(user, variant, keyboard_operation(user), opponent)

    def status(self, user: Hashable, variant: GameVariant, opponent: Optional[Hashable] = None):
        return self.act_on_game(user, variant, status_operation(), opponent)

    # ── Expiry ───────────────────────────────────────────────

    def clean_invites(self, now: Optional[float] = None) -> List[int]:
        """Delete every expired invite with its waiting duel. Returns the game ids."""
        now = time.monotonic() if now is None else now
        removed: List[int] = []
        with self.players.write():
            with self.games.write():
                for _user, data in self.players.items():
                    for variant, challenger, invite in data.clean_invites(now):
                        self.games.remove(invite.game_id)
                        challenger_data = self.players.get(challenger)
                        if challenger_data is not None:
                            challenger_data.slot(variant).unbind_game(invite.game_id)
                        removed.append(invite.game_id)
            self.players.prune()
        if removed:
            logger.info("Expired invites removed: %s", removed)
        return removed

    def clean_games(self, now: Optional[float] = None) -> List[int]:
        """Delete timed duels running for longer than the game expiry. Returns the game ids."""
        now = time.monotonic() if now is None else now
        expiry = self.settings.timed_game_expiry
        removed: List[int] = []
        with self.players.write():
            with self.games.write():
                for game_id, game in self.games.items():
                    if game.variant is not GameVariant.TIMED or game.progress.is_waiting:
                        continue
                    if now - game.start >= expiry:
                        self._remove_game(game_id, game)
                        removed.append(game_id)
            self.players.prune()
        if removed:
            logger.info("Expired timed games removed: %s", removed)
        return removed

    def sweep(self, now: Optional[float] = None) -> SweepReport:
        """Run both expiry passes."""
        report = SweepReport(
            expired_invites=self.clean_invites(now),
            expired_games=self.clean_games(now),
        )
        logger.debug("Sweep removed %d games", report.total)
        return report
