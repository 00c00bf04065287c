# Area: Game
"""
worduel._game.multiplayer — Duel state machine
==============================================

A duel between two players. Side 0 is the challenger, side 1 the
challenged player. Each side guesses the word chosen by the other.

Progress only moves forward:
WAITING -> STARTED -> ENDING(first finisher) -> OVER(winner or draw).
Scores are computed exactly once, on the transition into OVER.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Hashable, List, Optional, Tuple

from ..errors import BadAcceptError, BadWordLengthError, GameStartedError, SelfChallengeError
from .enums import GameProgress, GameVariant, ProgressState
from .scoring import ScoringStrategy, strategy_for
from .side import GameSide

logger = logging.getLogger("worduel.game")

PLAYER_CAP = 2


class GameMP:
    """
    State of one duel.

    Attributes:
        variant: Ruleset, fixed at creation
        scoring: Scoring strategy of the variant, fixed at creation
        created: Monotonic creation time
    """

    def __init__(
        self,
        id_self: Hashable,
        id_challenged: Hashable,
        word: str,
        variant: GameVariant,
    ):
        if id_self == id_challenged:
            raise SelfChallengeError()
        self._sides: Tuple[GameSide, GameSide] = (GameSide(id_self), GameSide(id_challenged))
        self._sides[1].baseword = word
        self.created = time.monotonic()
        self._start = self.created
        self._end: List[Optional[float]] = [None, None]
        self._progress = GameProgress.waiting()
        self._score: List[int] = [0, 0]
        self._max_guesses = len(word) + 1
        self.variant = variant
        self.scoring: ScoringStrategy = strategy_for(variant)

    # ── Read-only views ──────────────────────────────────────

    @property
    def word_length(self) -> int:
        return len(self._sides[1].baseword)

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def progress(self) -> GameProgress:
        return self._progress

    @property
    def start(self) -> float:
        return self._start

    @property
    def scores(self) -> Tuple[int, int]:
        """Final scores; meaningful only once the duel is OVER."""
        return self._score[0], self._score[1]

    @property
    def user_ids(self) -> Tuple[Hashable, Hashable]:
        return self._sides[0].user_id, self._sides[1].user_id

    def get_side(self, index: int) -> GameSide:
        return self._sides[index]

    def get_user_id(self, index: int) -> Hashable:
        return self._sides[index].user_id

    def get_baseword(self, index: int) -> str:
        return self._sides[index].baseword

    def get_end(self, index: int) -> Optional[float]:
        return self._end[index]

    def match_user(self, user_id: Hashable) -> Optional[int]:
        """Match a user ID to a side index."""
        for i, side in enumerate(self._sides):
            if side.user_id == user_id:
                return i
        return None

    def opponent_of(self, user_id: Hashable) -> Optional[Hashable]:
        index = self.match_user(user_id)
        if index is None:
            return None
        return self._sides[1 - index].user_id

    # ── Transitions ──────────────────────────────────────────

    def respond(self, word: str, user_id: Hashable) -> None:
        """
        Start the duel with the challenged player's word.

        Args:
            word: Word the challenger will have to guess
            user_id: Responder; must be the challenged player

        Raises:
            GameStartedError: If the duel is not waiting
            BadWordLengthError: If the word length differs from the challenge word
            BadAcceptError: If the responder is not the challenged player
        """
        if not self._progress.is_waiting:
            raise GameStartedError(expected_started=False)
        if len(word) != self.word_length:
            raise BadWordLengthError(len(word))
        if user_id != self._sides[1].user_id:
            raise BadAcceptError()
        self._sides[0].baseword = word
        self._start = time.monotonic()
        self._progress = GameProgress.started()

    def send_guess(self, index: int, guess: str) -> bool:
        """
        Send a guess as side ``index``.

        Returns:
            True if the guess was accepted. A rejected guess changes nothing.
        """
        if index not in range(PLAYER_CAP) or len(guess) != self.word_length:
            logger.debug("Guess rejected: side=%s length=%d", index, len(guess))
            return False

        state = self._progress.state
        if state is ProgressState.STARTED:
            if self._push(index, guess):
                self._progress = GameProgress.ending(index)
            return True

        if state is ProgressState.ENDING:
            if self._progress.side == index:
                logger.debug("Guess rejected: side %d already finished", index)
                return False
            if self._push(index, guess):
                self._calculate_scores()
                self._progress = GameProgress.over(self._decide_winner())
                logger.info(
                    "Duel over: %s vs %s, outcome=%s, scores=%s",
                    *self.user_ids, self._progress, self.scores,
                )
            return True

        logger.debug("Guess rejected: duel is %s", self._progress)
        return False

    def _push(self, index: int, guess: str) -> bool:
        """Record a guess; stamp the side's end time and return True if it finished."""
        side = self._sides[index]
        finished = side.push_guess(guess)
        if finished or side.guess_count >= self._max_guesses:
            self._end[index] = time.monotonic()
            return True
        return False

    # ── Scoring ──────────────────────────────────────────────

    def _calculate_scores(self) -> None:
        if any(end is None for end in self._end):
            return
        spans = [end - self._start for end in self._end]
        latest = max(spans)
        victory = [side.victorious() for side in self._sides]

        # Time only counts when both sides found their word
        if all(victory):
            advantages = [math.ceil(latest - span) for span in spans]
        else:
            advantages = [0, 0]

        for i, side in enumerate(self._sides):
            if not victory[i]:
                self._score[i] = 0
            else:
                self._score[i] = self.scoring.score(
                    side, self._sides[1 - i], advantages[i],
                    self._max_guesses, self.word_length,
                )

    def _decide_winner(self) -> Optional[int]:
        """Pick the side with the strictly higher score; losers and draws score 0."""
        if self._score[0] == self._score[1]:
            self._score = [0, 0]
            return None
        winner = 0 if self._score[0] > self._score[1] else 1
        self._score[1 - winner] = 0
        return winner
