# Area: Game
"""
worduel._game.side — Per-player state within a duel
===================================================

A side owns the secret word its player must guess, the ordered guess
history and the keyboard: the best feedback ever seen for each letter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

from .._dict.wordmatch import MatchLetter, is_exact, match_word


@dataclass(frozen=True)
class GuessRecord:
    """One guess and its per-letter feedback."""
    word: str
    wmatch: Tuple[MatchLetter, ...]

    @property
    def exact(self) -> bool:
        return is_exact(self.wmatch)


@dataclass
class GameSide:
    """
    One player's side of a duel.

    Attributes:
        user_id: External identity of the player
        baseword: Word this side has to guess (empty until chosen)
        guesses: Append-only guess history
        keyboard: Letter -> best MatchLetter observed, never downgraded
    """

    user_id: Hashable
    baseword: str = ""
    guesses: List[GuessRecord] = field(default_factory=list)
    keyboard: Dict[str, MatchLetter] = field(default_factory=dict)

    @property
    def guess_count(self) -> int:
        return len(self.guesses)

    @property
    def last_guess(self) -> Optional[GuessRecord]:
        return self.guesses[-1] if self.guesses else None

    def push_guess(self, guess: str) -> bool:
        """Record a guess. Returns True if it wins."""
        wmatch = match_word(self.baseword, guess)
        for letter, status in zip(guess, wmatch):
            # Repeated letters in one guess may carry different statuses
            self.keyboard[letter] = max(self.keyboard.get(letter, MatchLetter.NULL), status)
        self.guesses.append(GuessRecord(guess, wmatch))
        return self.victorious()

    def victorious(self) -> bool:
        """True if the last guess is an exact match for every letter."""
        last = self.last_guess
        return last is not None and last.exact

    def calculate_timed_score(self, seconds: int, max_guesses: int) -> int:
        """
        Timed score, assuming the last guess won.

        seconds: time advantage over the opposite player (0 if last).
        """
        return seconds + (1 + max_guesses - min(self.guess_count, max_guesses)) * 3

    def calculate_turn_score(self, max_guesses: int, diff_guesses: int, word_length: int) -> int:
        """
        Turn-based score, assuming the last guess won.

        diff_guesses: how many more guesses the opponent used.
        """
        base = max_guesses - min(self.guess_count, max_guesses) + 1
        return math.floor((diff_guesses ** 1.6 * 4 + base) * word_length / 5)
