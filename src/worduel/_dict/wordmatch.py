# Area: Dictionary
"""
worduel._dict.wordmatch — Per-letter guess feedback
===================================================

Computes Wordle-style feedback for a guess against a secret word.
Duplicate letters are credited at most as many times as they appear
in the secret.
"""

from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import List, Tuple

from ..errors import BadWordLengthError


class MatchLetter(IntEnum):
    """
    Feedback for one letter position.

    Ordered NULL < CLOSE < EXACT so the best status seen for a letter
    can be kept with ``max()``.
    """
    NULL = 0   # not present in word
    CLOSE = 1  # present elsewhere
    EXACT = 2  # present here


def match_word(secret: str, guess: str) -> Tuple[MatchLetter, ...]:
    """
    Match ``guess`` against ``secret``.

    Args:
        secret: The word being guessed
        guess: The candidate word

    Returns:
        One MatchLetter per position

    Raises:
        BadWordLengthError: If the two words differ in length
    """
    if len(secret) != len(guess):
        raise BadWordLengthError(len(guess))

    output: List[MatchLetter] = [MatchLetter.NULL] * len(secret)

    # First pass: exact positions; everything else stays in play
    inexact: List[int] = []
    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            output[i] = MatchLetter.EXACT
        else:
            inexact.append(i)

    # Second pass: secret letters not consumed by exact matches
    remaining = Counter(secret[i] for i in inexact)
    for i in inexact:
        letter = guess[i]
        if remaining[letter] > 0:
            output[i] = MatchLetter.CLOSE
            remaining[letter] -= 1

    return tuple(output)


def is_exact(wmatch: Tuple[MatchLetter, ...]) -> bool:
    """True if every position is an exact match."""
    return all(m == MatchLetter.EXACT for m in wmatch)
