# Area: Dictionary
"""
worduel._dict.queries — Word validation for callers
===================================================

Turns raw user input into a valid secret or guess word, or raises a
typed error that can be shown to the user verbatim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..constants import MAX_WORDSIZE, MIN_WORDSIZE
from ..errors import BadWordLengthError, WordNotFoundError
from .dictionary import Dictionary

if TYPE_CHECKING:
    from ..config import EngineSettings


def check_length(length: int, settings: Optional["EngineSettings"] = None) -> None:
    """Raise BadWordLengthError if ``length`` is outside the allowed bounds."""
    low = settings.min_wordsize if settings else MIN_WORDSIZE
    high = settings.max_wordsize if settings else MAX_WORDSIZE
    if length < low or length > high:
        raise BadWordLengthError(length)


def ensure_word(
    dictionary: Dictionary,
    raw: str,
    settings: Optional["EngineSettings"] = None,
) -> str:
    """
    Validate ``raw`` and return it lower case.

    An integer string is a length request: a random word of that length
    is drawn from the dictionary instead.

    Raises:
        BadWordLengthError: Length out of bounds, or no word of that length
        WordNotFoundError: Word not in the dictionary
    """
    raw = raw.strip()
    if raw.isdecimal():
        length = int(raw)
        check_length(length, settings)
        word = dictionary.random_with_length(length)
        if word is None:
            raise BadWordLengthError(length)
        return word.lower()

    check_length(len(raw), settings)
    if not dictionary.contains(raw):
        raise WordNotFoundError(raw)
    return raw.lower()
