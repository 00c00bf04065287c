# Area: Dictionary
"""
worduel._dict.dictionary — Word dictionary
==========================================

Immutable word set bucketed by length. Read-only once built, so it is
shared between threads without locking.
"""

from __future__ import annotations

import json
import logging
import os
import random
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from ..constants import DICT_FILENAME, DICT_VARNAME

logger = logging.getLogger("worduel.dictionary")


class Dictionary:
    """
    Set of valid words, queryable by membership and by length class.

    Words are stored lower case. Within a length class the order of
    first appearance is kept, which makes random selection reproducible
    under a seeded ``random.Random``.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        buckets: Dict[int, Dict[str, None]] = {}
        for word in words:
            word = word.strip().lower()
            if not word:
                continue
            buckets.setdefault(len(word), {})[word] = None
        self._data: Dict[int, Tuple[str, ...]] = {
            length: tuple(bucket) for length, bucket in buckets.items()
        }
        self._sets = {length: frozenset(bucket) for length, bucket in self._data.items()}
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._data.values())

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def contains(self, word: str) -> bool:
        """Exact membership test, case-insensitive."""
        word = word.lower()
        bucket = self._sets.get(len(word))
        return bucket is not None and word in bucket

    def random_with_length(self, length: int) -> Optional[str]:
        """Return a uniformly chosen word of ``length``, or None."""
        bucket = self._data.get(length)
        if not bucket:
            return None
        return self._rng.choice(bucket)

    def lengths(self) -> Tuple[int, ...]:
        """Sorted word lengths present in the dictionary."""
        return tuple(sorted(self._data))


def get_dict_path(path: Optional[str] = None) -> Path:
    """
    Resolve the dictionary path.

    Order: explicit argument, then the WORDCLASH_DICTIONARY environment
    variable, then ``dictionary.json`` in the working directory.
    """
    if path:
        return Path(path)
    env_path = os.environ.get(DICT_VARNAME)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DICT_FILENAME


def load_dictionary(path: Optional[str] = None) -> Dictionary:
    """
    Load a dictionary from a JSON array of words.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of strings
    """
    dict_path = get_dict_path(path)
    with open(dict_path, "r", encoding="utf-8") as f:
        words = json.load(f)

    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise ValueError(f"Dictionary file must contain an array of words: {dict_path}")

    dictionary = Dictionary(words)
    logger.info("Dictionary loaded from %s (%d words)", dict_path, len(dictionary))
    return dictionary
