# Area: Dictionary
"""
Dictionary and word matching.

This package contains:
- The immutable word dictionary and its loader
- The duplicate-aware word matcher
- Input validation helpers for callers
"""

from .wordmatch import MatchLetter, match_word, is_exact
from .dictionary import Dictionary, load_dictionary, get_dict_path
from .queries import ensure_word, check_length

__all__ = [
    "MatchLetter",
    "match_word",
    "is_exact",
    "Dictionary",
    "load_dictionary",
    "get_dict_path",
    "ensure_word",
    "check_length",
]
