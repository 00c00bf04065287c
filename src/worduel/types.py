"""
worduel.types — TypedDict schemas for snapshots
================================================

Documents the structure of the dictionaries returned by status
queries. All types are exported from the main package:

    from worduel import GameSnapshot, SideSnapshot

Use __annotations__ to inspect fields:

    >>> SideSnapshot.__annotations__["guesses"]
    typing.List[str]
"""

from typing import Any, List, Optional, TypedDict


class SideSnapshot(TypedDict):
    """One side of a duel.

    Fields
    ------
    user_id : Any
        External identity of the player.
    guesses : List[str]
        Guessed words, oldest first.
    feedback : List[List[int]]
        Per-guess feedback; 0 = absent, 1 = elsewhere, 2 = exact.
    finished : bool
        True once the side won or ran out of guesses.
    victorious : bool
        True if the last guess matched the secret exactly.
    secret : Optional[str]
        Word this side had to guess; only set once the duel is over.
    """
    user_id: Any
    guesses: List[str]
    feedback: List[List[int]]
    finished: bool
    victorious: bool
    secret: Optional[str]


class GameSnapshot(TypedDict):
    """A whole duel.

    Fields
    ------
    variant : str
        "timed" or "turn_based".
    progress : str
        "waiting", "started", "ending" or "over".
    progress_side : Optional[int]
        First finisher while ending; winner (None on draw) once over.
    word_length : int
        Length of both secret words.
    max_guesses : int
        Guesses allowed per side.
    scores : List[int]
        Final scores, [0, 0] until the duel is over.
    sides : List[SideSnapshot]
        Challenger first, challenged player second.
    """
    variant: str
    progress: str
    progress_side: Optional[int]
    word_length: int
    max_guesses: int
    scores: List[int]
    sides: List[SideSnapshot]
