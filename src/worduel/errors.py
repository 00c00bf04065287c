"""
worduel.errors — Custom exception classes
==========================================

Defines the exception hierarchy for duel engine errors.
Every error is recoverable: it is raised to the immediate caller,
which decides how to report it. Each exception stores its context
for structured logging via ``to_dict()``.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class WorduelError(Exception):
    """Base exception for all worduel engine errors."""

    code = "WORDUEL_ERROR"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        return "Worduel error"

    def context(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.code,
            "message": str(self),
            **self.context(),
        }


class BadWordLengthError(WorduelError):
    """Raised when a word (or requested length) has the wrong length."""

    code = "BAD_WORD_LENGTH"

    def __init__(self, length: int):
        self.length = length
        super().__init__()

    def default_message(self) -> str:
        return f"Word length invalid: {self.length}"

    def context(self) -> Dict[str, Any]:
        return {"length": self.length}


class WordNotFoundError(WorduelError):
    """Raised when a word is not in the dictionary."""

    code = "WORD_NOT_FOUND"

    def __init__(self, word: str):
        self.word = word
        super().__init__()

    def default_message(self) -> str:
        return f"Word not found in dictionary: {self.word}"

    def context(self) -> Dict[str, Any]:
        return {"word": self.word}


class NoGameError(WorduelError):
    """Raised when the caller has no game bound to the requested slot."""

    code = "NO_GAME"

    def default_message(self) -> str:
        return "You are not in a game"


class SelfChallengeError(WorduelError):
    """Raised when a user challenges themselves."""

    code = "SELF_CHALLENGE"

    def default_message(self) -> str:
        return "You cannot challenge yourself"


class AlreadyInGameError(WorduelError):
    """Raised when the caller (or the target) already occupies the slot."""

    code = "ALREADY_IN_GAME"

    def __init__(self, target: bool = False):
        self.target = target
        super().__init__()

    def default_message(self) -> str:
        if self.target:
            return "Target is already in a game"
        return "You're already in a game"

    def context(self) -> Dict[str, Any]:
        return {"target": self.target}


class NoInviteError(WorduelError):
    """Raised when there is no pending invite to accept or reject."""

    code = "NO_INVITE"

    def default_message(self) -> str:
        return "No invite from this player"


class GameDeletedError(WorduelError):
    """Raised when a binding points at a game that no longer exists."""

    code = "GAME_DELETED"

    def __init__(self, game_id: Optional[int] = None):
        self.game_id = game_id
        super().__init__()

    def default_message(self) -> str:
        return "Game assigned but deleted"

    def context(self) -> Dict[str, Any]:
        return {"game_id": self.game_id}


class BadAcceptError(WorduelError):
    """Raised when a game cannot be accepted by this user."""

    code = "BAD_ACCEPT"

    def default_message(self) -> str:
        return "Cannot accept this game"


class GameStartedError(WorduelError):
    """Raised when an operation needs the opposite progress state.

    ``expected_started`` is True when the operation needed a started
    game but the game is still waiting, and False when it needed a
    waiting game but the game has already started.
    """

    code = "GAME_STARTED"

    def __init__(self, expected_started: bool):
        self.expected_started = expected_started
        super().__init__()

    def default_message(self) -> str:
        return "Game not yet started" if self.expected_started else "Game already started"

    def context(self) -> Dict[str, Any]:
        return {"expected_started": self.expected_started}


class ForfeitBadUserError(WorduelError):
    """Raised when a forfeit does not name the actual opponent."""

    code = "FORFEIT_BAD_USER"

    def default_message(self) -> str:
        return "To forfeit, specify your opponent"


class InvalidScoreError(WorduelError):
    """Raised when a leaderboard update carries a negative score."""

    code = "INVALID_SCORE"

    def __init__(self, score: int):
        self.score = score
        super().__init__()

    def default_message(self) -> str:
        return f"Score delta must not be negative: {self.score}"

    def context(self) -> Dict[str, Any]:
        return {"score": self.score}


class ConfigError(WorduelError):
    """Raised when engine settings fail validation."""

    code = "CONFIG_ERROR"

    def default_message(self) -> str:
        return "Invalid engine configuration"
