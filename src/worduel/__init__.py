"""
worduel — Two-player word duel engine
=====================================

Each player picks a secret word for the other to guess, with
Wordle-style per-letter feedback. Duels are timed (one at a time, the
faster solver earns a time bonus) or turn-based (one per opponent, fewer
guesses than the opponent earns the bonus).

Quick Start:
    from worduel import WorduelService, GameVariant, load_dictionary

    service = WorduelService(dictionary=load_dictionary())
    service.challenge("alice", "bob", GameVariant.TIMED, "north")
    service.accept_invite("bob", "alice", GameVariant.TIMED, "slide")
    report = service.guess("alice", GameVariant.TIMED, "slide")
    print(report.views)

Housekeeping:
    Call ``service.sweep()`` periodically, or run a CleanupWorker, to
    drop expired invites and overlong timed duels.

Type Definitions
----------------
Status snapshots are plain dicts documented as TypedDicts:

    from worduel import GameSnapshot, SideSnapshot
"""

from .config import EngineSettings, load_settings
from .service import WorduelService, SweepReport
from .worker import CleanupWorker
from ._dict import Dictionary, MatchLetter, ensure_word, load_dictionary, match_word
from ._game import GameMP, GameProgress, GameVariant, ProgressState, build_game_snapshot
from ._registry import (
    Continue,
    Remove,
    Invite,
    GuessReport,
    ForfeitReport,
    ScoreManager,
)
from ._shared import setup_logging
from .errors import (
    WorduelError,
    BadWordLengthError,
    WordNotFoundError,
    NoGameError,
    SelfChallengeError,
    AlreadyInGameError,
    NoInviteError,
    GameDeletedError,
    BadAcceptError,
    GameStartedError,
    ForfeitBadUserError,
    InvalidScoreError,
    ConfigError,
)
from .types import GameSnapshot, SideSnapshot

__all__ = [
    # Main classes
    "WorduelService",
    "SweepReport",
    "CleanupWorker",
    "EngineSettings",
    "load_settings",
    "setup_logging",
    # Words
    "Dictionary",
    "MatchLetter",
    "ensure_word",
    "load_dictionary",
    "match_word",
    # Duels
    "GameMP",
    "GameProgress",
    "GameVariant",
    "ProgressState",
    "build_game_snapshot",
    # Operations
    "Continue",
    "Remove",
    "Invite",
    "GuessReport",
    "ForfeitReport",
    "ScoreManager",
    # Errors
    "WorduelError",
    "BadWordLengthError",
    "WordNotFoundError",
    "NoGameError",
    "SelfChallengeError",
    "AlreadyInGameError",
    "NoInviteError",
    "GameDeletedError",
    "BadAcceptError",
    "GameStartedError",
    "ForfeitBadUserError",
    "InvalidScoreError",
    "ConfigError",
    # Types
    "GameSnapshot",
    "SideSnapshot",
]
__version__ = "1.0.0"
