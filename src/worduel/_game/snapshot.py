# Area: Game
"""
worduel._game.snapshot — Duel snapshot builder
==============================================

Builds serializable snapshots of a duel for status queries and logs.
Secret words are only included once the duel is over.
"""

from ..types import GameSnapshot, SideSnapshot
from .multiplayer import GameMP


def build_game_snapshot(game: GameMP) -> GameSnapshot:
    """Build a serializable snapshot of ``game``."""
    reveal = game.progress.is_over
    return {
        "variant": game.variant.value,
        "progress": game.progress.state.value,
        "progress_side": game.progress.side,
        "word_length": game.word_length,
        "max_guesses": game.max_guesses,
        "scores": list(game.scores) if reveal else [0, 0],
        "sides": [_side_snapshot(game, i, reveal) for i in range(2)],
    }


def _side_snapshot(game: GameMP, index: int, reveal: bool) -> SideSnapshot:
    """Build snapshot for one side."""
    side = game.get_side(index)
    return {
        "user_id": side.user_id,
        "guesses": [record.word for record in side.guesses],
        "feedback": [[int(m) for m in record.wmatch] for record in side.guesses],
        "finished": game.get_end(index) is not None,
        "victorious": side.victorious(),
        "secret": side.baseword if reveal else None,
    }
