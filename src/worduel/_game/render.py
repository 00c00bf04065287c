# Area: Game
"""
worduel._game.render — Plain-text duel views
============================================

Text renderings of a duel for hosts that show boards to players:
one board per side, both boards side by side, the letter keyboard and
a one-line state summary.
"""

from __future__ import annotations

from typing import List

from .._dict.wordmatch import MatchLetter
from ..constants import VIEW_SEPARATOR
from .enums import ProgressState
from .multiplayer import GameMP

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def render_letter(letter: str, status: MatchLetter) -> str:
    """Render one letter as ' X ', ':X:' or '[X]'."""
    letter = letter.upper()
    if status == MatchLetter.EXACT:
        return f"[{letter}]"
    if status == MatchLetter.CLOSE:
        return f":{letter}:"
    return f" {letter} "


def render_view(game: GameMP, index: int) -> str:
    """Render the board of side ``index``, one row per allowed guess."""
    side = game.get_side(index)
    empty_line = " " * (game.word_length * 3)
    rows: List[str] = []
    for i in range(game.max_guesses):
        if i < side.guess_count:
            record = side.guesses[i]
            rows.append("".join(render_letter(c, m) for c, m in zip(record.word, record.wmatch)))
        else:
            rows.append(empty_line)
    return "\n".join(rows)


def render_views(game: GameMP, separator: str = VIEW_SEPARATOR) -> str:
    """Render both boards side by side, side 0 on the left."""
    left = render_view(game, 0).split("\n")
    right = render_view(game, 1).split("\n")
    return "\n".join(separator.join(pair) for pair in zip(left, right))


def render_keyboard(game: GameMP, index: int) -> str:
    """
    Render the keyboard of side ``index``.

    Letters never guessed stay lower case; guessed letters use the
    board notation.
    """
    keyboard = game.get_side(index).keyboard
    lines = []
    for row in KEYBOARD_ROWS:
        cells = []
        for letter in row:
            status = keyboard.get(letter)
            cells.append(f" {letter} " if status is None else render_letter(letter, status))
        lines.append("".join(cells))
    return "\n".join(lines)


def render_stateline(game: GameMP, want_scores: bool = True) -> str:
    """One-line summary of the duel's progress."""
    progress = game.progress
    if progress.state is ProgressState.WAITING:
        return "Waiting"
    if progress.state is ProgressState.STARTED:
        return "Both players active, game in progress"
    if progress.state is ProgressState.ENDING:
        end = game.get_end(progress.side)
        finished = f"{int(end - game.start)} seconds" if end is not None else "some time"
        return f"Player {progress.side} finished in {finished}, game in progress"
    if progress.winner is None:
        return "Game over (draw)"
    if not want_scores:
        return "Game over"
    winner = progress.winner
    scores = game.scores
    return (
        f"Game over (winner: {game.get_user_id(winner)}, "
        f"score: {scores[winner]}:{scores[1 - winner]})"
    )
