# Area: Registry
"""
worduel._registry.outcome — In-game operation results
=====================================================

An operation run through ``WorduelService.act_on_game`` returns either
``Continue(value)`` to leave the duel in place, or ``Remove(value)`` to
delete it afterwards, optionally posting its scores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Continue:
    """Keep the duel; hand ``value`` back to the caller."""
    value: Any = None


@dataclass(frozen=True)
class Remove:
    """
    Delete the duel and clear both players' bindings.

    Attributes:
        value: Returned to the caller
        commit_scores: Post both sides' final scores to the leaderboard
    """
    value: Any = None
    commit_scores: bool = False


Outcome = Union[Continue, Remove]


def as_outcome(result: Any) -> Outcome:
    """Wrap a bare operation result as Continue."""
    if isinstance(result, (Continue, Remove)):
        return result
    return Continue(result)
