"""Utility functions for bracket construction and progression."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from shuttleboard.core.constants import BYE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import Team

T = TypeVar("T")


def next_power_of_two(count: int) -> int:
    """Return the smallest power of two greater than or equal to count."""
    size = 1
    while size < count:
        size *= 2
    return size


def shuffled(items: Iterable[T], rng: Optional[Any] = None) -> list[T]:
    """Return a uniformly shuffled copy of items.

    ``rng`` is anything exposing ``shuffle`` (a ``random.Random`` instance or
    the ``random`` module itself).
    """
    result = list(items)
    (rng or random).shuffle(result)
    return result


def make_bye(index: int) -> Team:
    """Build the placeholder team that pads a bracket."""
    return {"id": f"bye-{index}", "name": BYE_NAME, "players": [], "isBye": True}


def is_bye(team: Optional[Team]) -> bool:
    """Check whether a bracket slot holds the bye sentinel."""
    return bool(team and team.get("isBye"))


def match_id(round_index: int, match_index: int) -> str:
    """Build the identifier of a match from its bracket position."""
    if round_index == 0:
        return f"m{match_index}"
    return f"r{round_index}-m{match_index}"
