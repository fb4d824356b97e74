"""Separation values — a hop count or the single "infinite" sentinel.

Every layer that reports how far an actor sits from the center uses
:data:`Separation`, so "not in the tree" is never confused with a
numeric path length.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, TypeGuard


class Reach(Enum):
    """Sentinel namespace for separations that are not a hop count."""

    UNREACHABLE = "unreachable"

    def __repr__(self) -> str:
        return "UNREACHABLE"

    def __str__(self) -> str:
        return "infinity"


UNREACHABLE = Reach.UNREACHABLE

type Separation = int | Literal[Reach.UNREACHABLE]


def is_reachable(separation: Separation) -> TypeGuard[int]:
    """Return True when *separation* is a finite hop count."""
    return separation is not UNREACHABLE


def to_json(separation: Separation) -> int | None:
    """JSON-friendly form: the hop count, or None for infinite separation."""
    if separation is UNREACHABLE:
        return None
    return separation
