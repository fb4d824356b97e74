"""Exception hierarchy shared by the graph core and its collaborators.

There is no "no path" error: an actor missing from a shortest-path
tree is reported as :data:`~baconctl.domain.separation.UNREACHABLE`,
not raised.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class BaconError(Exception):
    """Base class for all baconctl errors."""


class VertexNotFoundError(BaconError, KeyError):
    """An operation required a vertex that is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex not found: {self.vertex!r}"


class EdgeNotFoundError(BaconError, KeyError):
    """A label lookup referenced an edge that does not exist."""

    def __init__(self, frm: Any, to: Any) -> None:
        super().__init__(frm, to)
        self.frm = frm
        self.to = to

    def __str__(self) -> str:
        return f"Edge not found: {self.frm!r} -> {self.to!r}"


class DegenerateTreeError(BaconError, ValueError):
    """Average separation is undefined for a tree holding only its root."""

    def __init__(self, root: Any) -> None:
        super().__init__(root)
        self.root = root

    def __str__(self) -> str:
        return f"Tree rooted at {self.root!r} has no other vertices"


class DatasetError(BaconError, ValueError):
    """A dataset file could not be parsed."""

    def __init__(self, path: Path, line: int | None, reason: str) -> None:
        super().__init__(path, line, reason)
        self.path = path
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        where = f"{self.path}:{self.line}" if self.line is not None else str(self.path)
        return f"{where}: {self.reason}"


class CommandError(BaconError, ValueError):
    """A game command line could not be parsed."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(line, reason)
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        return self.reason
