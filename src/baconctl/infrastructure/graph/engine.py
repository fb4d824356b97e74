"""GraphEngine — lazy-built universe graph from the configured dataset.

Built once per process on first access and never mutated afterwards.
Commands that fail before touching the graph (bad flags, ``--help``)
never parse the dataset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from baconctl.infrastructure.dataset import Universe, load_universe

if TYPE_CHECKING:
    from pathlib import Path

    from baconctl.config.models import DataConfig


class GraphEngine:
    """Lazy-loading holder for the actor universe graph."""

    def __init__(self, data: DataConfig, root: Path) -> None:
        self._data = data
        self._root = root
        self._graph: Universe | None = None

    @property
    def paths(self) -> tuple[Path, Path, Path]:
        """Resolved actors, movies, and movie-actors file paths."""
        return self._data.resolve(self._root)

    @property
    def graph(self) -> Universe:
        """Return the universe, parsing the dataset on first access."""
        if self._graph is None:
            self._graph = self._build_from_files()
        return self._graph

    def _build_from_files(self) -> Universe:
        actors, movies, movie_actors = self.paths
        return load_universe(
            actors,
            movies,
            movie_actors,
            delimiter=self._data.delimiter,
            encoding=self._data.encoding,
        )
