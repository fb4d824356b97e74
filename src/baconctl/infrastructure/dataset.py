"""Dataset ingestion — three delimited files into the actor universe graph.

File formats (one record per line, blank lines ignored):

- actors:        ``<actor_id>|<actor name>``
- movies:        ``<movie_id>|<movie title>``
- movie-actors:  ``<movie_id>|<actor_id>``

Actors become vertices.  Two actors who appeared in at least one movie
together are joined by an undirected edge labeled with the frozenset of
every movie title they share.  Actors listed in the actors file with no
movie pairing are kept as isolated vertices.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import combinations
from pathlib import Path

from baconctl.domain.errors import DatasetError
from baconctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)

type Universe = GraphStore[str, frozenset[str]]

DEFAULT_DELIMITER = "|"


# ---------------------------------------------------------------------------
# Line readers
# ---------------------------------------------------------------------------


def _records(path: Path, *, delimiter: str, encoding: str) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, fields)`` for each non-blank line of *path*."""
    try:
        text = path.read_text(encoding=encoding)
    except OSError as exc:
        raise DatasetError(path, None, f"cannot read file ({exc.strerror or exc})") from exc
    except UnicodeDecodeError as exc:
        raise DatasetError(path, None, f"not valid {encoding} text") from exc

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        yield lineno, line.split(delimiter, 1)


def _parse_id(path: Path, lineno: int, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise DatasetError(path, lineno, f"expected an integer id, got {raw.strip()!r}") from None


def read_id_map(
    path: Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> dict[int, str]:
    """Read an ``<id>|<name>`` file into an id -> name mapping."""
    mapping: dict[int, str] = {}
    for lineno, fields in _records(path, delimiter=delimiter, encoding=encoding):
        if len(fields) != 2 or not fields[1].strip():
            raise DatasetError(path, lineno, f"expected '<id>{delimiter}<name>'")
        mapping[_parse_id(path, lineno, fields[0])] = fields[1].strip()
    return mapping


def read_pairings(
    path: Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> list[tuple[int, int, int]]:
    """Read a ``<movie_id>|<actor_id>`` file as ``(line, movie_id, actor_id)``."""
    pairings: list[tuple[int, int, int]] = []
    for lineno, fields in _records(path, delimiter=delimiter, encoding=encoding):
        if len(fields) != 2:
            raise DatasetError(path, lineno, f"expected '<movie_id>{delimiter}<actor_id>'")
        movie_id = _parse_id(path, lineno, fields[0])
        actor_id = _parse_id(path, lineno, fields[1])
        pairings.append((lineno, movie_id, actor_id))
    return pairings


# ---------------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------------


def build_universe(
    actors: dict[int, str],
    movies: dict[int, str],
    pairings: list[tuple[int, int, int]],
    *,
    source: Path | None = None,
) -> Universe:
    """Build the co-star graph from already-parsed records.

    Args:
        actors: actor id -> actor name.
        movies: movie id -> movie title.
        pairings: ``(line, movie_id, actor_id)`` rows.
        source: Pairings file, used only to locate errors.
    """
    where = source or Path("<pairings>")

    # Movie title -> cast in order of first appearance.
    casts: dict[str, dict[str, None]] = {}
    for lineno, movie_id, actor_id in pairings:
        title = movies.get(movie_id)
        if title is None:
            raise DatasetError(where, lineno, f"unknown movie id {movie_id}")
        name = actors.get(actor_id)
        if name is None:
            raise DatasetError(where, lineno, f"unknown actor id {actor_id}")
        casts.setdefault(title, {})[name] = None

    universe: Universe = GraphStore()
    for name in actors.values():
        universe.insert_vertex(name)

    shared: dict[tuple[str, str], set[str]] = {}
    for title, cast in casts.items():
        for a, b in combinations(cast, 2):
            key = (a, b) if (b, a) not in shared else (b, a)
            shared.setdefault(key, set()).add(title)

    for (a, b), titles in shared.items():
        universe.insert_undirected(a, b, frozenset(titles))

    logger.debug(
        "Built universe: %d actors, %d movies, %d co-star pairs",
        universe.num_vertices(),
        len(casts),
        len(shared),
    )
    return universe


def load_universe(
    actors_path: Path,
    movies_path: Path,
    movie_actors_path: Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> Universe:
    """Parse the three dataset files and build the universe graph.

    Raises:
        DatasetError: On unreadable files, malformed lines, or pairings
            that reference unknown ids.
    """
    actors = read_id_map(actors_path, delimiter=delimiter, encoding=encoding)
    movies = read_id_map(movies_path, delimiter=delimiter, encoding=encoding)
    pairings = read_pairings(movie_actors_path, delimiter=delimiter, encoding=encoding)
    logger.debug(
        "Read dataset: %d actors, %d movies, %d pairings",
        len(actors),
        len(movies),
        len(pairings),
    )
    return build_universe(actors, movies, pairings, source=movie_actors_path)
