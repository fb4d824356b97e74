"""Shared pytest fixtures and test helpers for baconctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from baconctl.infrastructure.dataset import Universe, load_universe
from baconctl.infrastructure.graph.store import GraphStore

# ---------------------------------------------------------------------------
# Sample dataset
#
# Apollo 13 links Bacon, Hanks, Paxton and Sinise; The River Wild adds
# Streep; Twister hangs Hunt off Paxton.  Ann and Bob only know each
# other, Lonely Star made a film alone, and Unknown Extra made none.
# ---------------------------------------------------------------------------

ACTORS = """\
1|Kevin Bacon
2|Tom Hanks
3|Meryl Streep
4|Bill Paxton
5|Gary Sinise
6|Helen Hunt
7|Lonely Star
8|Ann Island
9|Bob Island
10|Unknown Extra
"""

MOVIES = """\
1|Apollo 13
2|The River Wild
3|Forrest Gump
4|Twister
5|Indie Short
6|Island Film
"""

MOVIE_ACTORS = """\
1|1
1|2
1|4
1|5
2|1
2|3
3|2
3|5
4|4
4|6
5|7
6|8
6|9
"""


def write_dataset(
    directory: Path,
    *,
    actors: str = ACTORS,
    movies: str = MOVIES,
    movie_actors: str = MOVIE_ACTORS,
) -> Path:
    """Write the three dataset files into *directory* and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "actors.txt").write_text(actors, encoding="utf-8")
    (directory / "movies.txt").write_text(movies, encoding="utf-8")
    (directory / "movie-actors.txt").write_text(movie_actors, encoding="utf-8")
    return directory


def make_graph(edges: list[tuple[str, str]], *, isolated: tuple[str, ...] = ()) -> GraphStore:
    """Build an undirected graph whose edge labels name the pair."""
    g: GraphStore[str, frozenset[str]] = GraphStore()
    for a, b in edges:
        g.insert_vertex(a)
        g.insert_vertex(b)
        g.insert_undirected(a, b, frozenset({f"{a}{b}"}))
    for v in isolated:
        g.insert_vertex(v)
    return g


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host BACONCTL_* variables out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("BACONCTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` runs switch telemetry on for the whole thread; switch it back off."""
    yield
    from baconctl.services.telemetry import disable_telemetry

    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """Sample dataset at the default ``inputs/bacon`` location under tmp_path."""
    return write_dataset(tmp_path / "inputs" / "bacon")


@pytest.fixture
def universe(dataset_dir: Path) -> Universe:
    """The sample dataset loaded as a universe graph."""
    return load_universe(
        dataset_dir / "actors.txt",
        dataset_dir / "movies.txt",
        dataset_dir / "movie-actors.txt",
    )


@pytest.fixture
def chain() -> GraphStore:
    """A–B–C–D with labels {M1}, {M1}, {M2}, plus isolated E."""
    g: GraphStore[str, frozenset[str]] = GraphStore()
    for v in "ABCDE":
        g.insert_vertex(v)
    g.insert_undirected("A", "B", frozenset({"M1"}))
    g.insert_undirected("B", "C", frozenset({"M1"}))
    g.insert_undirected("C", "D", frozenset({"M2"}))
    return g


@pytest.fixture
def _isolated_project(dataset_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Change CWD to a temp project holding the sample dataset.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(dataset_dir.parent.parent)
    yield
