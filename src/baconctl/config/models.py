"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, baconctl.toml only contains
overrides.  A dataset laid out as ``inputs/bacon/*.txt`` under the
working directory needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator


class DataConfig(BaseModel):
    """[data] section."""

    model_config = {"frozen": True}

    directory: Path = Path("inputs/bacon")
    actors_file: str = "actors.txt"
    movies_file: str = "movies.txt"
    movie_actors_file: str = "movie-actors.txt"
    delimiter: str = "|"
    encoding: str = "utf-8"

    @field_validator("delimiter")
    @classmethod
    def _non_empty_delimiter(cls, value: str) -> str:
        if not value:
            msg = "delimiter must not be empty"
            raise ValueError(msg)
        return value

    def resolve(self, root: Path) -> tuple[Path, Path, Path]:
        """Return the actors, movies, and movie-actors paths under *root*."""
        base = self.directory if self.directory.is_absolute() else root / self.directory
        return (
            base / self.actors_file,
            base / self.movies_file,
            base / self.movie_actors_file,
        )


class GameConfig(BaseModel):
    """[game] section."""

    model_config = {"frozen": True}

    center: str = "Kevin Bacon"
    prompt_suffix: str = "game >"
