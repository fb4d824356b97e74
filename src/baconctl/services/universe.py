"""UniverseService — the Bacon game's queries as ServiceResult operations.

One method per game command: summary/recenter (``u``), path (``p``),
rank (``c``), degree (``d``), separation (``s``), unreachable (``i``).
An actor with no connection to the center is an ordinary ``ok`` result
with ``separation: null``; only unknown actors and bad arguments fail.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from baconctl.domain.errors import VertexNotFoundError
from baconctl.domain.separation import to_json
from baconctl.infrastructure.graph.engine import GraphEngine
from baconctl.services.base import BaseService
from baconctl.services.query import QueryEngine
from baconctl.services.result import ServiceResult
from baconctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from baconctl.config.settings import BaconSettings

logger = logging.getLogger(__name__)


def open_universe(settings: BaconSettings) -> UniverseService:
    """Load the configured dataset and center it on the initial center.

    Raises:
        DatasetError: If the dataset cannot be parsed.
        VertexNotFoundError: If the initial center is not in the universe.
    """
    graph = GraphEngine(settings.data, settings.project_root).graph
    return UniverseService(QueryEngine(graph, settings.initial_center))


class UniverseService(BaseService):
    """Handles every center-relative query of the game."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _not_found(op: str, name: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            f"Actor '{name}' not found in the universe",
            name=name,
        )

    @staticmethod
    def _check_range(op: str, low: int, high: int) -> ServiceResult | None:
        if low > high:
            return ServiceResult.failure(
                op,
                "INVALID_RANGE",
                f"Low bound {low} is greater than high bound {high}",
                low=low,
                high=high,
            )
        return None

    def _summary_data(self) -> dict[str, Any]:
        summary = self._engine.summary()
        avg = summary.average_separation
        return {
            "center": summary.center,
            "reachable": summary.reachable,
            "population": summary.population,
            "average_separation": round(avg, 4) if avg is not None else None,
        }

    # ------------------------------------------------------------------
    # center / recenter
    # ------------------------------------------------------------------

    @traced
    def summary(self) -> ServiceResult:
        """Describe the current center of the universe."""
        return ServiceResult(ok=True, op="center", data=self._summary_data())

    @traced
    def recenter(self, name: str) -> ServiceResult:
        """Make *name* the center of the universe."""
        with trace_span("shortest_path_tree") as span:
            try:
                self._engine.recenter(name)
            except VertexNotFoundError:
                return self._not_found("recenter", name)
            if span:
                span.annotate("tree_size", self._engine.tree.num_vertices())
        return ServiceResult(ok=True, op="recenter", data=self._summary_data())

    # ------------------------------------------------------------------
    # path — single actor's chain back to the center
    # ------------------------------------------------------------------

    @traced
    def path(self, name: str) -> ServiceResult:
        """Shortest co-star chain from *name* to the center."""
        engine = self._engine
        if not engine.graph.has_vertex(name):
            return self._not_found("path", name)

        steps = [
            {"name": actor, "movies": sorted(movies), "co_star": co_star}
            for actor, movies, co_star in engine.steps_to(name)
        ]
        return ServiceResult(
            ok=True,
            op="path",
            data={
                "name": name,
                "center": engine.center,
                "separation": to_json(engine.separation_of(name)),
                "path": engine.path_to(name),
                "steps": steps,
            },
        )

    # ------------------------------------------------------------------
    # rank — best/worst centers by average separation
    # ------------------------------------------------------------------

    @traced
    def rank(self, n: int) -> ServiceResult:
        """Top (``n > 0``) or bottom (``n < 0``) centers among reachable actors."""
        op = "rank"
        if n == 0:
            return ServiceResult.failure(
                op,
                "INVALID_COUNT",
                "Need to enter a number greater than or less than 0",
            )

        engine = self._engine
        with trace_span("average_separations") as span:
            ranked = engine.rank_by_average_separation(n)
            if span:
                span.annotate("candidates", engine.tree.num_vertices())

        items = [
            {"rank": i, "name": name, "average_separation": round(avg, 4)}
            for i, (name, avg) in enumerate(ranked, start=1)
        ]
        warnings: list[str] = []
        if abs(n) > len(items):
            warnings.append(f"Only {len(items)} actors can be ranked from {engine.center}")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "center": engine.center,
                "direction": "best" if n > 0 else "worst",
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # degree / separation filters
    # ------------------------------------------------------------------

    @traced
    def degree(self, low: int, high: int) -> ServiceResult:
        """Actors with between *low* and *high* direct co-stars, inclusive."""
        invalid = self._check_range("degree", low, high)
        if invalid is not None:
            return invalid
        items = [
            {"name": name, "degree": deg}
            for name, deg in self._engine.filter_by_degree(low, high)
        ]
        return ServiceResult(
            ok=True,
            op="degree",
            data={"low": low, "high": high, "count": len(items), "items": items},
        )

    @traced
    def separation(self, low: int, high: int) -> ServiceResult:
        """Reachable actors whose separation from the center is in ``[low, high]``."""
        invalid = self._check_range("separation", low, high)
        if invalid is not None:
            return invalid
        engine = self._engine
        items = [
            {"name": name, "separation": sep}
            for name, sep in engine.filter_by_separation(low, high)
        ]
        return ServiceResult(
            ok=True,
            op="separation",
            data={
                "center": engine.center,
                "low": low,
                "high": high,
                "count": len(items),
                "items": items,
            },
        )

    # ------------------------------------------------------------------
    # unreachable — infinite separation
    # ------------------------------------------------------------------

    @traced
    def unreachable(self) -> ServiceResult:
        """Actors with no connection to the current center."""
        engine = self._engine
        names = sorted(engine.unreachable())
        logger.debug("%d actors unreachable from %r", len(names), engine.center)
        return ServiceResult(
            ok=True,
            op="unreachable",
            data={
                "center": engine.center,
                "count": len(names),
                "items": [{"name": name} for name in names],
            },
        )
