"""QueryEngine — center-relative queries over a fixed universe graph.

The engine owns the universe, the current center, and the center's
shortest-path tree.  Center and tree live in one immutable
:class:`CenteredTree` so re-centering is a single assignment: no query
ever sees a center paired with another center's tree.

Orderings are deterministic: every ranking sorts on ``(metric, vertex)``.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass

from baconctl.domain.errors import DegenerateTreeError, VertexNotFoundError
from baconctl.domain.separation import Separation, is_reachable
from baconctl.infrastructure.graph.metrics import average_separation
from baconctl.infrastructure.graph.store import GraphStore
from baconctl.infrastructure.graph.traversal import (
    degree_of_separation,
    get_path,
    missing_vertices,
    path_steps,
    shortest_path_tree,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CenteredTree[V: Hashable, L]:
    """A center paired with its own shortest-path tree."""

    center: V
    tree: GraphStore[V, L]


@dataclass(frozen=True)
class CenterSummary[V: Hashable]:
    """Headline numbers for the current center."""

    center: V
    reachable: int
    population: int
    average_separation: float | None


def order_by_metric[V: Hashable, M: (int, float)](metric: Mapping[V, M]) -> list[tuple[V, M]]:
    """Sort ``metric`` items ascending by value, ties broken by vertex."""
    return sorted(metric.items(), key=lambda item: (item[1], item[0]))


class QueryEngine[V: Hashable, L]:
    """Ranking and filtering queries relative to a movable center."""

    def __init__(self, graph: GraphStore[V, L], center: V) -> None:
        self._graph = graph
        self._state = self._centered(center)
        self._averages: dict[V, float | None] = {}

    # ------------------------------------------------------------------
    # Center
    # ------------------------------------------------------------------

    @property
    def graph(self) -> GraphStore[V, L]:
        return self._graph

    @property
    def center(self) -> V:
        return self._state.center

    @property
    def tree(self) -> GraphStore[V, L]:
        return self._state.tree

    def recenter(self, new_center: V) -> None:
        """Make *new_center* the center of the universe.

        Raises:
            VertexNotFoundError: If *new_center* is not in the universe.
        """
        self._state = self._centered(new_center)
        logger.debug("Center is now %r", new_center)

    def _centered(self, center: V) -> CenteredTree[V, L]:
        if not self._graph.has_vertex(center):
            raise VertexNotFoundError(center)
        return CenteredTree(center, shortest_path_tree(self._graph, center))

    def summary(self) -> CenterSummary[V]:
        """Reachable count, population, and the center's average separation."""
        state = self._state
        try:
            avg: float | None = average_separation(state.tree, state.center)
        except DegenerateTreeError:
            avg = None
        return CenterSummary(
            center=state.center,
            reachable=state.tree.num_vertices() - 1,
            population=self._graph.num_vertices(),
            average_separation=avg,
        )

    # ------------------------------------------------------------------
    # Single-vertex lookups against the current tree
    # ------------------------------------------------------------------

    def path_to(self, v: V) -> list[V]:
        """Center-to-*v* path; empty when *v* is unreachable."""
        return get_path(self.tree, v)

    def steps_to(self, v: V) -> list[tuple[V, L, V]]:
        """Hops from *v* back to the center with their edge labels."""
        return path_steps(self.tree, v)

    def separation_of(self, v: V) -> Separation:
        return degree_of_separation(self.tree, v)

    def unreachable(self) -> set[V]:
        """Universe vertices with infinite separation from the center."""
        return missing_vertices(self._graph, self.tree)

    # ------------------------------------------------------------------
    # Rankings and filters
    # ------------------------------------------------------------------

    def average_separation_of(self, v: V) -> float | None:
        """Average separation of *v* as its own center; None if *v* reaches no one.

        The universe never changes, so results are memoized per vertex.
        """
        if v not in self._averages:
            tree = shortest_path_tree(self._graph, v)
            try:
                self._averages[v] = average_separation(tree, v)
            except DegenerateTreeError:
                self._averages[v] = None
        return self._averages[v]

    def rank_by_average_separation(self, n: int) -> list[tuple[V, float]]:
        """Best (``n > 0``) or worst (``n < 0``) centers among reachable vertices.

        Every vertex of the current tree is scored by running a fresh BFS
        over the full universe rooted at that vertex.  Positive *n* returns
        the lowest averages first; negative *n* returns the highest first.
        ``n == 0`` returns nothing.  Vertices that reach no one are skipped.
        """
        if n == 0:
            return []

        averages: dict[V, float] = {}
        for v in self.tree.vertices():
            avg = self.average_separation_of(v)
            if avg is not None:
                averages[v] = avg

        ranked = order_by_metric(averages)
        if n > 0:
            return ranked[:n]
        return ranked[::-1][:-n]

    def filter_by_degree(self, low: int, high: int) -> list[tuple[V, int]]:
        """Universe vertices whose in-degree lies in ``[low, high]``, ascending."""
        degrees = {v: self._graph.in_degree(v) for v in self._graph.vertices()}
        return order_by_metric({v: d for v, d in degrees.items() if low <= d <= high})

    def filter_by_separation(self, low: int, high: int) -> list[tuple[V, int]]:
        """Reachable vertices whose separation lies in ``[low, high]``, ascending."""
        tree = self.tree
        selected: dict[V, int] = {}
        for v in tree.vertices():
            sep = degree_of_separation(tree, v)
            if is_reachable(sep) and low <= sep <= high:
                selected[v] = sep
        return order_by_metric(selected)
