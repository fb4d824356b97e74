"""GraphStore — directed labeled graph backed by a NetworkX DiGraph.

Vertices are opaque hashable identities; every edge carries one opaque
label under the ``label`` attribute.  An undirected edge is stored as a
symmetric pair of directed edges sharing the same label.

Re-inserting an existing ordered pair overwrites its label.
Neighbor enumeration follows insertion order, which keeps BFS
tie-breaking deterministic.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

import networkx as nx

from baconctl.domain.errors import EdgeNotFoundError, VertexNotFoundError

_LABEL = "label"


class GraphStore[V: Hashable, L]:
    """Pure data structure: vertices, labeled directed edges, neighbor lookups."""

    def __init__(self) -> None:
        self._g: nx.DiGraph[Any] = nx.DiGraph()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_vertex(self, v: V) -> None:
        """Add *v* if absent; re-insertion is a no-op."""
        if v not in self._g:
            self._g.add_node(v)

    def insert_directed(self, frm: V, to: V, label: L) -> None:
        """Insert or overwrite the edge ``frm -> to``.

        Raises:
            VertexNotFoundError: If either endpoint is absent.
        """
        self._require(frm)
        self._require(to)
        self._g.add_edge(frm, to, **{_LABEL: label})

    def insert_undirected(self, a: V, b: V, label: L) -> None:
        """Insert ``a -> b`` and ``b -> a`` with the same label.

        Both endpoints are validated before either edge is written.
        """
        self._require(a)
        self._require(b)
        self._g.add_edges_from([(a, b), (b, a)], **{_LABEL: label})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_vertex(self, v: V) -> bool:
        return v in self._g

    def has_edge(self, a: V, b: V) -> bool:
        """Directed existence check for ``a -> b``."""
        return self._g.has_edge(a, b)

    def num_vertices(self) -> int:
        return self._g.number_of_nodes()

    def num_edges(self) -> int:
        """Number of directed edges (an undirected edge counts twice)."""
        return self._g.number_of_edges()

    def out_neighbors(self, v: V) -> list[V]:
        self._require(v)
        return list(self._g.successors(v))

    def in_neighbors(self, v: V) -> list[V]:
        self._require(v)
        return list(self._g.predecessors(v))

    def out_degree(self, v: V) -> int:
        self._require(v)
        return int(self._g.out_degree(v))

    def in_degree(self, v: V) -> int:
        self._require(v)
        return int(self._g.in_degree(v))

    def get_label(self, a: V, b: V) -> L:
        """Return the label of ``a -> b``.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        try:
            data = self._g.edges[a, b]
        except KeyError:
            raise EdgeNotFoundError(a, b) from None
        label: L = data[_LABEL]
        return label

    def vertices(self) -> list[V]:
        """All vertices in insertion order."""
        return list(self._g.nodes())

    def edges(self) -> Iterator[tuple[V, V, L]]:
        """Iterate ``(frm, to, label)`` over every directed edge."""
        for frm, to, label in self._g.edges(data=_LABEL):
            yield frm, to, label

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __contains__(self, v: object) -> bool:
        return v in self._g

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __iter__(self) -> Iterator[V]:
        return iter(self._g.nodes())

    def __repr__(self) -> str:
        return f"GraphStore(vertices={self.num_vertices()}, edges={self.num_edges()})"

    def _require(self, v: V) -> None:
        if v not in self._g:
            raise VertexNotFoundError(v)
