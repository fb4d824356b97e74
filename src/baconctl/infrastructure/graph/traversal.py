"""Breadth-first shortest-path trees and the path queries built on them.

A shortest-path tree is itself a :class:`GraphStore`: the root has
out-degree 0 and every other vertex has exactly one outgoing edge,
pointing at its BFS parent and carrying the label of the original
``parent -> child`` edge.  Vertices unreachable from the root are absent.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable

from baconctl.domain.errors import VertexNotFoundError
from baconctl.domain.separation import UNREACHABLE, Separation
from baconctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)


def shortest_path_tree[V: Hashable, L](graph: GraphStore[V, L], source: V) -> GraphStore[V, L]:
    """Run an unweighted BFS from *source* and return its parent-pointer tree.

    When several parents at the same depth could reach a vertex, the
    parent from the earliest-processed layer wins, and within a layer the
    predecessor that enumerates the vertex first.  Enumeration follows
    :meth:`GraphStore.out_neighbors`, so the result is deterministic.

    Raises:
        VertexNotFoundError: If *source* is not in *graph*.
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    tree: GraphStore[V, L] = GraphStore()
    tree.insert_vertex(source)
    visited: set[V] = {source}
    frontier: deque[V] = deque([source])

    while frontier:
        u = frontier.popleft()
        for v in graph.out_neighbors(u):
            if v in visited:
                continue
            visited.add(v)
            frontier.append(v)
            tree.insert_vertex(v)
            tree.insert_directed(v, u, graph.get_label(u, v))

    logger.debug(
        "Shortest-path tree from %r reaches %d/%d vertices",
        source,
        tree.num_vertices(),
        graph.num_vertices(),
    )
    return tree


def get_path[V: Hashable, L](tree: GraphStore[V, L], v: V) -> list[V]:
    """Return the root-to-*v* path, both ends inclusive.

    An empty list means *v* is not in the tree (no path exists).
    """
    if not tree.has_vertex(v):
        return []

    path: deque[V] = deque()
    current = v
    while tree.out_degree(current) != 0:
        path.appendleft(current)
        (current,) = tree.out_neighbors(current)
    path.appendleft(current)
    return list(path)


def degree_of_separation[V: Hashable, L](tree: GraphStore[V, L], v: V) -> Separation:
    """Edge count from *v* to the root, or ``UNREACHABLE`` if *v* is absent."""
    path = get_path(tree, v)
    if not path:
        return UNREACHABLE
    return len(path) - 1


def path_steps[V: Hashable, L](tree: GraphStore[V, L], v: V) -> list[tuple[V, L, V]]:
    """Return the hops from *v* back to the root as ``(vertex, label, parent)``.

    Each label is the tree-edge payload (the movies the pair shared).
    Empty when *v* is the root or absent from the tree.
    """
    path = get_path(tree, v)
    steps: list[tuple[V, L, V]] = []
    for i in range(len(path) - 1, 0, -1):
        child, parent = path[i], path[i - 1]
        steps.append((child, tree.get_label(child, parent), parent))
    return steps


def missing_vertices[V: Hashable, L](
    graph: GraphStore[V, L], tree: GraphStore[V, L]
) -> set[V]:
    """Vertices of *graph* that the shortest-path *tree* never reached."""
    return {v for v in graph.vertices() if not tree.has_vertex(v)}
