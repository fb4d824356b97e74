"""Separation metrics over shortest-path trees."""

from __future__ import annotations

from collections.abc import Hashable

from baconctl.domain.errors import DegenerateTreeError, VertexNotFoundError
from baconctl.infrastructure.graph.store import GraphStore


def depth_sum[V: Hashable, L](tree: GraphStore[V, L], node: V, depth: int = 0) -> int:
    """Sum of depths of *node* and every descendant, *node* sitting at *depth*.

    Tree edges point child -> parent, so a node's children are its
    in-neighbors.  Walks with an explicit stack; depth is bounded by the
    tree height.
    """
    if not tree.has_vertex(node):
        raise VertexNotFoundError(node)

    total = 0
    stack: list[tuple[V, int]] = [(node, depth)]
    while stack:
        current, d = stack.pop()
        total += d
        stack.extend((child, d + 1) for child in tree.in_neighbors(current))
    return total


def average_separation[V: Hashable, L](tree: GraphStore[V, L], root: V) -> float:
    """Mean depth of every non-root vertex of *tree*.

    Raises:
        DegenerateTreeError: If the tree holds only *root*.
        VertexNotFoundError: If *root* is not in the tree.
    """
    if not tree.has_vertex(root):
        raise VertexNotFoundError(root)
    others = tree.num_vertices() - 1
    if others == 0:
        raise DegenerateTreeError(root)
    return depth_sum(tree, root, 0) / others
