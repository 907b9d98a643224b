# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal functions over a TreeStoreNode hierarchy.

All functions read the live node graph on every call and keep no state
between calls, so results always reflect the current tree shape.

- iter_levels / nodes_by_level: breadth-first grouping by level
- walk: depth-first pre-order
- iter_edges: parent/child pairs, level by level
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from ..node import TreeStoreNode


def iter_levels(root: TreeStoreNode) -> Iterator[list[TreeStoreNode]]:
    """Yield the nodes of the tree grouped by level, root level first.

    Plain queue-based breadth-first traversal: each group keeps the
    children insertion order of the previous group's nodes.

    Args:
        root: Node to start from.

    Yields:
        One list of nodes per level, never empty.
    """
    queue: deque[TreeStoreNode] = deque([root])
    while queue:
        level_nodes = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level_nodes.append(node)
            queue.extend(node._children)
        yield level_nodes


def nodes_by_level(root: TreeStoreNode) -> list[list[TreeStoreNode]]:
    """Return the level grouping of iter_levels as a fresh list of lists."""
    return list(iter_levels(root))


def walk(root: TreeStoreNode) -> Iterator[TreeStoreNode]:
    """Yield every node depth-first, parents before children.

    Iterative so that a chain of the maximum depth never hits the
    interpreter recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node._children))


def iter_edges(root: TreeStoreNode) -> Iterator[tuple[TreeStoreNode, TreeStoreNode]]:
    """Yield (parent, child) pairs level by level.

    This is the order a connector painter visits them: for each level,
    each parent in turn, each of its children in insertion order.
    """
    for level_nodes in iter_levels(root):
        for parent in level_nodes:
            for child in parent._children:
                yield parent, child
