# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore - An interactive tree with an active node.

This module provides the TreeStore class, the core container of the
genro-treegraph library. A TreeStore owns a single root node, tracks the
*active* node (the target of add/delete), and exposes a breadth-first
level grouping that renderers use for layout.

Key Features:
    - **Single root**: Exactly one root at level 0, labeled "1"
    - **Active node**: Mutations act on the currently selected node
    - **Bounded depth**: Levels 0..max_depth-1, add beyond is ignored
    - **Silent guards**: Invalid mutations are no-ops, never exceptions
    - **Reactive subscriptions**: Named subscribers notified on change
    - **Fresh traversal**: Level grouping recomputed on every call

Example:
    Basic usage::

        store = TreeStore()
        child = store.add_child_to_active()     # node '2' under root
        store.set_active(child)
        store.add_child_to_active()             # node '3' under '2'

        for level in store.get_nodes_by_level():
            print([n.label for n in level])     # ['1'] / ['2'] / ['3']

        store.delete_active()                   # removes '2' and '3'
        store.active.label                      # '1'
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ..node import MAX_DEPTH, ROOT_LEVEL, TreeStoreNode
from ..subscription import SubscriptionMixin
from .traversal import iter_edges, iter_levels, nodes_by_level, walk

logger = logging.getLogger(__name__)

FIRST_ID = 1


class TreeStore(SubscriptionMixin):
    """A rooted tree of labeled nodes with an active-node cursor.

    TreeStore provides:
    - set_active(node): Select the node mutations act on
    - add_child_to_active(): Append a new child to the active node
    - delete_active(): Detach the active node's subtree
    - reset(): Discard the tree and start again from a single root
    - get_nodes_by_level(): Breadth-first level grouping for layout

    Node ids come from a counter owned by the store: independent stores
    never share it, and reset() restarts it at 1.

    Every mutation whose precondition does not hold (no active node,
    active is the root for delete, depth limit reached for add) does
    nothing and notifies nobody.

    Attributes:
        max_depth: Number of levels allowed (levels 0..max_depth-1).

    Example:
        >>> store = TreeStore()
        >>> store.add_child_to_active()
        TreeStoreNode(id=2, label='2', level=1)
        >>> [[n.id for n in level] for level in store.get_nodes_by_level()]
        [[1], [2]]
    """

    __slots__ = ('_root', '_active', '_next_id', '_max_depth', '_subscribers')

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        """Initialize a TreeStore with a single root node.

        Args:
            max_depth: Number of levels allowed. Must be in 1..MAX_DEPTH.

        Raises:
            ValueError: If max_depth is out of range.
        """
        if not 1 <= max_depth <= MAX_DEPTH:
            raise ValueError(f"max_depth must be in 1..{MAX_DEPTH}, got {max_depth}")
        self._max_depth = max_depth
        self._subscribers: dict[str, Any] = {}
        self._next_id = FIRST_ID
        self._root = self._new_node(ROOT_LEVEL)
        self._active: TreeStoreNode | None = self._root

    def _new_node(
        self, level: int, parent: TreeStoreNode | None = None
    ) -> TreeStoreNode:
        """Create a node taking id and label from the store counter."""
        node_id = self._next_id
        self._next_id += 1
        return TreeStoreNode(node_id, str(node_id), level, parent=parent)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        active_id = self._active.id if self._active is not None else None
        return f"TreeStore(nodes={len(self)}, active={active_id})"

    def __len__(self) -> int:
        """Return the number of nodes in the tree."""
        return sum(1 for _ in walk(self._root))

    def __iter__(self) -> Iterator[TreeStoreNode]:
        """Iterate over all nodes in breadth-first order."""
        for level_nodes in iter_levels(self._root):
            yield from level_nodes

    def __contains__(self, node: object) -> bool:
        """True if node is one of the nodes currently in this tree."""
        if not isinstance(node, TreeStoreNode):
            return False
        return self.get_node(node.id) is node

    # ==================== Queries ====================

    @property
    def root(self) -> TreeStoreNode:
        """The root node (level 0)."""
        return self._root

    @property
    def active(self) -> TreeStoreNode | None:
        """The active node, or None if no node is selected."""
        return self._active

    @active.setter
    def active(self, node: TreeStoreNode | None) -> None:
        self.set_active(node)

    @property
    def max_depth(self) -> int:
        """Number of levels allowed (levels 0..max_depth-1)."""
        return self._max_depth

    @property
    def depth(self) -> int:
        """The deepest level currently present (0 for a lone root)."""
        return max(node.level for node in walk(self._root))

    def get_root(self) -> TreeStoreNode:
        """Return the root node."""
        return self._root

    def get_active(self) -> TreeStoreNode | None:
        """Return the active node, or None."""
        return self._active

    def get_node(self, node_id: int) -> TreeStoreNode | None:
        """Return the node with the given id, or None if not in the tree."""
        for node in walk(self._root):
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> set[int]:
        """Return the ids of all nodes currently in the tree."""
        return {node.id for node in walk(self._root)}

    def get_nodes_by_level(self) -> list[list[TreeStoreNode]]:
        """Group all nodes by level with a breadth-first traversal.

        Recomputed on every call: the result always matches the tree
        shape at call time.

        Returns:
            One list per level, root level first. Inside each level, nodes
            follow the children insertion order of their parents.

        Example:
            >>> store.get_nodes_by_level()
            [[TreeStoreNode(id=1, label='1', level=0)]]
        """
        return nodes_by_level(self._root)

    def iter_levels(self) -> Iterator[list[TreeStoreNode]]:
        """Lazy form of get_nodes_by_level()."""
        return iter_levels(self._root)

    def walk(self) -> Iterator[TreeStoreNode]:
        """Yield all nodes depth-first, parents before children."""
        return walk(self._root)

    def iter_edges(self) -> Iterator[tuple[TreeStoreNode, TreeStoreNode]]:
        """Yield (parent, child) connector pairs level by level."""
        return iter_edges(self._root)

    # ==================== Mutators ====================

    def set_active(self, node: TreeStoreNode | None) -> None:
        """Select the node that add/delete act on.

        Does nothing if a node with the same id is already active (or if
        both are None). Membership of node in this tree is not checked.
        """
        current_id = self._active.id if self._active is not None else None
        new_id = node.id if node is not None else None
        if current_id == new_id:
            return
        self._active = node
        logger.debug("Active node set to %s", new_id)
        self._notify()

    def add_child_to_active(self) -> TreeStoreNode | None:
        """Append a new child to the active node.

        The new node takes its id and label from the store counter and
        does not become active.

        Returns:
            The created node, or None if there is no active node or the
            child would reach max_depth.
        """
        active = self._active
        if active is None:
            logger.debug("add_child_to_active ignored: no active node")
            return None
        new_level = active.level + 1
        if new_level >= self._max_depth:
            logger.debug(
                "add_child_to_active ignored: level %d reaches max depth %d",
                new_level, self._max_depth,
            )
            return None
        node = self._new_node(new_level, parent=active)
        active.add_child(node)
        logger.debug("Added node %d under node %d", node.id, active.id)
        self._notify()
        return node

    def delete_active(self) -> TreeStoreNode | None:
        """Detach the active node and its subtree; its parent becomes active.

        Returns:
            The detached node, or None if there is no active node, the
            active node is the root, or it is already detached.
        """
        active = self._active
        if active is None or active.id == self._root.id:
            logger.debug("delete_active ignored: no active node or active is root")
            return None
        parent = active.parent
        if parent is None:
            logger.debug("delete_active ignored: node %d is detached", active.id)
            return None
        parent.remove_child(active)
        self._active = parent
        logger.debug("Deleted node %d, active is now %d", active.id, parent.id)
        self._notify()
        return active

    def reset(self) -> None:
        """Discard the whole tree and start again from a fresh root "1".

        The id counter restarts at 1 and the new root becomes active.
        """
        self._next_id = FIRST_ID
        self._root = self._new_node(ROOT_LEVEL)
        self._active = self._root
        logger.debug("Tree reset")
        self._notify()


def new_tree_store(max_depth: int = MAX_DEPTH) -> TreeStore:
    """Create a TreeStore with a single root "1", active."""
    return TreeStore(max_depth=max_depth)
