# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph node class."""

from __future__ import annotations

import weakref
from typing import Any

from .exceptions import InvalidLevelError
from .subscription import SubscriptionMixin

MAX_DEPTH = 100
ROOT_LEVEL = 0


class TreeStoreNode(SubscriptionMixin):
    """A vertex in a TreeStore graph.

    Each node has:
    - id: Integer identity assigned by the owning store, never reused
      until the store is reset
    - label: Mutable display string
    - level: Depth from the root (root=0), fixed at creation
    - parent: Weak back-reference to the parent node (None for the root)
    - children: Child nodes in creation order

    The parent reference is held through ``weakref.ref``: ownership flows
    only downward, from a node to its children.

    Example:
        >>> root = TreeStoreNode(1, '1', 0)
        >>> child = TreeStoreNode(2, '2', 1)
        >>> root.add_child(child)
        >>> child.parent is root
        True
        >>> [n.id for n in root.children]
        [2]
    """

    __slots__ = (
        '_id', '_label', '_level', '_parent', '_children',
        '_subscribers', '__weakref__',
    )

    def __init__(
        self,
        node_id: int,
        label: str,
        level: int,
        parent: TreeStoreNode | None = None,
    ) -> None:
        """Initialize a TreeStoreNode.

        Args:
            node_id: Unique integer identity.
            label: Display string.
            level: Depth from the root. Must be in ``0..MAX_DEPTH-1``.
            parent: Optional parent node. Only the back-reference is set;
                the parent's children are not touched.

        Raises:
            InvalidLevelError: If level is outside the depth range.
        """
        if not ROOT_LEVEL <= level < MAX_DEPTH:
            raise InvalidLevelError(
                f"Node level must be in {ROOT_LEVEL}..{MAX_DEPTH - 1}, got {level}"
            )
        self._id = node_id
        self._label = label
        self._level = level
        self._parent: weakref.ref[TreeStoreNode] | None = None
        self._children: list[TreeStoreNode] = []
        self._subscribers: dict[str, Any] = {}
        self._set_parent(parent)

    def __repr__(self) -> str:
        return (
            f"TreeStoreNode(id={self._id}, label={self._label!r}, "
            f"level={self._level})"
        )

    # ==================== Accessors ====================

    @property
    def id(self) -> int:
        """The node's integer identity."""
        return self._id

    @property
    def label(self) -> str:
        """The node's display string."""
        return self._label

    @label.setter
    def label(self, new_label: str) -> None:
        self.set_label(new_label)

    @property
    def level(self) -> int:
        """Depth from the root (root=0)."""
        return self._level

    @property
    def parent(self) -> TreeStoreNode | None:
        """The parent node, or None for the root and detached nodes."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> tuple[TreeStoreNode, ...]:
        """Child nodes in creation order."""
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        """True if this node sits at the root level."""
        return self._level == ROOT_LEVEL

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._children

    def _set_parent(self, parent: TreeStoreNode | None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    # ==================== Mutators ====================

    def set_label(self, new_label: str) -> None:
        """Change the label, notifying subscribers if it actually changed.

        Any string is accepted, including the empty string.
        """
        if new_label == self._label:
            return
        self._label = new_label
        self._notify()

    def add_child(self, child: TreeStoreNode) -> None:
        """Append child and make this node its parent.

        The caller guarantees that child is freshly built with
        ``level == self.level + 1`` and does not belong to another node.
        """
        self._children.append(child)
        child._set_parent(self)
        self._notify()

    def remove_child(self, child: TreeStoreNode) -> None:
        """Detach child (matched by id) together with its whole subtree.

        Does nothing, and notifies nobody, if child is not among the
        children of this node.
        """
        for i, existing in enumerate(self._children):
            if existing.id == child.id:
                break
        else:
            return
        removed = self._children.pop(i)
        removed._set_parent(None)
        child._set_parent(None)
        self._notify()
