# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TextTree - Example console view over a TreeStore.

A didactic example showing how a presentation layer consumes a TreeStore:
it subscribes for changes, re-reads the level grouping on every
notification, and turns the store's return values into user messages.
"""

from __future__ import annotations

from genro_treegraph import TreeStore, TreeStoreNode


class TextTree:
    """A console "graph builder" view.

    This is the "cover" class that wraps a TreeStore, mirrors the three
    buttons of a graph-building UI (add, delete, reset), and keeps a
    rendered copy of the tree up to date.

    Example:
        >>> view = TextTree()
        >>> view.add_child()
        >>> view.select(2)
        >>> view.add_child()
        >>> print(view.rendered)
        L0 [1]
        L1  *2*
        L2    3
        >>> view.delete()
        >>> view.messages[-1]
        'Deleted node 2.'
    """

    def __init__(self, store: TreeStore | None = None):
        """Create a view, optionally over an existing store.

        Args:
            store: The TreeStore to display. A new one by default.
        """
        self._store = store if store is not None else TreeStore()
        self.messages: list[str] = []
        self.rendered = ''
        self._store.subscribe('text_tree', self._on_change)
        self.refresh()

    @property
    def store(self):
        """Access the underlying TreeStore."""
        return self._store

    def close(self) -> None:
        """Stop following the store."""
        self._store.unsubscribe('text_tree')

    # === User actions ===

    def select(self, node_id: int | None) -> None:
        """Make the node with node_id active (None clears the selection)."""
        node = self._store.get_node(node_id) if node_id is not None else None
        self._store.set_active(node)

    def add_child(self) -> None:
        if self._store.add_child_to_active() is not None:
            return
        if self._store.active is None:
            self.messages.append("No active node to add child to.")
        else:
            self.messages.append("Maximum depth reached for adding children.")

    def delete(self) -> None:
        deleted = self._store.delete_active()
        if deleted is None:
            self.messages.append("Cannot delete the root node or no node selected.")
        else:
            self.messages.append(f"Deleted node {deleted.label}.")

    def reset(self) -> None:
        self._store.reset()
        self.messages.append("Tree reset to initial state.")

    # === Rendering ===

    def _on_change(self, source: TreeStore) -> None:
        self.refresh()

    def refresh(self) -> None:
        """Re-render the whole tree from the store's current state."""
        active = self._store.active
        lines = []
        for index, level_nodes in enumerate(self._store.get_nodes_by_level()):
            cells = ' '.join(self._cell(node, active) for node in level_nodes)
            lines.append(f"L{index:<2}{' ' * index}{cells}")
        self.rendered = '\n'.join(lines)

    def _cell(self, node: TreeStoreNode, active: TreeStoreNode | None) -> str:
        if active is not None and node.id == active.id:
            return f"*{node.label}*"
        if node.is_root:
            return f"[{node.label}]"
        return f" {node.label}"


if __name__ == '__main__':
    view = TextTree()
    view.add_child()
    view.add_child()
    view.select(2)
    view.add_child()
    view.add_child()
    view.select(3)
    view.add_child()
    view.select(1)
    view.delete()
    print(view.rendered)
    print('\n'.join(view.messages))
