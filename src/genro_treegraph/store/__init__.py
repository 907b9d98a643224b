# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore package - Interactive tree container.

This package provides the TreeStore class, a rooted tree of labeled nodes
with an active-node cursor, bounded depth, and reactive subscriptions.

The package is organized into:
- core: Main TreeStore class with the active-node mutators and queries
- traversal: Level grouping, depth-first walk and edge iteration

Example:
    >>> from genro_treegraph import TreeStore
    >>> store = TreeStore()
    >>> child = store.add_child_to_active()
    >>> [[n.label for n in level] for level in store.get_nodes_by_level()]
    [['1'], ['2']]
"""

from .core import FIRST_ID, TreeStore, new_tree_store
from .traversal import iter_edges, iter_levels, nodes_by_level, walk

__all__ = [
    "TreeStore",
    "new_tree_store",
    "FIRST_ID",
    "iter_levels",
    "nodes_by_level",
    "walk",
    "iter_edges",
]
