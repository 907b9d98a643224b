# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeGraph - Interactive labeled trees for graph-building UIs.

A lightweight, zero-dependency library holding the data model behind a
tree-building view: a single root, an active node, depth-bounded growth,
subtree deletion, and a breadth-first level grouping for renderers
(Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidLevelError,
    SubscriptionError,
    TreeGraphError,
)
from .node import MAX_DEPTH, ROOT_LEVEL, TreeStoreNode
from .store import FIRST_ID, TreeStore, new_tree_store
from .subscription import SubscriberCallback, SubscriptionMixin

__all__ = [
    # Core classes
    "TreeStore",
    "TreeStoreNode",
    "new_tree_store",
    # Subscriptions
    "SubscriptionMixin",
    "SubscriberCallback",
    # Constants
    "MAX_DEPTH",
    "ROOT_LEVEL",
    "FIRST_ID",
    # Exceptions
    "TreeGraphError",
    "InvalidLevelError",
    "SubscriptionError",
]
