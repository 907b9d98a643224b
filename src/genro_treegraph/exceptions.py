# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph exceptions."""

from __future__ import annotations


class TreeGraphError(Exception):
    """Base exception for TreeGraph errors."""

    pass


class InvalidLevelError(TreeGraphError):
    """Raised when a node is constructed with a level outside the depth range."""

    pass


class SubscriptionError(TreeGraphError):
    """Raised when a subscriber callback is not callable."""

    pass
