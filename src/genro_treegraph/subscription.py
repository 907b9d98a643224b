# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Named-subscriber change notification.

Stores and nodes mix in SubscriptionMixin to let observers know that
"something changed". No delta is delivered: a subscriber receives the
emitting object and re-reads whatever state it needs.

Example:
    >>> store = TreeStore()
    >>> store.subscribe('view', lambda source: print('changed'))
    >>> child = store.add_child_to_active()
    changed
    >>> store.unsubscribe('view')
"""

from __future__ import annotations

from typing import Any, Callable

from .exceptions import SubscriptionError

SubscriberCallback = Callable[[Any], Any]


class SubscriptionMixin:
    """Mixin adding subscribe/unsubscribe/notify to a class.

    The host class must initialize ``self._subscribers`` to an empty dict
    (declared in its own ``__slots__``).
    """

    __slots__ = ()

    _subscribers: dict[str, SubscriberCallback]

    def subscribe(self, subscriber_id: str, callback: SubscriberCallback) -> None:
        """Register a callback under subscriber_id.

        Subscribing again with the same id replaces the previous callback.

        Args:
            subscriber_id: Name identifying the subscriber.
            callback: Called as ``callback(source)`` after every change.

        Raises:
            SubscriptionError: If callback is not callable.
        """
        if not callable(callback):
            raise SubscriptionError(
                f"Subscriber '{subscriber_id}' callback must be callable, "
                f"not {type(callback).__name__}"
            )
        self._subscribers[subscriber_id] = callback

    def unsubscribe(self, subscriber_id: str) -> None:
        """Remove a subscriber. Unknown ids are ignored."""
        self._subscribers.pop(subscriber_id, None)

    @property
    def subscribers(self) -> list[str]:
        """Ids of the registered subscribers, in registration order."""
        return list(self._subscribers)

    def _notify(self) -> None:
        # Copy so a callback may unsubscribe itself while being notified.
        for callback in list(self._subscribers.values()):
            callback(self)
