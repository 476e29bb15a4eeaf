"""
Subject facade for the newsletter notification core.

Callers register subscriber handles here and broadcast events through
``notify``. The subject owns one registry and one dispatcher and is the
only thing that mutates the registry.
"""

from typing import Any

from newsletter.core.dispatcher import Dispatcher
from newsletter.core.errors import DeliveryFailure, InvalidArgument
from newsletter.core.registry import Registry
from newsletter.subscribers.base import Subscriber


class Subject:
    """
    Publish/subscribe facade.

    Delivery is synchronous and follows subscription order. Each call to
    ``notify`` works on a snapshot of the registry taken when the call
    starts.
    """

    def __init__(self, isolate_failures: bool = False) -> None:
        self._registry = Registry()
        self._dispatcher = Dispatcher(isolate_failures=isolate_failures)

    def subscribe(self, handle: Subscriber) -> None:
        """
        Register a subscriber handle.

        Subscribing the same handle twice yields two deliveries per event.
        """
        if handle is None:
            raise InvalidArgument("Cannot subscribe a null subscriber")

        if not callable(getattr(handle, "receive", None)):
            raise InvalidArgument(
                f"Subscriber {handle!r} does not provide a callable receive()"
            )

        self._registry.add(handle)

    def unsubscribe(self, handle: Subscriber) -> None:
        """
        Remove one registration of ``handle``, if there is one.
        """
        self._registry.remove(handle)

    def notify(self, event: Any) -> list[DeliveryFailure]:
        """
        Deliver ``event`` to every current subscriber.
        """
        if event is None or (isinstance(event, str) and not event):
            raise InvalidArgument("Cannot notify subscribers of an empty event")

        return self._dispatcher.dispatch(self._registry.snapshot(), event)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return self._registry.snapshot()

    def __len__(self) -> int:
        return len(self._registry)
