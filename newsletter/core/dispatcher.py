"""
Broadcast delivery for the newsletter notification core.

The dispatcher does not interpret events and does not own subscribers.
It is handed a snapshot and walks it front to back.
"""

from collections.abc import Iterable
from typing import Any

from newsletter.core.errors import DeliveryFailure
from newsletter.subscribers.base import Subscriber


class Dispatcher:
    """
    Deliver one event to every subscriber in a snapshot, in order.

    By default there is no error boundary: if a subscriber raises, the
    exception reaches the caller and the rest of the snapshot is skipped.
    With ``isolate_failures`` enabled each fault is recorded and delivery
    carries on with the next subscriber.
    """

    def __init__(self, isolate_failures: bool = False) -> None:
        self.isolate_failures = isolate_failures

    def dispatch(self, snapshot: Iterable[Subscriber], event: Any) -> list[DeliveryFailure]:
        """
        Call ``receive(event)`` on each subscriber in ``snapshot``.

        Returns:
            Failures captured in isolated mode, in delivery order. Always
            empty in strict mode, where the first failure propagates.
        """
        failures: list[DeliveryFailure] = []

        for subscriber in snapshot:
            if not self.isolate_failures:
                subscriber.receive(event)
                continue

            try:
                subscriber.receive(event)
            except Exception as exc:
                failures.append(DeliveryFailure(subscriber, exc))

        return failures
