"""
Errors raised by the newsletter notification core.
"""

from newsletter.subscribers.base import Subscriber


class InvalidArgument(ValueError):
    """
    Raised when a subscriber handle or an event is missing.

    The operation that raised it has performed no side effect.
    """


class DeliveryFailure:
    """
    Record of a single failed delivery during an isolated broadcast.
    """

    def __init__(self, subscriber: Subscriber, error: Exception) -> None:
        self.subscriber = subscriber
        self.error = error

    def __repr__(self) -> str:
        return f"DeliveryFailure(subscriber={self.subscriber!r}, error={self.error!r})"
