# newsletter/subscribers/base.py
from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Subscriber(Protocol):
    """Anything that can receive a broadcast event."""

    def receive(self, event: Any) -> None:
        ...
