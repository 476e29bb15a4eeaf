# newsletter/subscribers/inbox.py
"""
Subscriber that keeps what it receives instead of printing it.
"""

from __future__ import annotations

from typing import Any


class Inbox:
    """
    Collects received events in memory.

    When a shared ``journal`` list is given, every delivery is also
    appended to it as a ``{"subscriber", "event"}`` record, so several
    inboxes can share one ordered delivery log.
    """

    def __init__(self, name: str, journal: list[dict[str, Any]] | None = None) -> None:
        self.name = name
        self.received: list[Any] = []
        self.journal = journal

    def receive(self, event: Any) -> None:
        self.received.append(event)
        if self.journal is not None:
            self.journal.append({"subscriber": self.name, "event": event})

    def __repr__(self) -> str:
        return f"Inbox({self.name!r})"
