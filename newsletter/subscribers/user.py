# newsletter/subscribers/user.py
"""
Newsletter reader that prints every email it receives.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO


class User:
    """
    A named newsletter subscriber.

    Each received event is written as a single line to ``stream``
    (standard output when not given).
    """

    def __init__(self, name: str, stream: TextIO | None = None) -> None:
        self.name = name
        self.stream = stream

    def receive(self, event: Any) -> None:
        print(
            f"User {self.name} received email: {event}",
            file=self.stream or sys.stdout,
        )

    def __repr__(self) -> str:
        return f"User({self.name!r})"
