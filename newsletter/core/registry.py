"""
Subscriber registry for the newsletter notification core.

The registry is an ordered list of subscriber handles. Insertion order is
delivery order, duplicates are kept, and removal deletes at most one
entry per call.

Broadcasts never iterate the live list. They work on a snapshot, so a
subscriber that subscribes or unsubscribes while an event is being
delivered cannot corrupt the broadcast in progress.
"""

from threading import RLock
from typing import Any


class Registry:
    """
    Ordered, lock-guarded collection of subscriber handles.
    """

    def __init__(self) -> None:
        self._entries: list[Any] = []
        self._lock = RLock()

    def add(self, handle: Any) -> None:
        """
        Append a handle. No uniqueness check is performed.
        """
        with self._lock:
            self._entries.append(handle)

    def remove(self, handle: Any) -> None:
        """
        Remove the first entry equal to ``handle``.

        Removing a handle that is not registered is a no-op.
        """
        with self._lock:
            try:
                self._entries.remove(handle)
            except ValueError:
                pass

    def snapshot(self) -> tuple[Any, ...]:
        """
        Return an immutable, point-in-time copy of the entries.
        """
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, handle: Any) -> bool:
        with self._lock:
            return handle in self._entries
