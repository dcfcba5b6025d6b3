"""Event log: bounded purge history.

Keeps the most recent ``PurgeEvent`` records so a host can answer "what was
purged for this object, and why" without a log aggregator.

Thread Safety:
    Every method takes ``threading.Lock``; lifecycle hooks may fire from
    several request threads at once.

"""

import threading
from collections import Counter, deque
from typing import Any

from sweep._types import LifecycleEvent
from sweep.observability.events import PurgeEvent


class EventLog:
    """Ring buffer of purge events, oldest dropped first.

    Args:
        max_events: Capacity of the buffer.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[PurgeEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: PurgeEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        event: LifecycleEvent | None = None,
        object_key: str | None = None,
        since_ns: int = 0,
        limit: int = 100,
    ) -> list[PurgeEvent]:
        """Return matching events, newest first.

        Args:
            event_type: ``DecisionMade``, ``PurgeSubmitted`` or ``PurgeFailed``.
            event: Lifecycle moment, e.g. ``"post-write"``.
            object_key: Exact key of the content object.
            since_ns: Drop events recorded before this ``now_ns()`` value.
            limit: Maximum number of events returned.

        """
        with self._lock:
            snapshot = list(self._events)

        results: list[PurgeEvent] = []
        for item in reversed(snapshot):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(item, event_type):
                continue
            if event is not None and item.event != event:
                continue
            if object_key is not None and item.object_key != object_key:
                continue
            if since_ns and item.timestamp_ns < since_ns:
                continue
            results.append(item)
        return results

    def recent(self, n: int = 20) -> list[PurgeEvent]:
        """The ``n`` most recent events, oldest first."""
        with self._lock:
            snapshot = list(self._events)
        return snapshot[-n:]

    def clear(self) -> int:
        """Drop every event. Returns how many were dropped."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Totals by record type and by lifecycle moment."""
        with self._lock:
            snapshot = list(self._events)

        return {
            "total": len(snapshot),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(item).__name__ for item in snapshot)),
            "by_event": dict(Counter(item.event for item in snapshot)),
        }
