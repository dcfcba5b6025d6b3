"""Purge observability: decision and transport events.

Every lifecycle decision and every transport call made by ``ContentPurger``
can be recorded as a frozen event in a bounded, thread-safe log.

Quick Start:
    >>> from sweep.observability import EventLog, PurgeCollector
    >>> log = EventLog()
    >>> collector = PurgeCollector(log)
    >>> # Pass collector to ContentPurger(..., collector=collector)

"""

from sweep.observability.collector import PurgeCollector
from sweep.observability.events import (
    DecisionMade,
    PurgeEvent,
    PurgeFailed,
    PurgeSubmitted,
    now_ns,
)
from sweep.observability.log import EventLog
from sweep.observability.notifier import StderrNotifier

__all__ = [
    "DecisionMade",
    "EventLog",
    "PurgeCollector",
    "PurgeEvent",
    "PurgeFailed",
    "PurgeSubmitted",
    "StderrNotifier",
    "now_ns",
]
