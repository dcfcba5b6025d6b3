"""Event model for purge observability.

Defines event types for lifecycle decisions and purge submissions.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias

# ---------------------------------------------------------------------------
# Decision events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DecisionMade:
    """A lifecycle event was mapped onto a purge decision.

    Attributes:
        event: Lifecycle moment (``pre-publish``, ``post-write``, ``post-delete``).
        object_key: String form of the content object's key.
        full: True if a site-wide purge was decided.
        scope: Name of the purge scope (``LIVE``, ``DRAFT``, ``BOTH``).
        changed_fields: Changed fields considered, sorted. Empty when unknown.
        baseline_known: False if the change set could not be computed.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    event: str
    object_key: str
    full: bool
    scope: str
    changed_fields: tuple[str, ...]
    baseline_known: bool
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Transport events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PurgeSubmitted:
    """A purge was handed to the transport without error.

    Attributes:
        event: Lifecycle moment that triggered the purge.
        object_key: String form of the content object's key.
        kind: ``everything`` for a site-wide purge, ``urls`` otherwise.
        url_count: Number of URLs submitted (0 for ``everything``).
        duration_ms: Time spent in the transport call.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    event: str
    object_key: str
    kind: Literal["everything", "urls"]
    url_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class PurgeFailed:
    """The transport raised while submitting a purge.

    Attributes:
        event: Lifecycle moment that triggered the purge.
        object_key: String form of the content object's key.
        kind: ``everything`` for a site-wide purge, ``urls`` otherwise.
        error: Exception message.
        error_type: Exception class name.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    event: str
    object_key: str
    kind: Literal["everything", "urls"]
    error: str
    error_type: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

PurgeEvent: TypeAlias = DecisionMade | PurgeSubmitted | PurgeFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
