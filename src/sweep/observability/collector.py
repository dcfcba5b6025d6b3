"""Purge collector: records decision and transport events into an event log.

``ContentPurger`` calls the collector once per decision and once per
transport submission, so the log answers "what was purged, and why" after
the fact.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    Safe for concurrent use from multiple request threads.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from sweep.observability.events import DecisionMade, PurgeFailed, PurgeSubmitted, now_ns
from sweep.observability.log import EventLog

if TYPE_CHECKING:
    from sweep.rules.classifier import ChangeSet
    from sweep.rules.purge_set import PurgeDecision


class PurgeCollector:
    """Event collector for purge decisions and submissions.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_decision(
        self,
        event: str,
        object_key: str,
        decision: PurgeDecision,
        changes: ChangeSet,
    ) -> None:
        """Record the decision taken for a lifecycle event."""
        self._log.append(
            DecisionMade(
                event=event,
                object_key=object_key,
                full=decision.full,
                scope=decision.scope.name or "",
                changed_fields=tuple(sorted(changes.fields)),
                baseline_known=changes.known,
                timestamp_ns=now_ns(),
            )
        )

    def record_submit(
        self,
        event: str,
        object_key: str,
        *,
        kind: Literal["everything", "urls"],
        url_count: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a successful transport call."""
        self._log.append(
            PurgeSubmitted(
                event=event,
                object_key=object_key,
                kind=kind,
                url_count=url_count,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_failure(
        self,
        event: str,
        object_key: str,
        exc: BaseException,
        *,
        kind: Literal["everything", "urls"],
    ) -> None:
        """Record a transport call that raised."""
        self._log.append(
            PurgeFailed(
                event=event,
                object_key=object_key,
                kind=kind,
                error=str(exc),
                error_type=type(exc).__name__,
                timestamp_ns=now_ns(),
            )
        )
