"""Content purger: the host-facing entry point.

Hosts call one hook per lifecycle moment::

    purger = ContentPurger(transport, versions=store, links=LinkProvider(link=page_url))
    purger.before_publish(ContentRef(key=page.id, instance=page, versioned=True))

Each hook decides, computes the purge target, and submits at most one
request to the transport.  The hooks never raise for purge problems: a
failed purge must not block the content save that triggered it.  Failures
are reported to the notifier, recorded on the collector, and returned as a
failed ``PurgeOutcome`` for hosts that want to inspect them.
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sweep.config import SweepConfig
from sweep.lifecycle.collaborators import DirtyFieldTracker, PurgeTransport, VersionStore
from sweep.lifecycle.decision import LifecycleDecision
from sweep.lifecycle.links import LinkProvider
from sweep.observability.notifier import StderrNotifier
from sweep.rules.purge_set import PurgeEverything, PurgeRequest, compute

if TYPE_CHECKING:
    from sweep._types import LifecycleEvent
    from sweep.lifecycle.collaborators import ContentRef, Notifier
    from sweep.observability.collector import PurgeCollector
    from sweep.rules.classifier import ChangeSet
    from sweep.rules.purge_set import PurgeDecision, PurgeTarget


@dataclass(frozen=True, slots=True)
class PurgeOutcome:
    """What a lifecycle hook did.

    Attributes:
        event: Lifecycle moment handled.
        decision: Decision taken by the lifecycle rules.
        changes: Change set the decision was based on.
        target: ``PurgeEverything`` or the URLs computed for the object.
        submitted: True if the transport was called and returned normally.
        error: Message of the exception raised while purging, if any.

    """

    event: LifecycleEvent
    decision: PurgeDecision
    changes: ChangeSet
    target: PurgeTarget | None
    submitted: bool
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True unless purging raised."""
        return self.error is None


class ContentPurger:
    """Runs the purge rules for content lifecycle events.

    Args:
        transport: CDN purge transport.
        config: Sweep configuration (sensitive fields, stage parameter).
        versions: Version store for pre-publish diffs.
        dirty: Dirty-field tracker for non-versioned saves.
        links: Source of each object's URLs.
        notifier: Receives a notice for every failed purge.
        collector: Optional observability collector.

    """

    __slots__ = ("_collector", "_config", "_decision", "_links", "_notifier", "_transport")

    def __init__(
        self,
        transport: PurgeTransport,
        *,
        config: SweepConfig | None = None,
        versions: VersionStore | None = None,
        dirty: DirtyFieldTracker | None = None,
        links: LinkProvider | None = None,
        notifier: Notifier | None = None,
        collector: PurgeCollector | None = None,
    ) -> None:
        if not isinstance(transport, PurgeTransport):
            msg = f"transport must implement purge_urls() and purge_everything(), got {type(transport).__name__}"
            raise TypeError(msg)
        if versions is not None and not isinstance(versions, VersionStore):
            msg = f"versions must implement VersionStore, got {type(versions).__name__}"
            raise TypeError(msg)
        if dirty is not None and not isinstance(dirty, DirtyFieldTracker):
            msg = f"dirty must implement DirtyFieldTracker, got {type(dirty).__name__}"
            raise TypeError(msg)

        self._transport = transport
        self._config = config if config is not None else SweepConfig()
        self._decision = LifecycleDecision(
            self._config.nav_sensitive_fields, versions=versions, dirty=dirty
        )
        self._links = links if links is not None else LinkProvider()
        self._notifier = notifier if notifier is not None else StderrNotifier()
        self._collector = collector

    @property
    def decision(self) -> LifecycleDecision:
        return self._decision

    # ----- Lifecycle hooks -----

    def before_publish(self, ref: ContentRef) -> PurgeOutcome:
        """Hook for the moment before a draft is published."""
        decision, changes = self._decision.pre_publish(ref)
        return self._run("pre-publish", ref, decision, changes)

    def after_write(self, ref: ContentRef) -> PurgeOutcome:
        """Hook for the moment after an object is saved."""
        decision, changes = self._decision.post_write(ref)
        return self._run("post-write", ref, decision, changes)

    def after_delete(self, ref: ContentRef) -> PurgeOutcome:
        """Hook for the moment after an object is deleted."""
        decision, changes = self._decision.post_delete(ref)
        return self._run("post-delete", ref, decision, changes)

    # ----- Internals -----

    def _run(
        self,
        event: LifecycleEvent,
        ref: ContentRef,
        decision: PurgeDecision,
        changes: ChangeSet,
    ) -> PurgeOutcome:
        key = str(ref.key)
        if self._collector is not None:
            self._collector.record_decision(event, key, decision, changes)

        kind: Literal["everything", "urls"] = "everything" if decision.full else "urls"
        target: PurgeTarget | None = None
        try:
            target = compute(
                decision,
                lambda: self._links.links_for(ref.instance),
                stage_param=self._config.stage_param,
                stage_value=self._config.stage_value,
            )
            start = time.perf_counter()
            submitted = self._submit(target)
            duration_ms = (time.perf_counter() - start) * 1000
        except Exception as exc:
            self._report_failure(f"Purge failed ({event}, {key}): {exc}")
            if self._collector is not None:
                self._collector.record_failure(event, key, exc, kind=kind)
            return PurgeOutcome(
                event=event,
                decision=decision,
                changes=changes,
                target=target,
                submitted=False,
                error=str(exc) or type(exc).__name__,
            )

        if submitted and self._collector is not None:
            self._collector.record_submit(
                event,
                key,
                kind=kind,
                url_count=len(target) if isinstance(target, PurgeRequest) else 0,
                duration_ms=duration_ms,
            )
        return PurgeOutcome(
            event=event, decision=decision, changes=changes, target=target, submitted=submitted
        )

    def _report_failure(self, message: str) -> None:
        """Send a failure notice. A broken notifier falls back to stderr."""
        try:
            self._notifier.notice(message)
        except Exception as exc:
            print(f"  {message}", file=sys.stderr)
            print(f"  Notifier failed: {type(exc).__name__}: {exc}", file=sys.stderr)

    def _submit(self, target: PurgeTarget) -> bool:
        """Hand the target to the transport. Returns False when there was nothing to send."""
        if isinstance(target, PurgeEverything):
            self._transport.purge_everything()
            return True
        if not target:
            return False
        self._transport.purge_urls(list(target.urls))
        return True
