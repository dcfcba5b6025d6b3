"""Lifecycle decision: maps content lifecycle moments onto purge decisions.

Rules:

    =============  ==========================  =====================
    Event          Condition                   Decision
    =============  ==========================  =====================
    pre-publish    draft vs live is full       full purge
    pre-publish    otherwise                   scope=LIVE
    post-write     versioned                   scope=DRAFT
    post-write     dirty fields are full       full purge
    post-write     otherwise                   scope=LIVE
    post-delete    ShowInMenu flag set         full purge
    post-delete    versioned                   scope=BOTH
    post-delete    otherwise                   scope=LIVE
    =============  ==========================  =====================

``decide()`` applies these rules to an already-built change set.
``LifecycleDecision`` builds the change set from the host's collaborators
first.  Building a change set never raises: a missing baseline, a missing
collaborator, or a collaborator error all produce ``ChangeSet.unknown()``,
which classifies as a full purge.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from sweep.config import DEFAULT_NAV_SENSITIVE_FIELDS
from sweep.rules.classifier import ChangeSet, classify
from sweep.rules.differ import diff_fields
from sweep.rules.purge_set import PurgeDecision, PurgeScope

if TYPE_CHECKING:
    from sweep._types import LifecycleEvent
    from sweep.lifecycle.collaborators import ContentRef, DirtyFieldTracker, VersionStore

EVENTS: tuple[LifecycleEvent, ...] = ("pre-publish", "post-write", "post-delete")


def decide(
    event: LifecycleEvent,
    *,
    versioned: bool,
    show_in_menu: bool = False,
    changes: ChangeSet | None = None,
    sensitive_fields: Iterable[str] = DEFAULT_NAV_SENSITIVE_FIELDS,
) -> PurgeDecision:
    """Apply the lifecycle rules.

    Args:
        event: Lifecycle moment.
        versioned: True if the object has draft and live versions.
        show_in_menu: The object's ``ShowInMenu`` flag (post-delete only).
        changes: Change set for pre-publish and non-versioned post-write.
            ``None`` is treated as unknown.
        sensitive_fields: Navigation-sensitive field names.

    Raises:
        ValueError: If *event* is not a known lifecycle moment.

    """
    if changes is None:
        changes = ChangeSet.unknown()

    if event == "pre-publish":
        return _from_classification(changes, sensitive_fields)

    if event == "post-write":
        if versioned:
            return PurgeDecision.scoped(PurgeScope.DRAFT)
        return _from_classification(changes, sensitive_fields)

    if event == "post-delete":
        if show_in_menu:
            return PurgeDecision.everything()
        if versioned:
            return PurgeDecision.scoped(PurgeScope.BOTH)
        return PurgeDecision.scoped(PurgeScope.LIVE)

    msg = f"Unknown lifecycle event {event!r}; expected one of {', '.join(EVENTS)}"
    raise ValueError(msg)


def _from_classification(changes: ChangeSet, sensitive_fields: Iterable[str]) -> PurgeDecision:
    if classify(changes, sensitive_fields) == "full":
        return PurgeDecision.everything()
    return PurgeDecision.scoped(PurgeScope.LIVE)


class LifecycleDecision:
    """Builds change sets from collaborators and applies the lifecycle rules.

    Args:
        sensitive_fields: Navigation-sensitive field names.
        versions: Source of draft and live versions for pre-publish diffs.
        dirty: Dirty-field tracker for non-versioned post-write.

    """

    __slots__ = ("_dirty", "_sensitive_fields", "_versions")

    def __init__(
        self,
        sensitive_fields: Iterable[str] = DEFAULT_NAV_SENSITIVE_FIELDS,
        *,
        versions: VersionStore | None = None,
        dirty: DirtyFieldTracker | None = None,
    ) -> None:
        self._sensitive_fields = frozenset(sensitive_fields)
        self._versions = versions
        self._dirty = dirty

    @property
    def sensitive_fields(self) -> frozenset[str]:
        return self._sensitive_fields

    # ----- Lifecycle events -----

    def pre_publish(self, ref: ContentRef) -> tuple[PurgeDecision, ChangeSet]:
        """Decide before a draft is published over the live version."""
        changes = self.publish_changes(ref)
        return self._decide("pre-publish", ref, changes), changes

    def post_write(self, ref: ContentRef) -> tuple[PurgeDecision, ChangeSet]:
        """Decide after an object is saved.

        Versioned saves only touch the draft, so no change set is built.
        """
        changes = ChangeSet() if ref.versioned else self.write_changes(ref)
        return self._decide("post-write", ref, changes), changes

    def post_delete(self, ref: ContentRef) -> tuple[PurgeDecision, ChangeSet]:
        """Decide after an object is deleted."""
        changes = ChangeSet()
        return self._decide("post-delete", ref, changes), changes

    def _decide(self, event: LifecycleEvent, ref: ContentRef, changes: ChangeSet) -> PurgeDecision:
        return decide(
            event,
            versioned=ref.versioned,
            show_in_menu=ref.show_in_menu,
            changes=changes,
            sensitive_fields=self._sensitive_fields,
        )

    # ----- Change sets -----

    def publish_changes(self, ref: ContentRef) -> ChangeSet:
        """Diff the draft against the live version.

        Unknown when either version is missing (e.g., first publish), when no
        version store is configured, or when the store raises.
        """
        if self._versions is None:
            return ChangeSet.unknown()
        try:
            live = self._versions.get_live_version(ref.key)
            draft = self._versions.get_draft_version(ref.key)
            if live is None or draft is None:
                return ChangeSet.unknown()
            return diff_fields(live, draft)
        except Exception:
            return ChangeSet.unknown()

    def write_changes(self, ref: ContentRef) -> ChangeSet:
        """Ask the dirty tracker which sensitive fields changed.

        Unknown when no tracker is configured or the tracker raises.
        """
        if self._dirty is None:
            return ChangeSet.unknown()
        try:
            return ChangeSet.of(
                name
                for name in sorted(self._sensitive_fields)
                if self._dirty.is_field_changed(ref.instance, name)
            )
        except Exception:
            return ChangeSet.unknown()
