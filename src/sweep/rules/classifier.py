"""Change classifier: decides whether a content change needs a full-site purge.

A change touching any navigation-sensitive field (menu flags, sort order,
parent, URL segment, menu title) may alter every page that renders the site
menu, so the whole cache must go.  Any other change only affects the object's
own URLs.

The classification is conservative: when there is no baseline to diff
against, it always answers ``"full"``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sweep._types import Classification


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """Field names that changed between two versions of a content object.

    Attributes:
        fields: Names of the changed fields.
        known: False when no baseline was available to compare against.
            An unknown change set carries no fields.

    """

    fields: frozenset[str] = frozenset()
    known: bool = True

    @classmethod
    def of(cls, names: Iterable[str]) -> ChangeSet:
        """Build a known change set from field names."""
        return cls(fields=frozenset(names))

    @classmethod
    def unknown(cls) -> ChangeSet:
        """The change set used when the previous version cannot be compared."""
        return cls(fields=frozenset(), known=False)

    def __bool__(self) -> bool:
        return not self.known or bool(self.fields)


def classify(changes: ChangeSet, sensitive_fields: Iterable[str]) -> Classification:
    """Classify a change set as needing a full or a scoped purge.

    Args:
        changes: What changed on the object.
        sensitive_fields: Field names that affect site navigation.

    Returns:
        ``"full"`` when the change set is unknown or intersects
        *sensitive_fields*, ``"scoped"`` otherwise.

    """
    if not changes.known:
        return "full"
    if changes.fields & frozenset(sensitive_fields):
        return "full"
    return "scoped"
