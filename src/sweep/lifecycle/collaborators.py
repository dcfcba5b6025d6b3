"""Collaborator protocols consumed by the lifecycle layer.

Hosts implement these against their CMS or ORM.  All protocols are
runtime-checkable so hosts get a clear ``TypeError`` from ``ContentPurger``
when they pass the wrong object.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sweep._types import ObjectKey


@dataclass(frozen=True, slots=True)
class ContentRef:
    """What the host knows about a content object at a lifecycle moment.

    Attributes:
        key: Identifier passed to the ``VersionStore``.
        instance: The host's object, handed to the dirty tracker and link provider.
        versioned: True if the object has separate draft and live versions.
        show_in_menu: Value of the object's ``ShowInMenu`` flag.  Only the
            delete rule reads it.

    """

    key: ObjectKey
    instance: object = None
    versioned: bool = False
    show_in_menu: bool = False


@runtime_checkable
class VersionStore(Protocol):
    """Looks up the published and draft versions of an object."""

    def get_live_version(self, key: ObjectKey) -> object | None: ...

    def get_draft_version(self, key: ObjectKey) -> object | None: ...


@runtime_checkable
class DirtyFieldTracker(Protocol):
    """Reports fields modified on an object since it was loaded."""

    def is_field_changed(self, obj: object, field_name: str) -> bool: ...


@runtime_checkable
class PurgeTransport(Protocol):
    """Sends purge requests to a CDN."""

    def purge_urls(self, urls: Sequence[str]) -> None: ...

    def purge_everything(self) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Receives notices about purges that could not be delivered."""

    def notice(self, message: str) -> None: ...
