"""Shared test fixtures for sweep."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from sweep.lifecycle.links import LinkProvider
from sweep.observability.collector import PurgeCollector
from sweep.transport.memory import RecordingTransport


@dataclass
class Page:
    """Minimal content object, shaped like a CMS page record."""

    id: int
    Title: str = "Page"
    URLSegment: str = "page"
    MenuTitle: str = ""
    ParentID: int = 0
    Sort: int = 1
    ShowInMenus: bool = True
    Content: str = ""
    links: tuple[str, ...] = ()


@dataclass
class FakeVersionStore:
    """VersionStore backed by two dicts."""

    live: dict[Any, object] = field(default_factory=dict)
    draft: dict[Any, object] = field(default_factory=dict)
    calls: int = 0

    def get_live_version(self, key: Any) -> object | None:
        self.calls += 1
        return self.live.get(key)

    def get_draft_version(self, key: Any) -> object | None:
        self.calls += 1
        return self.draft.get(key)


class BrokenVersionStore:
    """VersionStore whose lookups always fail."""

    def get_live_version(self, key: Any) -> object | None:
        msg = "database unavailable"
        raise RuntimeError(msg)

    def get_draft_version(self, key: Any) -> object | None:
        msg = "database unavailable"
        raise RuntimeError(msg)


@dataclass
class FakeDirtyTracker:
    """DirtyFieldTracker reporting a fixed set of changed fields."""

    changed: set[str] = field(default_factory=set)

    def is_field_changed(self, obj: object, field_name: str) -> bool:
        return field_name in self.changed


class FailingTransport(RecordingTransport):
    """Transport that raises on every call after recording it."""

    def purge_urls(self, urls):  # type: ignore[override]
        super().purge_urls(urls)
        msg = "cdn unreachable"
        raise ConnectionError(msg)

    def purge_everything(self) -> None:
        super().purge_everything()
        msg = "cdn unreachable"
        raise ConnectionError(msg)


class CollectingNotifier:
    """Notifier that keeps notices in a list."""

    def __init__(self) -> None:
        self.notices: list[str] = []

    def notice(self, message: str) -> None:
        self.notices.append(message)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def collector() -> PurgeCollector:
    return PurgeCollector()


@pytest.fixture
def page_links() -> LinkProvider:
    """LinkProvider reading ``Page.links``."""
    return LinkProvider(purge_links=lambda page: page.links)


@pytest.fixture
def make_page():
    """Factory for Page records."""

    def _make(page_id: int = 1, **fields: Any) -> Page:
        return Page(id=page_id, **fields)

    return _make


@pytest.fixture
def versions() -> FakeVersionStore:
    return FakeVersionStore()


@pytest.fixture
def broken_versions() -> BrokenVersionStore:
    return BrokenVersionStore()


@pytest.fixture
def dirty() -> FakeDirtyTracker:
    return FakeDirtyTracker()
