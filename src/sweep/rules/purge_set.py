"""Purge set computation: turns a decision into what is sent to the CDN.

A full decision becomes ``PurgeEverything`` without ever looking at the
object's URLs.  A scoped decision becomes a ``PurgeRequest`` holding the
object's live URLs, their stage variants, or both, deduplicated in the order
they were first produced (live before draft).
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from sweep.rules.variants import STAGE_PARAM, STAGE_VALUE, to_stage_variant


class PurgeScope(enum.Flag):
    """Which cached rendering(s) of a URL to invalidate."""

    DRAFT = 0b01
    LIVE = 0b10
    BOTH = 0b11


@dataclass(frozen=True, slots=True)
class PurgeDecision:
    """Outcome of a lifecycle rule.

    Attributes:
        full: Purge every URL on the site. ``scope`` is ignored when set.
        scope: Rendering(s) to purge for a scoped decision.

    """

    full: bool
    scope: PurgeScope = PurgeScope.LIVE

    @classmethod
    def everything(cls) -> PurgeDecision:
        return cls(full=True)

    @classmethod
    def scoped(cls, scope: PurgeScope) -> PurgeDecision:
        return cls(full=False, scope=scope)


@dataclass(frozen=True, slots=True)
class PurgeEverything:
    """Signal for a site-wide purge. Carries no URLs."""


@dataclass(frozen=True, slots=True)
class PurgeRequest:
    """Concrete, deduplicated URLs to purge. Empty means nothing to send."""

    urls: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self.urls)


PurgeTarget: TypeAlias = PurgeEverything | PurgeRequest

ObjectURLs: TypeAlias = Sequence[str] | Callable[[], Sequence[str]]


def compute(
    decision: PurgeDecision,
    object_urls: ObjectURLs,
    *,
    stage_param: str = STAGE_PARAM,
    stage_value: str = STAGE_VALUE,
) -> PurgeTarget:
    """Compute the purge target for a decision.

    Args:
        decision: Result of the lifecycle rules.
        object_urls: The object's relative URLs, or a zero-argument callable
            returning them.  The callable is only invoked for scoped decisions.
        stage_param: Query parameter that selects the draft rendering.
        stage_value: Value of the stage parameter.

    Returns:
        ``PurgeEverything`` for a full decision, otherwise a ``PurgeRequest``.

    """
    if decision.full:
        return PurgeEverything()

    links = object_urls() if callable(object_urls) else object_urls
    if not links:
        return PurgeRequest()

    urls: list[str] = []
    if PurgeScope.LIVE in decision.scope:
        urls.extend(links)
    if PurgeScope.DRAFT in decision.scope:
        urls.extend(to_stage_variant(link, param=stage_param, value=stage_value) for link in links)

    return PurgeRequest(urls=_dedupe(urls))


def _dedupe(urls: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated URLs, keeping first-seen order."""
    return tuple(dict.fromkeys(urls))
