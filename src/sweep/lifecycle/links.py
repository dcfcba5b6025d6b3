"""Link provider: where an object's purgeable URLs come from.

Two tiers, picked once when the provider is built:

1. ``purge_links``: a function returning the URLs to purge for an object
   (a single string, a sequence of strings, or nothing).
2. ``link``: a function returning the object's canonical URL.

When ``purge_links`` is configured it is the only source, even if it
returns nothing for a given object.  With neither configured every object
yields no URLs.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

PurgeLinksFunc: TypeAlias = Callable[[object], Sequence[str] | str | None]
LinkFunc: TypeAlias = Callable[[object], str | None]


@dataclass(frozen=True, slots=True)
class LinkProvider:
    """Resolves the relative URLs to purge for a content object.

    Attributes:
        purge_links: Preferred source of URLs.
        link: Fallback returning a single canonical URL.

    """

    purge_links: PurgeLinksFunc | None = None
    link: LinkFunc | None = None

    def links_for(self, obj: object) -> tuple[str, ...]:
        """Return the object's URLs, always as a tuple."""
        if self.purge_links is not None:
            return _as_tuple(self.purge_links(obj))
        if self.link is not None:
            return _as_tuple(self.link(obj))
        return ()


def _as_tuple(links: Sequence[str] | str | None) -> tuple[str, ...]:
    if not links:
        return ()
    if isinstance(links, str):
        return (links,)
    return tuple(links)
