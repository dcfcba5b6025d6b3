"""In-memory transport: records purges instead of sending them.

Lets hosts dry-run their purge wiring and assert on it in their own tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingTransport:
    """Transport that keeps every request it receives.

    Attributes:
        url_batches: One entry per ``purge_urls`` call.
        everything_count: Number of ``purge_everything`` calls.

    """

    url_batches: list[tuple[str, ...]] = field(default_factory=list)
    everything_count: int = 0

    def purge_urls(self, urls: Sequence[str]) -> None:
        self.url_batches.append(tuple(urls))

    def purge_everything(self) -> None:
        self.everything_count += 1

    @property
    def purged_urls(self) -> list[str]:
        """All URLs received, in order."""
        return [url for batch in self.url_batches for url in batch]

    def reset(self) -> None:
        self.url_batches.clear()
        self.everything_count = 0
