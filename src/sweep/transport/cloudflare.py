"""Cloudflare purge transport.

Sends purge requests to the zone's ``purge_cache`` endpoint:

- ``purge_urls`` posts ``{"files": [...]}`` in batches of at most
  ``MAX_FILES_PER_REQUEST`` absolute URLs.
- ``purge_everything`` posts ``{"purge_everything": true}``.

The ``httpx.Client`` is supplied by the caller and must already carry the
API credentials (e.g., an ``Authorization: Bearer`` header).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import httpx

from sweep._errors import ConfigError, TransportError

if TYPE_CHECKING:
    from sweep.config import SweepConfig

# Cloudflare rejects purge-by-URL requests with more files than this.
MAX_FILES_PER_REQUEST = 30


class CloudflareTransport:
    """Purge transport backed by the Cloudflare v4 API.

    Args:
        client: Authenticated HTTP client.
        config: Supplies ``zone_id``, ``api_base``, ``base_url`` and ``timeout``.

    Raises:
        ConfigError: If ``config.zone_id`` is empty.

    """

    __slots__ = ("_client", "_config")

    def __init__(self, client: httpx.Client, config: SweepConfig) -> None:
        if not config.zone_id:
            msg = "Cloudflare transport requires zone_id"
            raise ConfigError(msg)
        self._client = client
        self._config = config

    def purge_urls(self, urls: Sequence[str]) -> None:
        """Purge specific URLs. Relative URLs are joined onto ``base_url``."""
        absolute = [self.absolute_url(url) for url in urls]
        for batch in _batches(absolute, MAX_FILES_PER_REQUEST):
            self._post({"files": batch})

    def purge_everything(self) -> None:
        """Purge every cached file in the zone."""
        self._post({"purge_everything": True})

    def absolute_url(self, url: str) -> str:
        """Join ``url`` onto ``base_url`` unless it already names a scheme and host."""
        parts = urlsplit(url)
        if (parts.scheme and parts.netloc) or not self._config.base_url:
            return url
        return f"{self._config.base_url.rstrip('/')}/{url.lstrip('/')}"

    def _post(self, payload: dict[str, Any]) -> None:
        try:
            response = self._client.post(
                self._config.purge_endpoint,
                json=payload,
                timeout=self._config.timeout,
            )
        except httpx.HTTPError as exc:
            msg = f"Cloudflare purge request failed: {exc}"
            raise TransportError(msg) from exc

        if response.is_error:
            msg = f"Cloudflare returned HTTP {response.status_code}: {_error_messages(response)}"
            raise TransportError(msg)

        try:
            body = response.json()
        except ValueError as exc:
            msg = "Cloudflare returned a non-JSON response"
            raise TransportError(msg) from exc
        if not isinstance(body, dict) or not body.get("success", False):
            msg = f"Cloudflare rejected the purge: {_error_messages(response)}"
            raise TransportError(msg)


def _batches(urls: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(urls), size):
        yield urls[start:start + size]


def _error_messages(response: httpx.Response) -> str:
    """Extract ``errors[].message`` from a Cloudflare response, falling back to the body text."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    errors = (data.get("errors") or []) if isinstance(data, dict) else []
    messages = [str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors]
    return "; ".join(messages) or response.text[:200]
