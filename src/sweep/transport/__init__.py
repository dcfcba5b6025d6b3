"""Purge transports: where purge requests are sent."""

from sweep.transport.cloudflare import CloudflareTransport
from sweep.transport.memory import RecordingTransport

__all__ = [
    "CloudflareTransport",
    "RecordingTransport",
]
