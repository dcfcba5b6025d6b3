"""Sweep error hierarchy.

All sweep-specific errors inherit from SweepError for easy catching.
"""


class SweepError(Exception):
    """Base error for all sweep operations."""


class ConfigError(SweepError):
    """Invalid or missing configuration."""


class TransportError(SweepError):
    """A purge request could not be delivered to the CDN."""
