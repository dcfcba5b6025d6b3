"""Sweep configuration.

SweepConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass

from sweep._errors import ConfigError

# Fields whose change is likely to alter the site navigation.
DEFAULT_NAV_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"ShowInMenus", "Sort", "ParentID", "URLSegment", "MenuTitle"}
)


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Configuration for purge decisions and the bundled transports.

    Attributes:
        nav_sensitive_fields: Field names whose change forces a full-site purge.
            Any iterable of strings is accepted and normalized to a frozenset.
        stage_param: Query parameter that selects the draft rendering of a URL.
        stage_value: Value of ``stage_param`` for the draft rendering.
        base_url: Site origin used to turn relative URLs into absolute ones
            for CDNs that require them (e.g., ``https://example.com``).
        zone_id: Cloudflare zone identifier.
        api_base: Cloudflare API root.
        timeout: HTTP timeout in seconds for purge requests.

    """

    nav_sensitive_fields: frozenset[str] = DEFAULT_NAV_SENSITIVE_FIELDS
    stage_param: str = "stage"
    stage_value: str = "Stage"
    base_url: str = ""
    zone_id: str = ""
    api_base: str = "https://api.cloudflare.com/client/v4"
    timeout: float = 15.0

    def __post_init__(self) -> None:
        fields = self.nav_sensitive_fields
        if isinstance(fields, str):
            msg = "nav_sensitive_fields must be a collection of field names, not a string"
            raise ConfigError(msg)
        if not isinstance(fields, frozenset):
            object.__setattr__(self, "nav_sensitive_fields", frozenset(fields))
        if not self.stage_param:
            msg = "stage_param must not be empty"
            raise ConfigError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout!r}"
            raise ConfigError(msg)

    @property
    def purge_endpoint(self) -> str:
        """Cloudflare purge_cache endpoint for the configured zone."""
        return f"{self.api_base.rstrip('/')}/zones/{self.zone_id}/purge_cache"
