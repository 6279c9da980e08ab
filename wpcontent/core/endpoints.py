"""Endpoint registry for the site and failover content sources."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from wpcontent.core.config import Settings

DEFAULT_API_PREFIX = "/wp-json/wp/v2"


def api_base(domain: str, prefix: str = DEFAULT_API_PREFIX) -> str:
    """Turn a site domain into its REST API base URL."""
    base = domain.strip().rstrip("/")
    prefix = "/" + prefix.strip("/")
    if base.endswith(prefix):
        return base
    return base + prefix


class EndpointRegistry(BaseModel):
    """API base URLs by role: ``site`` for single-source operations,
    ``primary``/``secondary`` for failover operations."""

    site: str
    primary: str
    secondary: str
    api_prefix: str = DEFAULT_API_PREFIX

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, config: Settings) -> EndpointRegistry:
        prefix = config.WP_API_PREFIX
        return cls(
            site=api_base(config.WP_DOMAIN, prefix),
            primary=api_base(config.primary_domain, prefix),
            secondary=api_base(config.WP_SECONDARY_DOMAIN, prefix),
            api_prefix=prefix,
        )

    def resolve(self, domain: str) -> str:
        """API base URL for a caller-supplied domain, using this registry's prefix."""
        return api_base(domain, self.api_prefix)

    def get(self, name: str) -> str:
        if name not in ("site", "primary", "secondary"):
            raise KeyError(f"Unknown endpoint: {name}")
        return getattr(self, name)

    @property
    def failover(self) -> Tuple[str, str]:
        return self.primary, self.secondary
