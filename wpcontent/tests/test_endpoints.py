"""Endpoint registry tests"""

import pytest

from wpcontent.core.config import Settings
from wpcontent.core.endpoints import EndpointRegistry, api_base


class TestEndpointRegistry:
    """Test endpoint resolution"""

    def test_api_base(self):
        """Test REST prefix handling"""
        assert api_base("https://site.example.com") == "https://site.example.com/wp-json/wp/v2"
        assert api_base("https://site.example.com/") == "https://site.example.com/wp-json/wp/v2"
        assert api_base("https://site.example.com/wp-json/wp/v2/") == "https://site.example.com/wp-json/wp/v2"

    def test_from_settings(self):
        """Test primary falls back to the site domain"""
        config = Settings(WP_DOMAIN="https://site.example.com", WP_SECONDARY_DOMAIN="https://mirror.example.com")
        registry = EndpointRegistry.from_settings(config)

        assert registry.site == "https://site.example.com/wp-json/wp/v2"
        assert registry.primary == registry.site
        assert registry.failover == (registry.site, "https://mirror.example.com/wp-json/wp/v2")

    def test_explicit_primary(self):
        """Test a separate failover primary"""
        config = Settings(
            WP_DOMAIN="https://site.example.com",
            WP_PRIMARY_DOMAIN="https://primary.example.com",
            WP_SECONDARY_DOMAIN="https://mirror.example.com",
        )
        assert EndpointRegistry.from_settings(config).primary == "https://primary.example.com/wp-json/wp/v2"

    def test_lookup_by_name(self, registry):
        """Test lookup by role name"""
        assert registry.get("secondary") == registry.secondary
        with pytest.raises(KeyError):
            registry.get("tertiary")
