from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Site's own content source (single-source operations)
    WP_DOMAIN: str

    # Failover content sources
    WP_PRIMARY_DOMAIN: str | None = None  # None = same as WP_DOMAIN
    WP_SECONDARY_DOMAIN: str
    WP_API_PREFIX: str = "/wp-json/wp/v2"

    # HTTP
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None
    SLACK_WEBHOOK_URL: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def primary_domain(self) -> str:
        return self.WP_PRIMARY_DOMAIN or self.WP_DOMAIN


settings = Settings()
