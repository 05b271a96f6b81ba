"""Application configuration."""
import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

WEBHOOK_URL_PATTERN = re.compile(r"^(?P<base>https?://.+?)/webhooks/(?P<id>\d+)/(?P<token>[^/?#]+)")


@dataclass
class WebhookApiConfig:
    """Webhook API configuration."""

    base_url: str = "https://discord.com/api/v10"
    webhook_id: str = ""
    token: str = ""  # Read from .env or CLI option
    timeout: int = 15

    @classmethod
    def from_url(cls, url: str) -> "WebhookApiConfig":
        """Parse a full webhook URL (.../webhooks/{id}/{token})."""
        match = WEBHOOK_URL_PATTERN.match(url.strip())
        if not match:
            raise ValueError(f"Not a webhook URL: {url}")

        return cls(
            base_url=match.group("base"),
            webhook_id=match.group("id"),
            token=match.group("token"),
        )

    @classmethod
    def from_env(cls) -> "WebhookApiConfig":
        """Load config from environment variables, falling back to defaults."""
        config = None

        url = os.getenv("DISCORD_WEBHOOK_URL", "")
        if url:
            try:
                config = cls.from_url(url)
            except ValueError:
                logger.warning("Ignoring DISCORD_WEBHOOK_URL: not a webhook URL")

        if config is None:
            config = cls(
                base_url=os.getenv("DISCORD_API_URL", "https://discord.com/api/v10"),
                webhook_id=os.getenv("DISCORD_WEBHOOK_ID", ""),
                token=os.getenv("DISCORD_WEBHOOK_TOKEN", ""),
            )

        timeout = os.getenv("DISCORD_TIMEOUT", "")
        if timeout:
            try:
                config.timeout = int(timeout)
            except ValueError:
                logger.warning(f"Ignoring DISCORD_TIMEOUT={timeout!r}: not an integer")

        return config


@dataclass
class AppConfig:
    """Application configuration."""

    default_username: str = ""
    default_avatar_url: str = ""
    webhook_api: Optional[WebhookApiConfig] = None

    def __post_init__(self):
        """Initialize default values."""
        if self.webhook_api is None:
            self.webhook_api = WebhookApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            default_username=os.getenv("WEBHOOK_USERNAME", ""),
            default_avatar_url=os.getenv("WEBHOOK_AVATAR_URL", ""),
            webhook_api=WebhookApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
