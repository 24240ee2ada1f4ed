"""Configuration management for BookTable using Pydantic."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    server_host: str = Field(default="0.0.0.0", description="Server host")
    server_port: int = Field(default=8080, description="Server port")
    server_url: str = Field(
        default="http://localhost:8080",
        description="Server URL for CLI to connect to API",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    # Catalog Configuration
    simulated_latency_ms: int = Field(
        default=0, ge=0, description="Artificial delay added to catalog calls"
    )
    seed_demo_data: bool = Field(
        default=True, description="Load the demo catalog, users and bookings"
    )

    # Availability Configuration
    grace_minutes: int = Field(
        default=30, ge=0, description="Tolerance around opening hours in search"
    )
    slot_interval_minutes: int = Field(
        default=30, gt=0, description="Spacing of bookable slots"
    )
    service_window_start: str = Field(
        default="11:00", description="Earliest quick-option slot"
    )
    service_window_end: str = Field(
        default="22:00", description="Quick-option slots must be before this time"
    )

    # Search Input Limits
    min_party_size: int = Field(default=1, description="Smallest bookable party")
    max_party_size: int = Field(default=12, description="Largest bookable party")

    def model_post_init(self, __context) -> None:
        """Validate configuration after initialization."""
        if self.min_party_size > self.max_party_size:
            logger.warning(
                "MIN_PARTY_SIZE is greater than MAX_PARTY_SIZE - every search will be rejected"
            )

        if self.simulated_latency_ms:
            logger.info(f"Catalog latency simulation enabled: {self.simulated_latency_ms}ms")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
