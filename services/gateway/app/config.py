# =============================================================================
# Gateway Configuration
# =============================================================================
# Settings loaded from environment variables.
# =============================================================================

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lineage_capture.models import StorageSettings, TrackingSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Object store (archive bucket)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    # MongoDB tracking store
    tracking: TrackingSettings = Field(default_factory=TrackingSettings)

    # Function key required on the capture endpoint (disabled when unset)
    function_key: Optional[str] = Field(None, validation_alias="FUNCTION_KEY")

    # Logging
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
