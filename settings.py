# settings.py
"""
DesiFit API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # Gemini AI (plan generation). Optional so the app can boot without it;
    # plan requests fail with ConfigurationError until it is set.
    GEMINI_API_KEY: Optional[str] = Field(default=None, description="Google Gemini API key")
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")
    GEMINI_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)

    # Weight history storage
    STORAGE_BACKEND: str = Field(
        default="file",
        description="Key-value backend for weight history (file/memory/redis)"
    )
    STORAGE_DIR: str = Field(
        default=".desifit",
        description="Directory used by the file backend"
    )
    WEIGHT_HISTORY_KEY: str = Field(default="desifit_weight_history")

    # Redis Configuration (only read when STORAGE_BACKEND=redis)
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis://[:password@]host:port/db)"
    )
    REDIS_SOCKET_TIMEOUT: int = Field(
        default=5,
        description="Redis socket timeout in seconds"
    )

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def gemini_configured(self) -> bool:
        """Check if a Gemini credential is present."""
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.strip())

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if self.STORAGE_BACKEND not in ("file", "memory", "redis"):
            raise ValueError(f"Unknown STORAGE_BACKEND: {self.STORAGE_BACKEND}")
        if not self.gemini_configured:
            raise ValueError("GEMINI_API_KEY must be set")


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
