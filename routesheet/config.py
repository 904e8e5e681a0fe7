"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Elevation service ===
    elevation_server: str = Field(
        default="elevation-service-hosted.now.sh",
        description="Elevation service host"
    )
    elevation_port: int = Field(default=443)
    elevation_protocol: str = Field(default="https")

    # === Climate (Daymet) ===
    daymet_api_url: str = Field(
        default="https://daymet.ornl.gov/single-pixel/api/data",
        description="Daymet single-pixel API endpoint"
    )

    # === HTTP ===
    http_timeout: Optional[float] = Field(
        default=None,
        description="Seconds before an external request is abandoned (None = no limit)"
    )

    @field_validator('elevation_protocol')
    @classmethod
    def check_protocol(cls, v: str) -> str:
        """Only http and https are served by the elevation service."""
        v = v.lower()
        if v not in ("http", "https"):
            raise ValueError(f"Unsupported protocol: {v}")
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
