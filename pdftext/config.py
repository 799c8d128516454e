"""Service configuration with environment variable loading.

Pydantic-based settings for the extraction service. Values come from the
process environment, with a local .env file loaded first.
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    return value if value and value.strip() else None


class Settings(BaseModel):
    """Runtime settings for the PDF text extractor.

    Attributes:
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_level: Root logging level name.
        upload_dir: Scratch directory for staged uploads.
        max_upload_size: Largest accepted upload, in bytes.
        fetch_timeout: Outbound fetch timeout in seconds (None = unbounded).
        max_fetch_size: Largest accepted remote PDF in bytes (None = no cap).
    """

    # Environment values arrive as strings and must go through validation
    model_config = ConfigDict(validate_default=True)

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "3000"),
        ge=1,
        le=65535,
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    upload_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("UPLOAD_DIR", "uploads")),
        description="Scratch directory holding uploads for the duration of a request",
    )
    max_upload_size: int = Field(
        default_factory=lambda: os.getenv("MAX_UPLOAD_SIZE", str(MAX_UPLOAD_SIZE)),
        ge=1,
    )
    fetch_timeout: float | None = Field(
        default_factory=lambda: _optional_env("FETCH_TIMEOUT"),
        description="Seconds before an outbound PDF fetch is abandoned",
    )
    max_fetch_size: int | None = Field(
        default_factory=lambda: _optional_env("MAX_FETCH_SIZE"),
        description="Byte cap for PDFs fetched by URL",
    )

    @field_validator("fetch_timeout", "max_fetch_size")
    @classmethod
    def validate_positive(cls, v: float | int | None) -> float | int | None:
        """Reject zero and negative limits; None disables the limit."""
        if v is not None and v <= 0:
            raise ValueError("Limits must be positive when set")
        return v


@lru_cache
def get_settings() -> Settings:
    """Create settings from environment.

    Returns:
        Cached Settings instance.

    Raises:
        ValidationError: If an environment value is malformed.
    """
    return Settings()
