"""
Pydantic model for client configuration.
Provides robust validation for all settings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from acnh_cli import __version__
from acnh_cli.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://acnhapi.com"
DEFAULT_API_VERSION = 1

MIN_CHUNK_SIZE = 1024  # 1 KB
MAX_CHUNK_SIZE = 1048576  # 1 MB


class ClientConfig(BaseModel):
    """A validated configuration model for the API client."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # API
    base_url: str = DEFAULT_BASE_URL
    api_version: int = DEFAULT_API_VERSION
    user_agent: str = Field(default=f"acnh-cli/{__version__}")

    # Transport
    timeout: float = 60.0
    connect_timeout: float = 15.0
    chunk_size: int = 131072  # 128 KB

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the base URL is an absolute HTTP(S) URL without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://.")
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def validate_api_version(cls, v: int) -> int:
        if v < 1:
            raise ValueError("API version must be 1 or greater.")
        return v

    @field_validator("timeout", "connect_timeout")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        """Ensures timeouts are positive."""
        if v <= 0:
            raise ValueError("Timeouts must be greater than zero.")
        return v

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """Ensures a reasonable download chunk size."""
        if v < MIN_CHUNK_SIZE or v > MAX_CHUNK_SIZE:
            raise ValueError(
                f"Chunk size must be between {MIN_CHUNK_SIZE} and {MAX_CHUNK_SIZE} bytes."
            )
        return v

    @classmethod
    def create(cls, **settings: Any) -> "ClientConfig":
        """
        Builds a validated config, translating pydantic errors into the
        application's own exception type.

        Raises:
            ConfigurationError: If any setting fails validation.
        """
        try:
            return cls(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e
