"""Configuration management for the Pusher server client."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PusherConfig(BaseSettings):
    """
    Configuration for the Pusher REST client.

    Values are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (prefixed with PUSHER_)
    3. .env file
    4. Default values

    Instances are immutable once created.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUSHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Credentials
    app_key: str = Field(..., description="Application key (public)")
    app_secret: SecretStr = Field(..., description="Application secret")
    app_id: Union[str, int] = Field(..., description="Application identifier")

    # Endpoint settings
    host: str = Field(default="api.pusherapp.com", description="REST API hostname")
    port: int = Field(default=80, description="REST API port")
    secured: bool = Field(default=True, description="Use https instead of http")
    timeout: float = Field(default=30, description="Request timeout (seconds)")

    # Return full response envelopes from trigger instead of booleans
    debug: bool = Field(default=False, description="Enable debug responses")

    # Logging (None leaves the package logger level to the application)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        default=None, description="Level for the pusher_server logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def scheme(self) -> str:
        return "https" if self.secured else "http"

    @property
    def base_url(self) -> str:
        """Scheme, host and port of the REST API."""
        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def base_path(self) -> str:
        """Path prefix for every application resource."""
        return f"/apps/{self.app_id}"

    def build_url(self, path: str) -> str:
        """Construct the absolute URL for an application-relative path."""
        return f"{self.base_url}{path}"
