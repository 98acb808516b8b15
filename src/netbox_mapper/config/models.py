"""Pydantic models for connection configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from netbox_mapper.config.constants import DEFAULT_TIMEOUT


class ServiceProfile(BaseModel):
    """A named NetBox connection profile."""

    name: str
    url: str = Field(description="API base URL, e.g. https://netbox.example.com/api")
    key: str = Field(min_length=1, description="Token key (first half of the bearer token)")
    token: str = Field(min_length=1, description="Token secret (second half)")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ServiceProfile] = Field(default_factory=dict)
