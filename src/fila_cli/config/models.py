"""Pydantic models for CLI configuration."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from fila_cli.config.constants import DEFAULT_API_BASE


class Profile(BaseModel):
    """A named API connection profile and its stored session."""

    name: str
    url: str = Field(description="API host URL, e.g. https://fila.example.gov.br")
    token: str | None = Field(default=None, description="Session token")
    expira: datetime | None = Field(
        default=None, description="Absolute expiry of the session token",
    )
    timeout: float = Field(
        default=30.0, gt=0, le=600, description="Request timeout in seconds",
    )
    token_override: bool = Field(
        default=False,
        exclude=True,
        description="Token came from --token or the environment, not the stored session",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        v = v.rstrip("/")
        # The client appends the API base itself.
        return v.removesuffix(DEFAULT_API_BASE)

    @property
    def token_expired(self) -> bool:
        if self.expira is None:
            return False
        expira = self.expira
        if expira.tzinfo is None:
            expira = expira.replace(tzinfo=timezone.utc)
        return expira <= datetime.now(timezone.utc)

    @property
    def authenticated(self) -> bool:
        return self.token is not None and not self.token_expired


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, Profile] = Field(default_factory=dict)
