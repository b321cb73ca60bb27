"""Pydantic schemas for the authentication endpoints."""

from pydantic import BaseModel, Field, field_validator


class TokenResponse(BaseModel):
    """Schema for the login response."""

    access_token: str = Field(..., min_length=1, description="JWT access token")
    refresh_token: str | None = Field(None, description="JWT refresh token")
    token_type: str = Field("bearer", description="Token type")


class UserDetailsResponse(BaseModel):
    """Schema for the current user's profile."""

    id: str = Field(..., min_length=1, description="User identifier")
    email: str | None = Field(None, description="User email address")
    name: str | None = Field(None, description="Display name")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        """Accept numeric ids from the backend."""
        if isinstance(value, int):
            return str(value)
        return value
