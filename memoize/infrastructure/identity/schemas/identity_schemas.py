"""Pydantic schemas for identity responses."""

from pydantic import BaseModel, Field


class IdentityResponse(BaseModel):
    """Schema for the authenticated caller's identity."""

    owner_id: str = Field(..., description="Stable subject id used as the owner of decks and cards")
    email: str | None = Field(None, description="Email address, when shared by the provider")
    name: str | None = Field(None, description="Display name")
    avatar_url: str | None = Field(None, description="Profile picture URL")
