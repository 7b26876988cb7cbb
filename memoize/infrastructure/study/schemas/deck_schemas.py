"""Pydantic schemas for Deck API request/response validation."""

from pydantic import BaseModel, Field


class DeckCreateRequest(BaseModel):
    """Schema for creating a new deck."""

    name: str = Field(..., min_length=1, description="Deck name")
    description: str | None = Field(None, description="Optional deck description")


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck. Omitted fields stay unchanged."""

    name: str | None = Field(None, min_length=1, description="New deck name")
    description: str | None = Field(None, description="New deck description")


class Deck(BaseModel):
    """Schema for Deck response, in the stored record's shape."""

    id: str
    name: str
    description: str
    created_at: int = Field(..., description="Creation time in Unix milliseconds")
    owner_id: str


class DeckWithCount(Deck):
    """Schema for a single deck together with its number of cards."""

    card_count: int = Field(..., ge=0, description="Number of cards in the deck")


class DeckCreateResponse(BaseModel):
    """Schema for deck creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Created deck")


class DeckUpdateResponse(BaseModel):
    """Schema for deck update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Updated deck")


class DeckDeleteResponse(BaseModel):
    """Schema for deck deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class DecksListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[Deck] = Field(..., description="Decks, newest first")
    total: int = Field(..., ge=0, description="Number of decks returned")
