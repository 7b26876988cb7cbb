"""Pydantic schemas for Card API request/response validation."""

from pydantic import BaseModel, Field

from memoize.domain.common.timestamps import MAX_MILLIS, MIN_MILLIS
from memoize.domain.study.value_objects.schedule import MAX_DIFFICULTY, MIN_DIFFICULTY, CardState


class CardScheduleFields(BaseModel):
    """Scheduling fields, produced by the client's scheduler. Timestamps are Unix ms."""

    state: CardState | None = Field(None, description="0 New, 1 Learning, 2 Review, 3 Relearning")
    stability: float | None = Field(
        None, ge=0, allow_inf_nan=False, description="Memory stability"
    )
    difficulty: float | None = Field(
        None,
        ge=MIN_DIFFICULTY,
        le=MAX_DIFFICULTY,
        allow_inf_nan=False,
        description="Card difficulty",
    )
    due: int | None = Field(
        None, ge=MIN_MILLIS, le=MAX_MILLIS, description="Next review time in Unix milliseconds"
    )
    last_review: int | None = Field(
        None, ge=MIN_MILLIS, le=MAX_MILLIS, description="Last review time in Unix milliseconds"
    )
    reps: int | None = Field(None, ge=0, description="Number of reviews")
    lapses: int | None = Field(None, ge=0, description="Number of lapses")


class CardCreateRequest(CardScheduleFields):
    """Schema for creating a new card. Missing scheduling fields start as a new card."""

    front: str = Field(..., min_length=1, description="Front side text")
    back: str = Field(..., min_length=1, description="Back side text")
    tags: list[str] = Field(default_factory=list, description="Ordered tags")


class CardUpdateRequest(CardScheduleFields):
    """
    Schema for updating a card.

    Omitted fields stay unchanged. ``last_review`` may be sent as null to
    clear it; an explicit null for any other field is ignored.
    """

    front: str | None = Field(None, min_length=1, description="New front side text")
    back: str | None = Field(None, min_length=1, description="New back side text")
    tags: list[str] | None = Field(None, description="Replacement tags")


class Card(BaseModel):
    """Schema for Card response, in the stored record's shape."""

    id: str
    deck_id: str
    front: str
    back: str
    tags: list[str]
    state: int
    stability: float
    difficulty: float
    due: int
    last_review: int | None
    reps: int
    lapses: int
    created_at: int
    owner_id: str


class CardCreateResponse(BaseModel):
    """Schema for card creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="Created card")


class CardUpdateResponse(BaseModel):
    """Schema for card update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="Updated card")


class CardDeleteResponse(BaseModel):
    """Schema for card deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class CardsListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[Card] = Field(..., description="Cards, newest first")
    total: int = Field(..., ge=0, description="Number of cards returned")
