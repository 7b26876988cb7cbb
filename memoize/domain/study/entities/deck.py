"""
Deck entity owning a collection of cards.
"""

from dataclasses import dataclass
from datetime import datetime

from memoize.domain.common.entity import Entity
from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.value_objects import DeckId, OwnerId


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    A named deck of flashcards.

    Business Rules:
    - Name cannot be empty
    - Description may be empty but is never None
    - id, owner_id and created_at never change after creation
    """

    # Identity
    id: DeckId
    owner_id: OwnerId

    # Content
    name: str
    description: str

    # Timestamps
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Deck name cannot be empty", field="name", value=self.name)
        if self.description is None:
            self.description = ""

    def is_owned_by(self, owner_id: OwnerId) -> bool:
        """Check whether the deck belongs to the given owner."""
        return self.owner_id == owner_id

    def rename(self, name: str) -> None:
        """
        Rename the deck.

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Deck name cannot be empty", field="name", value=name)
        self.name = name

    def update_description(self, description: str) -> None:
        """Replace the description; empty is allowed."""
        self.description = description or ""

    @classmethod
    def create(
        cls,
        id: DeckId,
        owner_id: OwnerId,
        name: str,
        description: str | None,
        created_at: datetime,
    ) -> "Deck":
        """Create a new deck from user input."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description or "",
            created_at=created_at,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        owner_id: OwnerId,
        name: str,
        description: str,
        created_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description,
            created_at=created_at,
        )
