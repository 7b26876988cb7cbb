"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal
when their ids are equal, whatever their other attributes hold.

Example:
    @dataclass
    class Deck(Entity[DeckId]):
        id: DeckId
        name: str

        def rename(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Ids are opaque strings. Wrapping them keeps a DeckId from being passed
    where a CardId is expected.

    Example:
        @dataclass(frozen=True)
        class DeckId(EntityId):
            pass

        DeckId("k7q9m2x5p8aa3b4c") != CardId("k7q9m2x5p8aa3b4c")
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{self.__class__.__name__} must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
