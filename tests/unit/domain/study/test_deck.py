from datetime import UTC, datetime

import pytest

from memoize.domain.common.exceptions import DomainError, ValidationError
from memoize.domain.common.value_objects import DeckId, OwnerId
from memoize.domain.study.entities.deck import Deck

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def make_deck(**overrides: object) -> Deck:
    fields: dict = {
        "id": DeckId("deck1"),
        "owner_id": OwnerId("u1"),
        "name": "Spanish",
        "description": "Words",
        "created_at": NOW,
    }
    fields.update(overrides)
    return Deck.create(**fields)


def test_create_deck() -> None:
    """Test creating a valid deck."""
    deck = make_deck()

    assert deck.id == DeckId("deck1")
    assert deck.owner_id == OwnerId("u1")
    assert deck.name == "Spanish"
    assert deck.description == "Words"
    assert deck.created_at == NOW


def test_create_keeps_name_verbatim() -> None:
    deck = make_deck(name="  Spanish  ")

    assert deck.name == "  Spanish  "


def test_create_missing_description_is_empty() -> None:
    """Test that a None description is stored as an empty string."""
    deck = make_deck(description=None)

    assert deck.description == ""


@pytest.mark.parametrize("name", ["", "   ", None])
def test_empty_name_raises_error(name: str | None) -> None:
    """Test that an empty name raises ValidationError."""
    with pytest.raises(ValidationError, match="Deck name cannot be empty"):
        make_deck(name=name)


def test_rename() -> None:
    deck = make_deck()

    deck.rename("  French ")

    assert deck.name == "  French "


def test_rename_to_blank_keeps_name() -> None:
    """Test that a failed rename leaves the deck unchanged."""
    deck = make_deck()

    with pytest.raises(DomainError):
        deck.rename(" ")

    assert deck.name == "Spanish"


def test_update_description_allows_empty() -> None:
    deck = make_deck()

    deck.update_description("")

    assert deck.description == ""


def test_is_owned_by() -> None:
    deck = make_deck()

    assert deck.is_owned_by(OwnerId("u1"))
    assert not deck.is_owned_by(OwnerId("u2"))


def test_equality_by_id() -> None:
    """Test that decks with the same id are equal whatever their content."""
    assert make_deck() == make_deck(name="Other")
    assert make_deck() != make_deck(id=DeckId("deck2"))
