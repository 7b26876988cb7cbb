"""Tests for cards API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

DUE_MS = 1_704_200_000_000
REVIEWED_MS = 1_704_100_000_000


@pytest.fixture
def deck(client: TestClient) -> dict:
    response = client.post("/api/v1/decks", json={"name": "Spanish", "description": "Words"})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["deck"]


def create_card(client: TestClient, deck_id: str, **fields: object) -> dict:
    payload = {"front": "Hello", "back": "Hola", **fields}
    response = client.post(f"/api/v1/decks/{deck_id}/cards", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["card"]


class TestCreateCard:
    """Test suite for POST /decks/:id/cards endpoint."""

    def test_create_card_with_schedule(self, client: TestClient, deck: dict) -> None:
        """Test creating a card with every scheduling field supplied."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={
                "front": "Hello",
                "back": "Hola",
                "state": 0,
                "stability": 0,
                "difficulty": 5,
                "due": DUE_MS,
                "last_review": None,
                "reps": 0,
                "lapses": 0,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        card = data["card"]
        assert card["deck_id"] == deck["id"]
        assert card["owner_id"] == "u1"
        assert card["front"] == "Hello"
        assert card["back"] == "Hola"
        assert card["tags"] == []
        assert card["state"] == 0
        assert card["difficulty"] == 5
        assert card["due"] == DUE_MS
        assert card["last_review"] is None
        assert list(card) == [
            "id",
            "deck_id",
            "front",
            "back",
            "tags",
            "state",
            "stability",
            "difficulty",
            "due",
            "last_review",
            "reps",
            "lapses",
            "created_at",
            "owner_id",
        ]

    def test_create_card_defaults_to_new(self, client: TestClient, deck: dict) -> None:
        """Test that missing scheduling fields start the card as new and due now."""
        card = create_card(client, deck["id"], tags=["greeting"])

        assert card["state"] == 0
        assert card["stability"] == 0
        assert card["difficulty"] == 0
        assert card["reps"] == 0
        assert card["lapses"] == 0
        assert card["last_review"] is None
        assert card["due"] == card["created_at"]
        assert card["tags"] == ["greeting"]

    def test_create_card_missing_deck(self, client: TestClient) -> None:
        """Test creating a card in a deck that does not exist."""
        response = client.post(
            "/api/v1/decks/doesnotexist0000/cards", json={"front": "a", "back": "b"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Deck not found"}

    def test_create_card_in_other_owner_deck(
        self, client: TestClient, deck: dict, other_owner_headers: dict[str, str]
    ) -> None:
        """Test that a card cannot be added to someone else's deck."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={"front": "a", "back": "b"},
            headers=other_owner_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_card_blank_back(self, client: TestClient, deck: dict) -> None:
        """Test that a whitespace-only side fails domain validation."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards", json={"front": "a", "back": "  "}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Card back cannot be empty"

    def test_create_card_difficulty_out_of_range(self, client: TestClient, deck: dict) -> None:
        """Test that an out-of-range difficulty is rejected."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={"front": "a", "back": "b", "difficulty": 11},
        )

        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["due", "last_review"])
    def test_create_card_timestamp_out_of_range(
        self, client: TestClient, deck: dict, field: str
    ) -> None:
        """Test that a timestamp beyond the datetime range is rejected."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={"front": "a", "back": "b", field: 10**18},
        )

        assert response.status_code == 422
        assert client.get(f"/api/v1/decks/{deck['id']}/cards").json()["total"] == 0

    @pytest.mark.parametrize("raw", ["1e309", "NaN", "-Infinity"])
    def test_create_card_non_finite_stability(
        self, client: TestClient, deck: dict, raw: str
    ) -> None:
        """Test that a non-finite stability is rejected instead of stored."""
        response = client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            content=f'{{"front": "a", "back": "b", "stability": {raw}}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert client.get(f"/api/v1/decks/{deck['id']}/cards").json()["total"] == 0

    def test_create_card_keeps_whitespace(self, client: TestClient, deck: dict) -> None:
        """Test that card sides are stored exactly as sent."""
        card = create_card(client, deck["id"], front="    def f():", back="code\n")

        assert card["front"] == "    def f():"
        assert card["back"] == "code\n"
        listed = client.get(f"/api/v1/decks/{deck['id']}/cards").json()["cards"]
        assert listed == [card]


class TestListCards:
    """Test suite for GET /decks/:id/cards endpoint."""

    def test_list_cards_newest_first(self, client: TestClient, deck: dict) -> None:
        """Test that cards are listed in reverse creation order."""
        first = create_card(client, deck["id"], front="one")
        second = create_card(client, deck["id"], front="two")

        response = client.get(f"/api/v1/decks/{deck['id']}/cards")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [card["id"] for card in data["cards"]] == [second["id"], first["id"]]
        assert data["total"] == 2

    def test_list_cards_of_missing_deck_is_empty(self, client: TestClient) -> None:
        """Test that listing a deck that does not exist returns no cards."""
        response = client.get("/api/v1/decks/doesnotexist0000/cards")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"cards": [], "total": 0}

    def test_list_cards_of_other_owner_deck_is_empty(
        self, client: TestClient, deck: dict, other_owner_headers: dict[str, str]
    ) -> None:
        """Test that another owner sees no cards in the deck."""
        create_card(client, deck["id"])

        response = client.get(f"/api/v1/decks/{deck['id']}/cards", headers=other_owner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["cards"] == []


class TestGetCard:
    """Test suite for GET /cards/:id endpoint."""

    def test_get_card(self, client: TestClient, deck: dict) -> None:
        card = create_card(client, deck["id"])

        response = client.get(f"/api/v1/cards/{card['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == card

    def test_get_card_of_other_owner(
        self, client: TestClient, deck: dict, other_owner_headers: dict[str, str]
    ) -> None:
        """Test that a foreign card is reported exactly like a missing one."""
        card = create_card(client, deck["id"])

        foreign = client.get(f"/api/v1/cards/{card['id']}", headers=other_owner_headers)
        missing = client.get("/api/v1/cards/doesnotexist0000", headers=other_owner_headers)

        assert foreign.status_code == missing.status_code == status.HTTP_404_NOT_FOUND
        assert foreign.json() == missing.json() == {"detail": "Card not found"}


class TestUpdateCard:
    """Test suite for PUT /cards/:id endpoint."""

    def test_update_review_progress(self, client: TestClient, deck: dict) -> None:
        """Test persisting review progress leaves content unchanged."""
        card = create_card(client, deck["id"], tags=["greeting"])

        response = client.put(
            f"/api/v1/cards/{card['id']}",
            json={
                "state": 2,
                "stability": 3.5,
                "difficulty": 4.2,
                "due": DUE_MS,
                "last_review": REVIEWED_MS,
                "reps": 1,
            },
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()["card"]
        assert updated == {
            **card,
            "state": 2,
            "stability": 3.5,
            "difficulty": 4.2,
            "due": DUE_MS,
            "last_review": REVIEWED_MS,
            "reps": 1,
        }

    def test_update_content(self, client: TestClient, deck: dict) -> None:
        """Test updating front and tags only."""
        card = create_card(client, deck["id"])

        response = client.put(
            f"/api/v1/cards/{card['id']}", json={"front": "Goodbye", "tags": ["farewell"]}
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()["card"]
        assert updated == {**card, "front": "Goodbye", "tags": ["farewell"]}

    def test_update_due_out_of_range(self, client: TestClient, deck: dict) -> None:
        """Test that an unrepresentable due time leaves the card unchanged."""
        card = create_card(client, deck["id"])

        response = client.put(f"/api/v1/cards/{card['id']}", json={"due": -(10**18)})

        assert response.status_code == 422
        assert client.get(f"/api/v1/cards/{card['id']}").json() == card

    def test_update_clears_last_review(self, client: TestClient, deck: dict) -> None:
        """Test that an explicit null last_review clears it."""
        card = create_card(client, deck["id"], last_review=REVIEWED_MS)
        assert card["last_review"] == REVIEWED_MS

        response = client.put(f"/api/v1/cards/{card['id']}", json={"last_review": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["card"]["last_review"] is None

    def test_update_other_owner_card(
        self, client: TestClient, deck: dict, other_owner_headers: dict[str, str]
    ) -> None:
        """Test that another owner cannot update the card."""
        card = create_card(client, deck["id"])

        response = client.put(
            f"/api/v1/cards/{card['id']}", json={"front": "Mine now"}, headers=other_owner_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"/api/v1/cards/{card['id']}").json()["front"] == "Hello"


class TestDeleteCard:
    """Test suite for DELETE /cards/:id endpoint."""

    def test_delete_card(self, client: TestClient, deck: dict) -> None:
        """Test that a deleted card disappears from its deck."""
        card = create_card(client, deck["id"])

        response = client.delete(f"/api/v1/cards/{card['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/cards/{card['id']}").status_code == 404
        assert client.get(f"/api/v1/decks/{deck['id']}/cards").json()["cards"] == []
        assert client.get(f"/api/v1/decks/{deck['id']}").json()["card_count"] == 0

    def test_delete_card_twice(self, client: TestClient, deck: dict) -> None:
        card = create_card(client, deck["id"])

        assert client.delete(f"/api/v1/cards/{card['id']}").status_code == status.HTTP_200_OK
        assert client.delete(f"/api/v1/cards/{card['id']}").status_code == 404


class TestDeckLifecycle:
    """End-to-end deck and card lifecycle."""

    def test_delete_deck_cascades_to_cards(self, client: TestClient) -> None:
        """Create a deck and a card, delete the deck, and find nothing left."""
        deck = client.post(
            "/api/v1/decks", json={"name": "Spanish", "description": "Words"}
        ).json()["deck"]
        assert deck["owner_id"] == "u1"

        card = create_card(
            client,
            deck["id"],
            state=0,
            stability=0,
            difficulty=5,
            due=DUE_MS,
            last_review=None,
            reps=0,
            lapses=0,
        )
        assert card["deck_id"] == deck["id"]

        assert client.delete(f"/api/v1/decks/{deck['id']}").status_code == status.HTTP_200_OK

        assert client.get(f"/api/v1/decks/{deck['id']}").status_code == 404
        assert client.get(f"/api/v1/cards/{card['id']}").status_code == 404
        cards = client.get(f"/api/v1/decks/{deck['id']}/cards")
        assert cards.status_code == status.HTTP_200_OK
        assert cards.json()["cards"] == []
