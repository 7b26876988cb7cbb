"""Pytest configuration and fixtures."""

import os

# Must be set before the application reads its settings
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["RECORD_STORE_BACKEND"] = "sql"

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from memoize import models  # noqa: E402, F401
from memoize.application.storage.services import IndexMaintainer  # noqa: E402
from memoize.application.study.services import (  # noqa: E402
    CardService,
    DeckDeletionCascade,
    DeckService,
)
from memoize.core import container  # noqa: E402
from memoize.database import Base, get_db  # noqa: E402
from memoize.domain.common.value_objects import OwnerId  # noqa: E402
from memoize.domain.identity.entities.identity import Identity  # noqa: E402
from memoize.domain.identity.exceptions import InvalidCredentialsError  # noqa: E402
from memoize.infrastructure.identity.dependencies import get_identity_provider  # noqa: E402
from memoize.infrastructure.storage import InMemoryBackend, InMemoryRecordStore  # noqa: E402
from memoize.infrastructure.study.repositories import (  # noqa: E402
    CardRepository,
    DeckRepository,
)
from memoize.main import app  # noqa: E402

# Test database URL (in-memory SQLite shared by every connection)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

START_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    """Clock that advances one second on every reading."""

    def __init__(
        self, start: datetime = START_TIME, step: timedelta = timedelta(seconds=1)
    ) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


class SequentialIdGenerator:
    """Predictable ids: id0001, id0002, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.count = 0

    def new_id(self) -> str:
        self.count += 1
        return f"{self.prefix}{self.count:04d}"


class StaticIdentityProvider:
    """Resolves tokens of the form ``token-<owner>`` to that owner."""

    async def me(self, token: str) -> Identity:
        if not token.startswith("token-"):
            raise InvalidCredentialsError
        owner = token.removeprefix("token-")
        return Identity(owner_id=OwnerId(owner), email=f"{owner}@example.com", name=owner)


def auth_headers(owner: str) -> dict[str, str]:
    return {"Authorization": f"Bearer token-{owner}"}


@pytest.fixture
def other_owner_headers() -> dict[str, str]:
    """Headers authenticating as owner u2."""
    return auth_headers("u2")


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as owner u1."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_provider] = StaticIdentityProvider
    container.clock.override(providers.Object(FakeClock()))

    with TestClient(app, headers=auth_headers("u1")) as test_client:
        yield test_client

    container.clock.reset_override()
    app.dependency_overrides.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def memory_backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def deck_store(memory_backend: InMemoryBackend) -> InMemoryRecordStore:
    return InMemoryRecordStore(memory_backend, "decks")


@pytest.fixture
def card_store(memory_backend: InMemoryBackend) -> InMemoryRecordStore:
    return InMemoryRecordStore(memory_backend, "cards")


@pytest.fixture
def owner_index(deck_store: InMemoryRecordStore) -> IndexMaintainer:
    return IndexMaintainer(deck_store, "user_decks")


@pytest.fixture
def deck_index(card_store: InMemoryRecordStore) -> IndexMaintainer:
    return IndexMaintainer(card_store, "deck_cards")


@pytest.fixture
def deck_repository(deck_store: InMemoryRecordStore) -> DeckRepository:
    return DeckRepository(deck_store)


@pytest.fixture
def card_repository(card_store: InMemoryRecordStore) -> CardRepository:
    return CardRepository(card_store)


@pytest.fixture
def card_service(
    card_repository: CardRepository,
    deck_repository: DeckRepository,
    deck_index: IndexMaintainer,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> CardService:
    return CardService(
        card_repository=card_repository,
        deck_repository=deck_repository,
        deck_index=deck_index,
        id_generator=id_generator,
        clock=clock,
    )


@pytest.fixture
def deck_service(
    deck_repository: DeckRepository,
    owner_index: IndexMaintainer,
    id_generator: SequentialIdGenerator,
    card_service: CardService,
    clock: FakeClock,
) -> DeckService:
    return DeckService(
        deck_repository=deck_repository,
        owner_index=owner_index,
        id_generator=id_generator,
        deletion_cascade=DeckDeletionCascade(card_service),
        clock=clock,
    )
