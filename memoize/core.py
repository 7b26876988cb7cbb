from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from memoize.application.storage.services.index_maintainer import IndexMaintainer
from memoize.application.study.services.card_service import CardService
from memoize.application.study.services.deck_deletion_cascade import DeckDeletionCascade
from memoize.application.study.services.deck_service import DeckService
from memoize.config import Settings
from memoize.domain.common.timestamps import utcnow
from memoize.infrastructure.common.id_generator import RandomIdGenerator
from memoize.infrastructure.identity.google_identity_provider import GoogleIdentityProvider
from memoize.infrastructure.storage.memory_record_store import (
    InMemoryBackend,
    InMemoryRecordStore,
)
from memoize.infrastructure.storage.sql_record_store import SqlRecordStore
from memoize.infrastructure.study.repositories import CardRepository, DeckRepository

DECKS_NAMESPACE = "decks"
CARDS_NAMESPACE = "cards"
OWNER_INDEX_NAME = "user_decks"
DECK_INDEX_NAME = "deck_cards"


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    clock = providers.Object(utcnow)
    id_generator = providers.Singleton(RandomIdGenerator)
    memory_backend = providers.Singleton(InMemoryBackend)

    # Record stores, one per namespace
    deck_store = providers.Selector(
        config.record_store_backend,
        sql=providers.Factory(SqlRecordStore, db=db, namespace=DECKS_NAMESPACE),
        memory=providers.Factory(
            InMemoryRecordStore, backend=memory_backend, namespace=DECKS_NAMESPACE
        ),
    )
    card_store = providers.Selector(
        config.record_store_backend,
        sql=providers.Factory(SqlRecordStore, db=db, namespace=CARDS_NAMESPACE),
        memory=providers.Factory(
            InMemoryRecordStore, backend=memory_backend, namespace=CARDS_NAMESPACE
        ),
    )

    # Indexes live in the same namespace as the records they point to
    owner_index = providers.Factory(IndexMaintainer, store=deck_store, name=OWNER_INDEX_NAME)
    deck_index = providers.Factory(IndexMaintainer, store=card_store, name=DECK_INDEX_NAME)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, store=deck_store)
    card_repository = providers.Factory(CardRepository, store=card_store)

    # Study services
    card_service = providers.Factory(
        CardService,
        card_repository=card_repository,
        deck_repository=deck_repository,
        deck_index=deck_index,
        id_generator=id_generator,
        clock=clock,
    )

    deck_deletion_cascade = providers.Factory(
        DeckDeletionCascade,
        card_service=card_service,
    )

    deck_service = providers.Factory(
        DeckService,
        deck_repository=deck_repository,
        owner_index=owner_index,
        id_generator=id_generator,
        deletion_cascade=deck_deletion_cascade,
        clock=clock,
    )

    # Identity
    identity_provider = providers.Singleton(
        GoogleIdentityProvider,
        userinfo_url=config.google_userinfo_url,
        timeout=config.identity_timeout_seconds,
    )


def configure_container(settings: Settings) -> None:
    """Load the settings the container's providers read."""
    container.config.from_dict(
        {
            "record_store_backend": settings.RECORD_STORE_BACKEND,
            "google_userinfo_url": settings.GOOGLE_USERINFO_URL,
            "identity_timeout_seconds": settings.IDENTITY_TIMEOUT_SECONDS,
        }
    )


# Initialize container
container = Container()
