"""Conversions between API schemas and domain values."""

from typing import Any

from memoize.application.study.dtos import SCHEDULE_FIELDS
from memoize.domain.common.timestamps import from_millis
from memoize.domain.study.entities.card import Card as CardEntity
from memoize.domain.study.entities.deck import Deck as DeckEntity
from memoize.infrastructure.study.mappers import CardMapper, DeckMapper
from memoize.infrastructure.study.schemas.card_schemas import Card, CardScheduleFields
from memoize.infrastructure.study.schemas.deck_schemas import Deck, DeckWithCount

TIMESTAMP_FIELDS = ("due", "last_review")
# Fields where an explicit null is a value rather than "leave unchanged"
NULLABLE_FIELDS = frozenset({"last_review"})


def deck_to_schema(deck: DeckEntity) -> Deck:
    return Deck(**DeckMapper().to_record(deck))


def deck_with_count_to_schema(deck: DeckEntity, card_count: int) -> DeckWithCount:
    return DeckWithCount(**DeckMapper().to_record(deck), card_count=card_count)


def card_to_schema(card: CardEntity) -> Card:
    return Card(**CardMapper().to_record(card))


def supplied_fields(request: CardScheduleFields, names: frozenset[str]) -> dict[str, Any]:
    """
    Collect the fields the client actually sent, among ``names``.

    Explicit nulls are dropped except for nullable fields. Timestamps are
    converted from Unix milliseconds to datetimes.
    """
    sent = request.model_dump(include=set(names), exclude_unset=True)
    fields = {
        name: value
        for name, value in sent.items()
        if value is not None or name in NULLABLE_FIELDS
    }
    for name in TIMESTAMP_FIELDS:
        if fields.get(name) is not None:
            fields[name] = from_millis(fields[name])
    return fields


def schedule_fields(request: CardScheduleFields) -> dict[str, Any]:
    return supplied_fields(request, SCHEDULE_FIELDS)
