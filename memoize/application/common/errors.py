"""
Error descriptors carried by failed service results.

NOT_FOUND deliberately covers both a missing record and a record owned by
someone else, so callers cannot probe for other owners' ids.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import wraps
from typing import Any, TypeVar

import structlog

from memoize.application.storage.exceptions import StoreError

from .result import Failure

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

STORE_FAILURE_MESSAGE = "The record store could not complete the operation"


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    STORE_FAILURE = "store_failure"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class ServiceError:
    """A failed outcome: what went wrong and a caller-safe message."""

    kind: ErrorKind
    message: str

    @classmethod
    def not_found(cls, entity: str) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, f"{entity} not found")

    @classmethod
    def validation(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.VALIDATION_FAILED, message)

    @classmethod
    def store_failure(cls) -> "ServiceError":
        return cls(ErrorKind.STORE_FAILURE, STORE_FAILURE_MESSAGE)


def store_errors_as_failure(operation: str) -> Callable[[F], F]:
    """
    Decorator turning a StoreError raised by the wrapped service method
    into Failure(ServiceError.store_failure()).

    The store's own message is logged, never returned.

    Usage:
        @store_errors_as_failure("create_deck")
        def create(self, ...) -> Result[Deck, ServiceError]:
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            try:
                return func(*args, **kwargs)
            except StoreError:
                logger.exception("store_failure", operation=operation)
                return Failure(ServiceError.store_failure())

        return wrapper  # type: ignore[return-value]

    return decorator
