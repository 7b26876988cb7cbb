from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from memoize.core import container
from memoize.database import DatabaseSession

T = TypeVar("T")


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides container.db with the request-scoped database session while
    the provider builds the object graph.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
