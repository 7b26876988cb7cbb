"""Identity domain layer."""

from memoize.domain.identity.entities.identity import Identity
from memoize.domain.identity.exceptions import InvalidCredentialsError

__all__ = [
    "Identity",
    "InvalidCredentialsError",
]
