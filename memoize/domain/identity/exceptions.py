"""Identity domain exceptions."""

from memoize.domain.common.exceptions import DomainError


class InvalidCredentialsError(DomainError):
    """Raised when the identity provider rejects or cannot verify a credential."""

    def __init__(self, reason: str = "Could not validate credentials") -> None:
        super().__init__(reason)
