"""Protocol for resolving bearer credentials to identities."""

from typing import Protocol

from memoize.domain.identity.entities.identity import Identity


class IdentityProviderProtocol(Protocol):
    async def me(self, token: str) -> Identity:
        """
        Resolve a bearer credential to the caller's identity.

        Raises:
            InvalidCredentialsError: If the credential is rejected or cannot be verified
        """
        ...
