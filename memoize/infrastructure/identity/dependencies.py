"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from memoize.application.identity.protocols.identity_provider import IdentityProviderProtocol
from memoize.core import container
from memoize.domain.identity.entities.identity import Identity
from memoize.domain.identity.exceptions import InvalidCredentialsError
from memoize.exceptions import CredentialsException

bearer_scheme = HTTPBearer(auto_error=False)


def get_identity_provider() -> IdentityProviderProtocol:
    """Get the configured identity provider."""
    return container.identity_provider()


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    provider: Annotated[IdentityProviderProtocol, Depends(get_identity_provider)],
) -> Identity:
    """
    Get the identity of the caller from the bearer credential.

    Args:
        credentials: Bearer credential from the Authorization header
        provider: Identity provider resolving the credential

    Returns:
        Identity domain entity

    Raises:
        CredentialsException: If the header is missing or the credential is rejected
    """
    if credentials is None or not credentials.credentials:
        raise CredentialsException

    try:
        return await provider.me(credentials.credentials)
    except InvalidCredentialsError:
        raise CredentialsException from None


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
