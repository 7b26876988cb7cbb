"""Identity provider backed by Google's OpenID Connect userinfo endpoint."""

import httpx
import structlog

from memoize.domain.common.exceptions import ValidationError
from memoize.domain.identity.entities.identity import Identity
from memoize.domain.identity.exceptions import InvalidCredentialsError

logger = structlog.get_logger(__name__)


class GoogleIdentityProvider:
    """
    Resolves Google OAuth access tokens to identities.

    The token is sent as a bearer credential to the userinfo endpoint; the
    returned ``sub`` claim becomes the owner id. Any transport error,
    non-200 response or malformed payload rejects the credential.
    """

    def __init__(
        self,
        userinfo_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.userinfo_url = userinfo_url
        self.timeout = timeout
        self.transport = transport

    async def me(self, token: str) -> Identity:
        """
        Resolve a bearer token to the caller's identity.

        Raises:
            InvalidCredentialsError: If Google rejects the token or cannot be reached
        """
        if not token:
            raise InvalidCredentialsError

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            logger.warning("identity_provider_unreachable", error=str(e))
            raise InvalidCredentialsError from e

        if response.status_code != httpx.codes.OK:
            logger.info("identity_rejected", status_code=response.status_code)
            raise InvalidCredentialsError

        try:
            claims = response.json()
        except ValueError as e:
            logger.warning("identity_payload_unreadable")
            raise InvalidCredentialsError from e
        if not isinstance(claims, dict):
            raise InvalidCredentialsError

        try:
            return Identity.from_claims(claims)
        except ValidationError as e:
            logger.warning("identity_payload_invalid", reason=e.message)
            raise InvalidCredentialsError from e
