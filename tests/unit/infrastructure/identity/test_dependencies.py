import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from memoize.domain.common.value_objects import OwnerId
from memoize.domain.identity.entities.identity import Identity
from memoize.domain.identity.exceptions import InvalidCredentialsError
from memoize.infrastructure.identity.dependencies import get_current_identity


class RejectingProvider:
    async def me(self, token: str) -> Identity:
        raise InvalidCredentialsError


class AcceptingProvider:
    async def me(self, token: str) -> Identity:
        return Identity(owner_id=OwnerId(token))


@pytest.mark.asyncio
async def test_missing_credentials_rejected() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await get_current_identity(None, AcceptingProvider())

    assert exc_info.value.status_code == 401
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


@pytest.mark.asyncio
async def test_rejected_credentials() -> None:
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="bad")

    with pytest.raises(HTTPException) as exc_info:
        await get_current_identity(credentials, RejectingProvider())

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_accepted_credentials() -> None:
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="u1")

    identity = await get_current_identity(credentials, AcceptingProvider())

    assert identity.owner_id == OwnerId("u1")
