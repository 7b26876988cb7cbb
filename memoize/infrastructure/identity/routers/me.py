"""API route describing the authenticated caller."""

from fastapi import APIRouter, status

from memoize.infrastructure.identity.dependencies import CurrentIdentity
from memoize.infrastructure.identity.schemas import IdentityResponse

router = APIRouter(tags=["identity"])


@router.get("/me", response_model=IdentityResponse, status_code=status.HTTP_200_OK)
async def get_me(identity: CurrentIdentity) -> IdentityResponse:
    """Return the identity resolved from the bearer credential."""
    return IdentityResponse(
        owner_id=identity.owner_id.value,
        email=identity.email,
        name=identity.name,
        avatar_url=identity.avatar_url,
    )
