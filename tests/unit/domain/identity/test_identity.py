import pytest

from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.value_objects import OwnerId
from memoize.domain.identity.entities.identity import Identity


def test_from_claims() -> None:
    """Test building an identity from userinfo claims."""
    identity = Identity.from_claims(
        {
            "sub": "1234567890",
            "email": "ada@example.com",
            "name": "Ada",
            "picture": "https://example.com/ada.png",
        }
    )

    assert identity.owner_id == OwnerId("1234567890")
    assert identity.email == "ada@example.com"
    assert identity.name == "Ada"
    assert identity.avatar_url == "https://example.com/ada.png"


def test_from_claims_profile_is_optional() -> None:
    identity = Identity.from_claims({"sub": "1234567890"})

    assert identity.owner_id == OwnerId("1234567890")
    assert identity.email is None
    assert identity.name is None
    assert identity.avatar_url is None


@pytest.mark.parametrize("claims", [{}, {"sub": ""}, {"sub": 42}])
def test_from_claims_requires_subject(claims: dict) -> None:
    with pytest.raises(ValidationError, match="no subject"):
        Identity.from_claims(claims)
