"""Identity of an authenticated caller."""

from dataclasses import dataclass

from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.value_objects import OwnerId


@dataclass(frozen=True)
class Identity:
    """
    Principal resolved from a bearer credential.

    Only owner_id takes part in authorization; the profile fields are
    informational and may be missing.
    """

    owner_id: OwnerId
    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None

    @classmethod
    def from_claims(cls, claims: dict[str, object]) -> "Identity":
        """
        Build an identity from OpenID Connect userinfo claims.

        Raises:
            ValidationError: If the subject claim is missing
        """
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise ValidationError("Userinfo response has no subject", field="sub")

        def optional(name: str) -> str | None:
            value = claims.get(name)
            return value if isinstance(value, str) else None

        return cls(
            owner_id=OwnerId(subject),
            email=optional("email"),
            name=optional("name"),
            avatar_url=optional("picture"),
        )
