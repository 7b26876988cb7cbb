"""Random record identifiers."""

import base64
import secrets

# 80 bits encode to exactly 16 base-32 characters, without padding.
ID_BYTES = 10


class RandomIdGenerator:
    """
    Generates opaque, URL-safe, non-sequential ids.

    Ids are 16 characters drawn from a-z and 2-7.
    """

    def new_id(self) -> str:
        return base64.b32encode(secrets.token_bytes(ID_BYTES)).decode("ascii").lower()
