from .identity_schemas import IdentityResponse

__all__ = ["IdentityResponse"]
