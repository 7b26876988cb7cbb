from .identity_provider import IdentityProviderProtocol

__all__ = ["IdentityProviderProtocol"]
