from .auth_provider import AuthProviderProtocol, UserChangedCallback

__all__ = ["AuthProviderProtocol", "UserChangedCallback"]
