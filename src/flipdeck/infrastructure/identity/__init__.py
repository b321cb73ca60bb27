from .auth_provider import HttpAuthProvider, LocalAuthProvider, ObservableAuthProvider

__all__ = ["HttpAuthProvider", "LocalAuthProvider", "ObservableAuthProvider"]
