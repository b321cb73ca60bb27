"""Protocol for the authentication provider."""

from collections.abc import Callable
from typing import Protocol

from flipdeck.domain.identity.entities.user import User

UserChangedCallback = Callable[[User | None], None]


class AuthProviderProtocol(Protocol):
    """Identity source: sign-in, sign-out and current-user notifications."""

    def on_user_changed(self, callback: UserChangedCallback) -> Callable[[], None]:
        """
        Register a current-user listener.

        The callback fires once at registration with the current user (or
        None when signed out), then on every sign-in and sign-out.

        Returns:
            A function that removes the listener
        """
        ...

    async def sign_in(self) -> None:
        """
        Sign the user in.

        Raises:
            AuthenticationError: If the user cancels or the provider is unreachable
        """
        ...

    async def sign_out(self) -> None:
        """
        Sign the current user out.

        Raises:
            AuthenticationError: If the provider is unreachable
        """
        ...
