"""Authentication providers publishing current-user changes."""

from collections.abc import Callable

import httpx
import structlog
from pydantic import ValidationError

from flipdeck.application.identity.protocols.auth_provider import UserChangedCallback
from flipdeck.domain.identity.entities.user import User
from flipdeck.exceptions import AuthenticationError
from flipdeck.infrastructure.identity.schemas import TokenResponse, UserDetailsResponse

logger = structlog.get_logger(__name__)


class ObservableAuthProvider:
    """Holds the current user and fans changes out to registered listeners."""

    def __init__(self) -> None:
        self._listeners: list[UserChangedCallback] = []
        self._current_user: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._current_user

    def on_user_changed(self, callback: UserChangedCallback) -> Callable[[], None]:
        """Register a listener; it is called immediately with the current user."""
        self._listeners.append(callback)
        callback(self._current_user)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _publish(self, user: User | None) -> None:
        self._current_user = user
        for listener in list(self._listeners):
            listener(user)


class LocalAuthProvider(ObservableAuthProvider):
    """Signs in a fixed user without any remote call. Used for local runs."""

    def __init__(self, user: User) -> None:
        super().__init__()
        self.user = user

    async def sign_in(self) -> None:
        self._publish(self.user)

    async def sign_out(self) -> None:
        self._publish(None)


class HttpAuthProvider(ObservableAuthProvider):
    """
    Email/password sign-in against the backend's JWT endpoints.

    The access token is kept in memory and exposed for the card store.
    """

    def __init__(self, client: httpx.AsyncClient, email: str, password: str) -> None:
        super().__init__()
        self._client = client
        self.email = email
        self.password = password
        self._access_token: str | None = None
        self._refresh_token: str | None = None

    @property
    def access_token(self) -> str | None:
        return self._access_token

    async def sign_in(self) -> None:
        """Log in, fetch the profile and publish the signed-in user."""
        try:
            response = await self._client.post(
                "/api/v1/auth/login",
                data={"username": self.email, "password": self.password},
            )
            response.raise_for_status()
            tokens = TokenResponse.model_validate(response.json())

            response = await self._client.get(
                "/api/v1/users/me",
                headers={"Authorization": f"Bearer {tokens.access_token}"},
            )
            response.raise_for_status()
            profile = UserDetailsResponse.model_validate(response.json())
        except (httpx.HTTPError, ValidationError) as e:
            logger.warning("sign_in_failed", email=self.email, error=str(e))
            raise AuthenticationError(f"Sign-in failed: {e}") from e

        self._access_token = tokens.access_token
        self._refresh_token = tokens.refresh_token
        user = User.create(profile.id, email=profile.email, display_name=profile.name)
        logger.info("signed_in", user_id=str(user.id))
        self._publish(user)

    async def sign_out(self) -> None:
        """Log out on the backend and forget the tokens."""
        try:
            response = await self._client.post("/api/v1/auth/logout")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("sign_out_failed", error=str(e))
            raise AuthenticationError(f"Sign-out failed: {e}") from e

        self._access_token = None
        self._refresh_token = None
        logger.info("signed_out")
        self._publish(None)
