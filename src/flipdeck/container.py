"""Wiring of concrete collaborators into a card collection controller."""

import httpx

from flipdeck.application.learning.card_collection_controller import (
    CardCollectionController,
    ErrorCallback,
)
from flipdeck.config import Settings, configure_logging, get_settings
from flipdeck.domain.identity.entities.user import User
from flipdeck.infrastructure.identity.auth_provider import HttpAuthProvider, LocalAuthProvider
from flipdeck.infrastructure.learning.repositories.http_card_store import HttpCardStore
from flipdeck.infrastructure.learning.repositories.in_memory_card_store import InMemoryCardStore


def create_controller(
    settings: Settings | None = None,
    on_error: ErrorCallback | None = None,
) -> tuple[CardCollectionController, httpx.AsyncClient]:
    """
    Create a controller talking to the configured backend.

    The caller owns the returned client and must close it with ``aclose()``.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    client = httpx.AsyncClient(base_url=settings.API_URL, timeout=settings.REQUEST_TIMEOUT)
    auth_provider = HttpAuthProvider(client, settings.EMAIL, settings.PASSWORD)
    card_store = HttpCardStore(client, lambda: auth_provider.access_token)
    controller = CardCollectionController(auth_provider, card_store, on_error=on_error)
    return controller, client


def create_local_controller(
    user: User,
    card_store: InMemoryCardStore | None = None,
    on_error: ErrorCallback | None = None,
) -> CardCollectionController:
    """Create a controller for a fixed user backed by an in-memory store."""
    return CardCollectionController(
        LocalAuthProvider(user),
        card_store or InMemoryCardStore(),
        on_error=on_error,
    )
