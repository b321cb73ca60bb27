"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from flipdeck.application.learning.card_collection_controller import CardCollectionController
from flipdeck.application.learning.session_state import ControllerError
from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.identity.entities.user import User
from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.infrastructure.identity.auth_provider import LocalAuthProvider
from flipdeck.infrastructure.learning.repositories.in_memory_card_store import InMemoryCardStore


class GatedCardStore(InMemoryCardStore):
    """In-memory store whose calls block until the gate is opened."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = asyncio.Event()
        self.gate.set()
        self.calls: list[str] = []

    def hold(self) -> None:
        self.gate.clear()

    def release(self) -> None:
        self.gate.set()

    async def list_cards(self, user_id: UserId) -> list[Card]:
        self.calls.append("list_cards")
        await self.gate.wait()
        return await super().list_cards(user_id)

    async def create_card(self, user_id: UserId, content: CardContent) -> Card:
        self.calls.append("create_card")
        await self.gate.wait()
        return await super().create_card(user_id, content)

    async def update_card(self, user_id: UserId, card_id: CardId, content: CardContent) -> None:
        self.calls.append("update_card")
        await self.gate.wait()
        await super().update_card(user_id, card_id, content)

    async def delete_card(self, user_id: UserId, card_id: CardId) -> None:
        self.calls.append("delete_card")
        await self.gate.wait()
        await super().delete_card(user_id, card_id)


def make_cards(*pairs: tuple[str, str]) -> list[Card]:
    return [
        Card.create_with_id(id=str(i), front=front, back=back)
        for i, (front, back) in enumerate(pairs, start=1)
    ]


@pytest.fixture
def user() -> User:
    return User.create("user-1", email="ana@example.com", display_name="Ana")


@pytest.fixture
def store() -> GatedCardStore:
    return GatedCardStore()


@pytest.fixture
def auth_provider(user: User) -> LocalAuthProvider:
    return LocalAuthProvider(user)


@pytest.fixture
def errors() -> list[ControllerError]:
    return []


@pytest.fixture
def controller(
    auth_provider: LocalAuthProvider,
    store: GatedCardStore,
    errors: list[ControllerError],
) -> CardCollectionController:
    return CardCollectionController(auth_provider, store, on_error=errors.append)


@pytest_asyncio.fixture
async def started(
    controller: CardCollectionController,
) -> AsyncGenerator[CardCollectionController, None]:
    """Controller subscribed to the provider, still signed out."""
    await controller.start()
    yield controller
    await controller.close()


@pytest_asyncio.fixture
async def signed_in(
    started: CardCollectionController,
    store: GatedCardStore,
    user: User,
) -> CardCollectionController:
    """Controller signed in with two cards loaded."""
    store.seed(user.id, make_cards(("Hola", "Hello"), ("Adios", "Goodbye")))
    await started.sign_in()
    return started
