import pytest

from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.exceptions import StoreUnavailableError
from flipdeck.infrastructure.learning.repositories.in_memory_card_store import InMemoryCardStore


class TestInMemoryCardStore:
    @pytest.mark.asyncio
    async def test_collections_are_per_user(self) -> None:
        store = InMemoryCardStore()
        card = await store.create_card(UserId("a"), CardContent(front="Hola", back="Hello"))

        assert await store.list_cards(UserId("a")) == [card]
        assert await store.list_cards(UserId("b")) == []

    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self) -> None:
        store = InMemoryCardStore()
        content = CardContent(front="Hola", back="Hello")

        first = await store.create_card(UserId("a"), content)
        second = await store.create_card(UserId("a"), content)

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_update_and_delete(self) -> None:
        store = InMemoryCardStore()
        store.seed(UserId("a"), [Card.create_with_id(id="1", front="Hola", back="Hello")])

        await store.update_card(UserId("a"), CardId("1"), CardContent(front="Hola", back="Hi"))
        assert (await store.list_cards(UserId("a")))[0].back == "Hi"

        await store.delete_card(UserId("a"), CardId("1"))
        assert await store.list_cards(UserId("a")) == []

    @pytest.mark.asyncio
    async def test_missing_card_raises(self) -> None:
        store = InMemoryCardStore()
        with pytest.raises(StoreUnavailableError, match="not found"):
            await store.delete_card(UserId("a"), CardId("1"))

    @pytest.mark.asyncio
    async def test_unavailable_store_raises(self) -> None:
        store = InMemoryCardStore()
        store.available = False
        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.list_cards(UserId("a"))
        assert exc_info.value.operation == "list_cards"
