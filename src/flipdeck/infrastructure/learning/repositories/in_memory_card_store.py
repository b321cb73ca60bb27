"""In-process card store keyed by user."""

from uuid import uuid4

from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.exceptions import StoreUnavailableError


class InMemoryCardStore:
    """
    Dict-backed card store.

    Set ``available`` to False to make every call fail with
    StoreUnavailableError, as a network outage would.
    """

    def __init__(self) -> None:
        self._collections: dict[UserId, dict[CardId, Card]] = {}
        self.available = True

    def seed(self, user_id: UserId, cards: list[Card]) -> None:
        collection = self._collections.setdefault(user_id, {})
        for card in cards:
            collection[card.id] = card

    def _collection(self, operation: str, user_id: UserId) -> dict[CardId, Card]:
        if not self.available:
            raise StoreUnavailableError(operation)
        return self._collections.setdefault(user_id, {})

    async def list_cards(self, user_id: UserId) -> list[Card]:
        return list(self._collection("list_cards", user_id).values())

    async def create_card(self, user_id: UserId, content: CardContent) -> Card:
        collection = self._collection("create_card", user_id)
        card = Card(id=CardId(uuid4().hex), front=content.front, back=content.back)
        collection[card.id] = card
        return card

    async def update_card(self, user_id: UserId, card_id: CardId, content: CardContent) -> None:
        collection = self._collection("update_card", user_id)
        if card_id not in collection:
            raise StoreUnavailableError("update_card", f"Card with id {card_id} not found")
        collection[card_id] = collection[card_id].revise(content)

    async def delete_card(self, user_id: UserId, card_id: CardId) -> None:
        collection = self._collection("delete_card", user_id)
        if collection.pop(card_id, None) is None:
            raise StoreUnavailableError("delete_card", f"Card with id {card_id} not found")
