"""Protocol for the remote per-user card store."""

from typing import Protocol

from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.learning.entities.card import Card, CardContent


class CardStoreProtocol(Protocol):
    """Protocol for card store operations, all scoped to one user's collection.

    Every method raises StoreUnavailableError on network or permission failure.
    """

    async def list_cards(self, user_id: UserId) -> list[Card]:
        """
        Get all cards of a user.

        Args:
            user_id: Owner of the collection

        Returns:
            Cards in the store's order
        """
        ...

    async def create_card(self, user_id: UserId, content: CardContent) -> Card:
        """
        Create a card.

        Args:
            user_id: Owner of the collection
            content: Front/back text

        Returns:
            The created card with its store-assigned id
        """
        ...

    async def update_card(self, user_id: UserId, card_id: CardId, content: CardContent) -> None:
        """
        Replace the text of an existing card.

        Args:
            user_id: Owner of the collection
            card_id: The card to update
            content: New front/back text
        """
        ...

    async def delete_card(self, user_id: UserId, card_id: CardId) -> None:
        """
        Delete a card.

        Args:
            user_id: Owner of the collection
            card_id: The card to delete
        """
        ...
