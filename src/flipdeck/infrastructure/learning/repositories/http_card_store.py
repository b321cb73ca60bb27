"""Card store backed by the per-user cards REST API."""

from collections.abc import Callable
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from flipdeck.domain.common.exceptions import DomainError
from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.exceptions import StoreUnavailableError
from flipdeck.infrastructure.learning.mappers.card_mapper import CardMapper
from flipdeck.infrastructure.learning.schemas.card_schemas import CardRecord, CardsListResponse

logger = structlog.get_logger(__name__)

TokenGetter = Callable[[], str | None]


class HttpCardStore:
    """
    HTTP implementation of the card store.

    Cards live under ``/api/v1/users/{user_id}/cards``. Every transport error,
    error status, or malformed response surfaces as StoreUnavailableError.
    """

    def __init__(self, client: httpx.AsyncClient, token_getter: TokenGetter) -> None:
        self._client = client
        self._token_getter = token_getter
        self.mapper = CardMapper()

    def _cards_path(self, user_id: UserId) -> str:
        return f"/api/v1/users/{user_id}/cards"

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an authenticated API request, translating failures."""
        token = self._token_getter()
        if not token:
            raise StoreUnavailableError(operation, "Not authenticated")

        headers = {"Authorization": f"Bearer {token}"}
        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("card_store_request_failed", operation=operation, error=str(e))
            raise StoreUnavailableError(operation, str(e)) from e
        return response

    async def list_cards(self, user_id: UserId) -> list[Card]:
        response = await self._request("list_cards", "GET", self._cards_path(user_id))
        try:
            payload = CardsListResponse.model_validate(response.json())
            return [self.mapper.to_domain(record) for record in payload.cards]
        except (ValueError, ValidationError, DomainError) as e:
            raise StoreUnavailableError("list_cards", f"Malformed response: {e}") from e

    async def create_card(self, user_id: UserId, content: CardContent) -> Card:
        body = self.mapper.to_request(content).model_dump()
        response = await self._request(
            "create_card", "POST", self._cards_path(user_id), json=body
        )
        try:
            record = CardRecord.model_validate(response.json())
            card = self.mapper.to_domain(record)
        except (ValueError, ValidationError, DomainError) as e:
            raise StoreUnavailableError("create_card", f"Malformed response: {e}") from e
        logger.debug("card_store_created", card_id=str(card.id))
        return card

    async def update_card(self, user_id: UserId, card_id: CardId, content: CardContent) -> None:
        body = self.mapper.to_request(content).model_dump()
        await self._request(
            "update_card", "PUT", f"{self._cards_path(user_id)}/{card_id}", json=body
        )

    async def delete_card(self, user_id: UserId, card_id: CardId) -> None:
        await self._request("delete_card", "DELETE", f"{self._cards_path(user_id)}/{card_id}")
