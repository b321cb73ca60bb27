"""Mapper for Card schema <-> Domain conversion."""

from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.infrastructure.learning.schemas.card_schemas import CardRecord, CardWriteRequest


class CardMapper:
    """Mapper for Card schema <-> Domain conversion."""

    def to_domain(self, record: CardRecord) -> Card:
        """Convert a stored record to a domain entity."""
        return Card.create_with_id(id=record.id, front=record.front, back=record.back)

    def to_request(self, content: CardContent) -> CardWriteRequest:
        """Convert card content to a write request body."""
        return CardWriteRequest(front=content.front, back=content.back)
