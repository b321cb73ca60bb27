"""
Card entity for front/back review.
"""

from dataclasses import dataclass, replace

from flipdeck.domain.common.entity import Entity
from flipdeck.domain.common.exceptions import ValidationError
from flipdeck.domain.common.value_object import ValueObject
from flipdeck.domain.common.value_objects.ids import CardId


def _is_blank(text: str | None) -> bool:
    return not text or not text.strip()


@dataclass(frozen=True)
class CardContent(ValueObject):
    """
    Front/back text of a card, without an identity.

    This is the payload sent to the card store on create and update. It may
    be incomplete while a form draft is being edited; the store and the Card
    entity only ever accept complete content.
    """

    front: str
    back: str

    def is_complete(self) -> bool:
        """Both faces carry non-blank text."""
        return not _is_blank(self.front) and not _is_blank(self.back)


@dataclass(frozen=True)
class Card(Entity[CardId]):
    """
    A front/back text pair with a store-assigned identifier.

    Business Rules:
    - Front and back cannot be empty
    - The id never changes; revising a card yields a new Card with the same id
    """

    id: CardId
    front: str
    back: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if _is_blank(self.front):
            raise ValidationError("Front cannot be empty", field="front", value=self.front)
        if _is_blank(self.back):
            raise ValidationError("Back cannot be empty", field="back", value=self.back)

    @property
    def content(self) -> CardContent:
        return CardContent(front=self.front, back=self.back)

    def revise(self, content: CardContent) -> "Card":
        """
        Return this card with new text.

        Args:
            content: New front/back text

        Raises:
            ValidationError: If either face is empty
        """
        return replace(self, front=content.front, back=content.back)

    @classmethod
    def create_with_id(cls, id: str, front: str, back: str) -> "Card":
        """Reconstitute a card from the store."""
        return cls(id=CardId(id), front=front, back=back)
