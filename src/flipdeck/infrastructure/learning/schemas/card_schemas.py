"""Pydantic schemas for the card store API."""

from pydantic import BaseModel, Field, field_validator


class CardBase(BaseModel):
    """Base schema for Card."""

    front: str = Field(..., min_length=1, description="Front text of the card")
    back: str = Field(..., min_length=1, description="Back text of the card")


class CardWriteRequest(CardBase):
    """Schema for creating or updating a card."""


class CardRecord(CardBase):
    """Schema for a stored card."""

    id: str = Field(..., min_length=1, description="Store-assigned card id")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        """Accept numeric ids from the backend."""
        if isinstance(value, int):
            return str(value)
        return value


class CardsListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[CardRecord] = Field(default_factory=list, description="List of cards")
