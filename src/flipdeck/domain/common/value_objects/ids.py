from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier, assigned by the card store."""

    value: str


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier, assigned by the authentication backend."""

    value: str
