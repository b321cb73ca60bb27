"""
Base class for Entities.

Entities have an identity that runs through time. Cards and users are both
identified by opaque string ids assigned outside this process (by the card
store and the authentication backend respectively).
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wraps a non-empty string so a CardId can never be passed where a
    UserId is expected.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationError(
                f"{self.__class__.__name__} must be a non-empty string",
                field="id",
                value=self.value,
            )

    def __str__(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType
