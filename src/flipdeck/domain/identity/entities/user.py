"""User entity for the signed-in identity."""

from dataclasses import dataclass

from flipdeck.domain.common.entity import Entity
from flipdeck.domain.common.value_objects.ids import UserId


@dataclass(frozen=True)
class User(Entity[UserId]):
    """
    Identity reported by the authentication provider.

    Business Rules:
    - A user always has an id; email and display name are optional
    - The card collection of a session is scoped to this id
    """

    id: UserId
    email: str | None = None
    display_name: str | None = None

    @property
    def label(self) -> str:
        """Human readable name: display name, then email, then the raw id."""
        return self.display_name or self.email or str(self.id)

    @classmethod
    def create(
        cls, user_id: str, email: str | None = None, display_name: str | None = None
    ) -> "User":
        return cls(id=UserId(user_id), email=email, display_name=display_name)
