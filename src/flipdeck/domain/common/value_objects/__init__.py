"""Common value objects shared across all domain modules."""

from .ids import CardId, UserId

__all__ = ["CardId", "UserId"]
