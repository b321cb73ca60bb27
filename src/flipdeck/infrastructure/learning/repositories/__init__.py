from .http_card_store import HttpCardStore
from .in_memory_card_store import InMemoryCardStore

__all__ = ["HttpCardStore", "InMemoryCardStore"]
