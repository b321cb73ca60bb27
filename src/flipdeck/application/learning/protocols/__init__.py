from .card_store import CardStoreProtocol

__all__ = ["CardStoreProtocol"]
