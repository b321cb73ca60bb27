from .card_schemas import CardRecord, CardsListResponse, CardWriteRequest

__all__ = ["CardRecord", "CardWriteRequest", "CardsListResponse"]
