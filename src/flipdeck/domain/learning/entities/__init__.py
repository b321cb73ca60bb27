from .card import Card, CardContent

__all__ = ["Card", "CardContent"]
