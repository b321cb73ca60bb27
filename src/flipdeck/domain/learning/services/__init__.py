from .card_shuffler import CardShuffler

__all__ = ["CardShuffler"]
