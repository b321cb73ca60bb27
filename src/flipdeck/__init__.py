"""flipdeck: personal flashcard review with a remote per-user card store."""

__version__ = "0.1.0"
