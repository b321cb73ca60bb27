"""Marker base class for Value Objects."""


class ValueObject:
    """
    Immutable object defined by its attributes rather than by identity.

    Subclasses are declared with ``@dataclass(frozen=True)``, which supplies
    attribute-wise equality and hashing, and validate in ``__post_init__``.
    """
