"""
Domain layer.

The domain layer holds the card and user model. It has no dependencies on
external frameworks or infrastructure.

This layer contains:
- Entities: Card and User, defined by identity
- Value Objects: ids and card content, defined by attributes
- Domain Services: stateless operations such as shuffling a card sequence
"""
