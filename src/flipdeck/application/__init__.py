"""
Application layer.

Holds the card collection controller and the protocols of the collaborators
it drives. Concrete collaborators live in the infrastructure layer.
"""
