from .card_collection_controller import CardCollectionController
from .session_state import ControllerError, FlipMap, FormState, SessionSnapshot

__all__ = [
    "CardCollectionController",
    "ControllerError",
    "FlipMap",
    "FormState",
    "SessionSnapshot",
]
