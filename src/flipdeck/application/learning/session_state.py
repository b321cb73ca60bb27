"""
Session state of the card collection controller.

The mutable ``SessionState`` is private to the controller. Views only ever
receive a ``SessionSnapshot``, an immutable copy taken after each intent.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal

from flipdeck.domain.common.value_objects.ids import CardId
from flipdeck.domain.identity.entities.user import User
from flipdeck.domain.learning.entities.card import Card, CardContent

SessionPhase = Literal["signed_out", "loading", "ready"]
ReviewMode = Literal["signed_out", "loading", "browsing", "grid_review"]
ErrorKind = Literal["authentication", "store"]


@dataclass(frozen=True)
class ControllerError:
    """A failure reported through the controller's error channel."""

    kind: ErrorKind
    operation: str
    message: str


class FlipMap(Mapping[CardId, bool]):
    """
    Per-card flip flags for grid review.

    A card without an entry is not flipped. Entries are independent: toggling
    one card never touches another.
    """

    DEFAULT = False

    def __init__(self, entries: Mapping[CardId, bool] | None = None) -> None:
        self._entries: dict[CardId, bool] = dict(entries or {})

    def __getitem__(self, card_id: CardId) -> bool:
        return self._entries.get(card_id, self.DEFAULT)

    def __iter__(self) -> Iterator[CardId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._entries

    def is_flipped(self, card_id: CardId) -> bool:
        return self[card_id]

    def toggle(self, card_id: CardId) -> bool:
        """Flip one card and return its new flag."""
        flipped = not self[card_id]
        self._entries[card_id] = flipped
        return flipped

    def discard(self, card_id: CardId) -> None:
        self._entries.pop(card_id, None)

    def copy(self) -> "FlipMap":
        return FlipMap(self._entries)

    def __repr__(self) -> str:
        return f"FlipMap({self._entries!r})"


@dataclass(frozen=True)
class FormState:
    """
    The add/edit form.

    ``editing`` means the draft belongs to the card ``card_id``, which stays the
    current card while the form is open.
    """

    open: bool = False
    editing: bool = False
    draft_front: str = ""
    draft_back: str = ""
    card_id: CardId | None = None

    @property
    def draft(self) -> CardContent:
        return CardContent(front=self.draft_front, back=self.draft_back)

    @classmethod
    def for_add(cls) -> "FormState":
        return cls(open=True, editing=False)

    @classmethod
    def for_edit(cls, card: Card) -> "FormState":
        return cls(
            open=True,
            editing=True,
            draft_front=card.front,
            draft_back=card.back,
            card_id=card.id,
        )

    @classmethod
    def closed(cls) -> "FormState":
        return cls()


@dataclass
class SessionState:
    """Everything the controller holds about the current review session."""

    cards: list[Card] = field(default_factory=list)
    current_index: int = 0
    flipped: bool = False
    show_all: bool = False
    flipped_map: FlipMap = field(default_factory=FlipMap)
    form: FormState = field(default_factory=FormState)
    current_user: User | None = None
    phase: SessionPhase = "signed_out"
    pending_operation: str | None = None
    last_error: ControllerError | None = None

    @property
    def current_card(self) -> Card | None:
        if not self.cards:
            return None
        return self.cards[self.current_index]

    def reset_session(self) -> None:
        """Drop every card-scoped value, keeping only the display mode."""
        self.cards = []
        self.current_index = 0
        self.flipped = False
        self.flipped_map = FlipMap()
        self.form = FormState.closed()

    def snapshot(self) -> "SessionSnapshot":
        return SessionSnapshot(
            cards=tuple(self.cards),
            current_index=self.current_index,
            flipped=self.flipped,
            show_all=self.show_all,
            flipped_map=self.flipped_map.copy(),
            form=self.form,
            current_user=self.current_user,
            phase=self.phase,
            pending_operation=self.pending_operation,
            last_error=self.last_error,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session handed to the presentation layer."""

    cards: tuple[Card, ...]
    current_index: int
    flipped: bool
    show_all: bool
    flipped_map: FlipMap
    form: FormState
    current_user: User | None
    phase: SessionPhase
    pending_operation: str | None
    last_error: ControllerError | None

    @property
    def mode(self) -> ReviewMode:
        if self.phase == "signed_out":
            return "signed_out"
        if self.phase == "loading":
            return "loading"
        return "grid_review" if self.show_all else "browsing"

    @property
    def signed_in(self) -> bool:
        return self.current_user is not None

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def busy(self) -> bool:
        """A remote mutation is in flight; mutating affordances should be disabled."""
        return self.pending_operation is not None

    @property
    def current_card(self) -> Card | None:
        if not self.cards:
            return None
        return self.cards[self.current_index]

    @property
    def current_face(self) -> str | None:
        """Text shown in single-card review: the back when flipped, else the front."""
        card = self.current_card
        if card is None:
            return None
        return card.back if self.flipped else card.front

    def face_for(self, card_id: CardId) -> str | None:
        """Text shown for one card in grid review."""
        for card in self.cards:
            if card.id == card_id:
                return card.back if self.flipped_map[card_id] else card.front
        return None
