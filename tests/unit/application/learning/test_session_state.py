"""Tests for session state and snapshots."""

from flipdeck.application.learning.session_state import FlipMap, FormState, SessionState
from flipdeck.domain.common.value_objects.ids import CardId
from flipdeck.domain.identity.entities.user import User
from flipdeck.domain.learning.entities.card import Card


def _cards() -> list[Card]:
    return [
        Card.create_with_id(id="1", front="Hola", back="Hello"),
        Card.create_with_id(id="2", front="Adios", back="Goodbye"),
    ]


class TestFlipMap:
    def test_missing_entry_defaults_to_false(self) -> None:
        flip_map = FlipMap()
        assert flip_map[CardId("1")] is False
        assert CardId("1") not in flip_map
        assert len(flip_map) == 0

    def test_toggle_is_independent_per_card(self) -> None:
        flip_map = FlipMap()

        assert flip_map.toggle(CardId("1")) is True

        assert flip_map.is_flipped(CardId("1")) is True
        assert flip_map.is_flipped(CardId("2")) is False

    def test_explicit_false_is_distinguishable_from_missing(self) -> None:
        flip_map = FlipMap()
        flip_map.toggle(CardId("1"))
        flip_map.toggle(CardId("1"))

        assert flip_map[CardId("1")] is False
        assert CardId("1") in flip_map

    def test_copy_is_detached(self) -> None:
        flip_map = FlipMap()
        copy = flip_map.copy()
        flip_map.toggle(CardId("1"))
        assert copy[CardId("1")] is False


class TestSessionState:
    def test_reset_session_keeps_display_mode(self) -> None:
        state = SessionState(cards=_cards(), current_index=1, flipped=True, show_all=True)
        state.form = FormState.for_edit(state.cards[1])

        state.reset_session()

        assert state.cards == []
        assert state.current_index == 0
        assert state.flipped is False
        assert state.form == FormState.closed()
        assert state.show_all is True

    def test_edit_form_remembers_its_card(self) -> None:
        card = _cards()[1]

        form = FormState.for_edit(card)

        assert form.card_id == card.id
        assert (form.draft_front, form.draft_back) == (card.front, card.back)
        assert FormState.for_add().card_id is None


class TestSessionSnapshot:
    def test_mode(self) -> None:
        state = SessionState()
        assert state.snapshot().mode == "signed_out"

        state.phase = "loading"
        assert state.snapshot().mode == "loading"

        state.phase = "ready"
        assert state.snapshot().mode == "browsing"

        state.show_all = True
        assert state.snapshot().mode == "grid_review"

    def test_current_face_follows_flip(self) -> None:
        state = SessionState(cards=_cards(), phase="ready")
        assert state.snapshot().current_face == "Hola"

        state.flipped = True
        assert state.snapshot().current_face == "Hello"

    def test_empty_snapshot(self) -> None:
        snapshot = SessionState(phase="ready").snapshot()
        assert snapshot.is_empty
        assert snapshot.current_card is None
        assert snapshot.current_face is None

    def test_snapshot_is_detached_from_state(self) -> None:
        state = SessionState(cards=_cards(), phase="ready")
        snapshot = state.snapshot()

        state.cards.append(Card.create_with_id(id="3", front="Ciao", back="Bye"))
        state.flipped_map.toggle(CardId("1"))

        assert len(snapshot.cards) == 2
        assert snapshot.flipped_map[CardId("1")] is False

    def test_face_for_unknown_card(self) -> None:
        snapshot = SessionState(cards=_cards(), phase="ready").snapshot()
        assert snapshot.face_for(CardId("99")) is None

    def test_signed_in_and_busy(self) -> None:
        state = SessionState(current_user=User.create("u1"), pending_operation="create_card")
        snapshot = state.snapshot()
        assert snapshot.signed_in is True
        assert snapshot.busy is True
