"""Controller owning a user's card collection and review session."""

import asyncio
from collections.abc import Callable
from dataclasses import replace

import structlog

from flipdeck.application.identity.protocols.auth_provider import AuthProviderProtocol
from flipdeck.application.learning.protocols.card_store import CardStoreProtocol
from flipdeck.application.learning.session_state import (
    ControllerError,
    ErrorKind,
    FlipMap,
    FormState,
    SessionSnapshot,
    SessionState,
)
from flipdeck.domain.common.value_objects.ids import CardId
from flipdeck.domain.identity.entities.user import User
from flipdeck.domain.learning.entities.card import Card, CardContent
from flipdeck.domain.learning.services.card_shuffler import CardShuffler
logger = structlog.get_logger(__name__)

ErrorCallback = Callable[[ControllerError], None]


class CardCollectionController:
    """
    Sole owner of the review session and single entry point for its mutations.

    Every intent either applies, is refused (returns False, state untouched),
    or reports a failure through ``last_error`` and the ``on_error`` callback.
    Failures raised by the collaborators never propagate out of an intent.

    Remote calls are non-optimistic: local state changes only after the store
    call resolves. One remote mutation may be in flight at a time, and results
    that resolve after the signed-in user changed are discarded.
    """

    def __init__(
        self,
        auth_provider: AuthProviderProtocol,
        card_store: CardStoreProtocol,
        *,
        shuffler: CardShuffler | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Initialize controller with its collaborators."""
        self.auth_provider = auth_provider
        self.card_store = card_store
        self.shuffler = shuffler or CardShuffler()
        self._on_error = on_error
        self._state = SessionState()
        self._generation = 0
        self._unsubscribe: Callable[[], None] | None = None
        self._tasks: set[asyncio.Task[bool]] = set()

    # --- Lifecycle ---

    async def start(self) -> None:
        """Subscribe to user changes and wait for the initial load."""
        if self._unsubscribe is None:
            self._unsubscribe = self.auth_provider.on_user_changed(self._on_user_changed)
        await self.wait_idle()

    async def close(self) -> None:
        """Unsubscribe from user changes and let pending loads finish."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self.wait_idle()

    async def wait_idle(self) -> None:
        """Wait until every load scheduled by a user change has completed."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    # --- Read access ---

    @property
    def state(self) -> SessionSnapshot:
        return self._state.snapshot()

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only copy of the session state."""
        return self._state.snapshot()

    def clear_error(self) -> None:
        self._state.last_error = None

    # --- Authentication ---

    async def sign_in(self) -> bool:
        """Sign in through the provider and wait for the resulting card load."""
        try:
            await self.auth_provider.sign_in()
        except Exception as e:
            self._report("authentication", "sign_in", e)
            return False
        await self.wait_idle()
        return True

    async def sign_out(self) -> bool:
        """Sign out through the provider; the user-change event clears the session."""
        try:
            await self.auth_provider.sign_out()
        except Exception as e:
            self._report("authentication", "sign_out", e)
            return False
        await self.wait_idle()
        return True

    def _on_user_changed(self, user: User | None) -> None:
        if self._apply_user(user):
            task = asyncio.get_running_loop().create_task(self._load_cards(self._generation))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def handle_user_changed(self, user: User | None) -> None:
        """Apply a user-change notification and wait for the card load it triggers."""
        self._on_user_changed(user)
        await self.wait_idle()

    def _apply_user(self, user: User | None) -> bool:
        """Start a new session generation. Returns True when cards must be loaded."""
        self._generation += 1
        state = self._state
        state.reset_session()
        state.pending_operation = None
        state.current_user = user
        if user is None:
            state.phase = "signed_out"
            logger.info("session_signed_out")
            return False
        state.phase = "loading"
        logger.info("session_signed_in", user_id=str(user.id))
        return True

    # --- Loading ---

    async def reload(self) -> bool:
        """Fetch the collection again for the signed-in user."""
        if self._state.current_user is None or self._state.phase != "ready":
            return self._refuse("reload", "not_ready")
        if self._begin("list_cards") is None:
            return False
        self._state.phase = "loading"
        return await self._load_cards(self._generation)

    async def _load_cards(self, generation: int) -> bool:
        user = self._state.current_user
        if user is None:
            return False
        try:
            cards = await self.card_store.list_cards(user.id)
        except Exception as e:
            if not self._finish(generation, "list_cards"):
                return False
            self._state.phase = "ready"
            self._report("store", "list_cards", e)
            return False
        if not self._finish(generation, "list_cards"):
            return False

        state = self._state
        state.cards = list(cards)
        state.current_index = 0
        state.flipped = False
        state.flipped_map = FlipMap()
        state.phase = "ready"
        logger.info("cards_loaded", user_id=str(user.id), count=len(cards))
        return True

    # --- Single-card review ---

    def flip(self) -> bool:
        """Show the other face of the current card."""
        if not self._browsing_with_cards("flip"):
            return False
        self._state.flipped = not self._state.flipped
        return True

    def next(self) -> bool:
        """Advance to the next card, wrapping at the end."""
        return self._move("next", 1)

    def prev(self) -> bool:
        """Go back to the previous card, wrapping at the start."""
        return self._move("prev", -1)

    def _move(self, operation: str, step: int) -> bool:
        if not self._browsing_with_cards(operation):
            return False
        state = self._state
        if state.form.editing:
            return self._refuse(operation, "editing")
        state.current_index = (state.current_index + step) % len(state.cards)
        state.flipped = False
        return True

    def shuffle(self) -> bool:
        """Reorder the cards uniformly at random. The order is never persisted."""
        state = self._state
        if state.phase != "ready" or not state.cards:
            return self._refuse("shuffle", "no_cards")
        if state.form.editing:
            return self._refuse("shuffle", "editing")
        state.cards = self.shuffler.shuffled(state.cards)
        state.current_index = 0
        state.flipped = False
        return True

    # --- Grid review ---

    def toggle_show_all(self) -> bool:
        """Switch between single-card review and grid review."""
        return self.set_show_all(not self._state.show_all)

    def set_show_all(self, show_all: bool) -> bool:
        state = self._state
        if state.current_user is None:
            return self._refuse("set_show_all", "signed_out")
        if state.show_all == show_all:
            return False
        if state.form.editing:
            return self._refuse("set_show_all", "editing")
        state.show_all = show_all
        state.flipped = False
        return True

    def toggle_flip(self, card_id: CardId | str) -> bool:
        """Flip one card in grid review without affecting the others."""
        state = self._state
        if state.phase != "ready" or not state.show_all:
            return self._refuse("toggle_flip", "not_grid_review")
        if isinstance(card_id, str):
            card_id = CardId(card_id)
        state.flipped_map.toggle(card_id)
        return True

    # --- Add/edit form ---

    def open_add_form(self) -> bool:
        if self._state.phase != "ready":
            return self._refuse("open_add_form", "not_ready")
        if self._state.pending_operation is not None:
            return self._refuse("open_add_form", "busy")
        self._state.form = FormState.for_add()
        return True

    def open_edit_form(self) -> bool:
        if not self._browsing_with_cards("open_edit_form"):
            return False
        state = self._state
        if state.pending_operation is not None:
            return self._refuse("open_edit_form", "busy")
        state.form = FormState.for_edit(state.cards[state.current_index])
        return True

    def update_draft(self, front: str | None = None, back: str | None = None) -> bool:
        """Change the draft text of the open form."""
        form = self._state.form
        if not form.open:
            return self._refuse("update_draft", "form_closed")
        self._state.form = replace(
            form,
            draft_front=form.draft_front if front is None else front,
            draft_back=form.draft_back if back is None else back,
        )
        return True

    def cancel_form(self) -> bool:
        if not self._state.form.open:
            return False
        self._state.form = FormState.closed()
        return True

    async def submit_form(self) -> bool:
        """
        Create or update a card from the form draft.

        Returns:
            True if the store accepted the change and it was applied locally
        """
        state = self._state
        form = state.form
        user = state.current_user
        if not form.open or user is None:
            return self._refuse("submit_form", "form_closed")
        draft = form.draft
        if not draft.is_complete():
            return self._refuse("submit_form", "incomplete_draft")
        if not form.editing:
            return await self._create_card(user, draft)

        index = self._index_of(form.card_id) if form.card_id is not None else None
        if index is None:
            return self._refuse("submit_form", "no_current_card")
        card = state.cards[index]
        return await self._update_card(user, card, draft)

    async def _create_card(self, user: User, draft: CardContent) -> bool:
        generation = self._begin("create_card")
        if generation is None:
            return False
        try:
            card = await self.card_store.create_card(user.id, draft)
        except Exception as e:
            if self._finish(generation, "create_card"):
                self._report("store", "create_card", e)
            return False
        if not self._finish(generation, "create_card"):
            return False

        state = self._state
        state.cards.append(card)
        state.current_index = len(state.cards) - 1
        state.flipped = False
        state.form = FormState.closed()
        logger.info("card_created", card_id=str(card.id), user_id=str(user.id))
        return True

    async def _update_card(self, user: User, card: Card, draft: CardContent) -> bool:
        generation = self._begin("update_card")
        if generation is None:
            return False
        try:
            await self.card_store.update_card(user.id, card.id, draft)
        except Exception as e:
            if self._finish(generation, "update_card"):
                self._report("store", "update_card", e)
            return False
        if not self._finish(generation, "update_card"):
            return False

        # Replace by id: the card may have been removed while the call was pending.
        state = self._state
        index = self._index_of(card.id)
        if index is not None:
            state.cards[index] = card.revise(draft)
        state.form = FormState.closed()
        logger.info("card_updated", card_id=str(card.id), user_id=str(user.id))
        return True

    # --- Delete ---

    async def delete_current(self, confirmed: bool) -> bool:
        """
        Delete the card under the cursor.

        Args:
            confirmed: The user's answer to the delete confirmation prompt

        Returns:
            True if the store deleted the card and it was removed locally
        """
        if not confirmed:
            return self._refuse("delete_current", "not_confirmed")
        if not self._browsing_with_cards("delete_current"):
            return False
        user = self._state.current_user
        card = self._state.current_card
        if user is None or card is None:
            return self._refuse("delete_current", "no_current_card")

        generation = self._begin("delete_card")
        if generation is None:
            return False
        try:
            await self.card_store.delete_card(user.id, card.id)
        except Exception as e:
            if self._finish(generation, "delete_card"):
                self._report("store", "delete_card", e)
            return False
        if not self._finish(generation, "delete_card"):
            return False

        state = self._state
        state.cards = [c for c in state.cards if c.id != card.id]
        state.current_index = 0
        state.flipped = False
        state.flipped_map.discard(card.id)
        if state.form.editing:
            state.form = FormState.closed()
        logger.info("card_deleted", card_id=str(card.id), user_id=str(user.id))
        return True

    # --- Helpers ---

    def _browsing_with_cards(self, operation: str) -> bool:
        state = self._state
        if state.phase != "ready" or state.show_all:
            return self._refuse(operation, "not_browsing")
        if not state.cards:
            return self._refuse(operation, "no_cards")
        return True

    def _index_of(self, card_id: CardId) -> int | None:
        for index, card in enumerate(self._state.cards):
            if card.id == card_id:
                return index
        return None

    def _begin(self, operation: str) -> int | None:
        """Mark a remote operation as in flight. Returns its generation, or None if busy."""
        pending = self._state.pending_operation
        if pending is not None:
            logger.debug("operation_refused", operation=operation, reason="busy", pending=pending)
            return None
        self._state.pending_operation = operation
        self._state.last_error = None
        return self._generation

    def _finish(self, generation: int, operation: str) -> bool:
        """End a remote operation. Returns False when its session has since ended."""
        if generation != self._generation:
            logger.info("stale_result_discarded", operation=operation)
            return False
        self._state.pending_operation = None
        return True

    def _refuse(self, operation: str, reason: str) -> bool:
        logger.debug("operation_refused", operation=operation, reason=reason)
        return False

    def _report(self, kind: ErrorKind, operation: str, exc: Exception) -> None:
        error = ControllerError(kind=kind, operation=operation, message=str(exc))
        self._state.last_error = error
        logger.warning(
            "operation_failed",
            kind=kind,
            operation=operation,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        if self._on_error is not None:
            self._on_error(error)
