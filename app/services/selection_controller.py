import logging
from contextlib import contextmanager
from typing import Callable, List, Optional
from app.schemas import CursorHint, InteractionState

logger = logging.getLogger(__name__)

ActiveChangedCallback = Callable[[Optional[int]], None]
SelectedCallback = Callable[[int], None]


class SelectionInteractionController:
    """
    Tracks the single body under pointer focus.

    Entering a body makes it active (last writer wins). Leaving only clears
    the focus when the body leaving is still the active one, so a late leave
    from a previous body never clears the current one. Clicks are forwarded
    to subscribers and not retained here.
    """

    def __init__(self):
        self._active_id: Optional[int] = None
        self._active_listeners: List[ActiveChangedCallback] = []
        self._selected_listeners: List[SelectedCallback] = []

    @property
    def active_id(self) -> Optional[int]:
        return self._active_id

    @property
    def cursor_hint(self) -> CursorHint:
        return CursorHint.POINTER if self._active_id is not None else CursorHint.DEFAULT

    @property
    def state(self) -> InteractionState:
        return InteractionState(active_id=self._active_id, cursor_hint=self.cursor_hint)

    def subscribe_active_changed(self, callback: ActiveChangedCallback) -> Callable[[], None]:
        self._active_listeners.append(callback)
        return lambda: self._unsubscribe(self._active_listeners, callback)

    def subscribe_selected(self, callback: SelectedCallback) -> Callable[[], None]:
        self._selected_listeners.append(callback)
        return lambda: self._unsubscribe(self._selected_listeners, callback)

    def enter(self, body_id: int):
        self._set_active(body_id)

    def leave(self, body_id: int):
        if self._active_id != body_id:
            logger.debug("Ignoring stale leave for body %s (active: %s)", body_id, self._active_id)
            return
        self._set_active(None)

    def capture_lost(self, body_id: int):
        """Pointer capture lost while over a body; undone the same way as a leave"""
        self.leave(body_id)

    def leave_all(self):
        self._set_active(None)

    def select(self, body_id: int):
        for callback in list(self._selected_listeners):
            callback(body_id)

    @contextmanager
    def hovering(self, body_id: int):
        """Keep `body_id` active for the duration of the block"""
        self.enter(body_id)
        try:
            yield self
        finally:
            self.leave(body_id)

    def _set_active(self, body_id: Optional[int]):
        if body_id == self._active_id:
            return
        self._active_id = body_id
        for callback in list(self._active_listeners):
            callback(body_id)

    @staticmethod
    def _unsubscribe(listeners: list, callback):
        if callback in listeners:
            listeners.remove(callback)
