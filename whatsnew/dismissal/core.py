"""Two-state dismissal lifecycle for the changelog surface."""

from enum import Enum
from typing import Callable

from whatsnew.common.utils.logger import get_logger

logger = get_logger(__name__)


class DismissalState(Enum):
    OPEN = "open"
    CLOSING = "closing"


class DismissalController:
    """Defers removal of a surface until its exit transition has finished.

    `request_close()` moves the controller from OPEN to CLOSING; the host plays
    its exit transition and reports completion with `on_transition_finished()`,
    which calls `on_close` once. Completion signals that arrive while OPEN come
    from unrelated transitions and are ignored.
    """

    def __init__(self, on_close: Callable[[], None]):
        if not callable(on_close):
            raise TypeError(f"on_close must be callable, got {type(on_close).__name__}")
        self._on_close = on_close
        self._state = DismissalState.OPEN
        self._notified = False

    @property
    def state(self) -> DismissalState:
        return self._state

    @property
    def is_closing(self) -> bool:
        return self._state is DismissalState.CLOSING

    @property
    def removed(self) -> bool:
        """Whether the host has been told to unmount the surface."""
        return self._notified

    def request_close(self) -> None:
        if self._state is DismissalState.CLOSING:
            return
        self._state = DismissalState.CLOSING
        logger.debug("Close requested, waiting for exit transition")

    def on_transition_finished(self) -> None:
        if self._state is not DismissalState.CLOSING:
            logger.debug("Ignoring transition end while surface is open")
            return
        if self._notified:
            return

        # mark first so a raising callback is still never called twice
        self._notified = True
        logger.debug("Exit transition finished, removing surface")
        self._on_close()
