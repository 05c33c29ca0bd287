"""
Navigation State Machine.

SlideEngine is the one owned context for a session: the deck, the current
position and the two guard flags. States are Idle and Transitioning; the
``animating`` flag is the only lock. It is set synchronously when a
transition starts and cleared only by the renderer's settle_transition()
acknowledgement. Requests made while it is set are dropped, never queued.

Flow of one slide change:
1. go_to(target) validates, sets animating, moves current_index.
2. TransitionStarted goes to every coordinator.
3. The coordinator animates, then calls settle_transition().
4. animating clears and NavigationSettled goes out.

No timeout: a renderer that never settles leaves the engine gated.
stuck() makes that visible in logs and /status.
"""
import logging
import time
from collections import deque
from typing import Callable, Iterable

from slidedeck.coordinator import RenderCoordinator
from slidedeck.deck import Deck
from slidedeck.fullscreen import FlagFullscreen, FullscreenProvider
from slidedeck.models import (
    DeckEvent,
    Direction,
    NavigationSettled,
    NavigationState,
    Slide,
    TocClosed,
    TocOpened,
    TransitionStarted,
)

logger = logging.getLogger(__name__)


class SlideEngine:
    def __init__(
        self,
        deck: Deck,
        coordinators: Iterable[RenderCoordinator] = (),
        fullscreen: FullscreenProvider | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.deck = deck
        self.fullscreen = fullscreen or FlagFullscreen()
        self._coordinators: list[RenderCoordinator] = list(coordinators)
        self._clock = clock
        self._current = 0
        self._animating = False
        self._toc_open = False
        self._transition_started_at: float | None = None
        self._stuck_reported = False
        self._pending: deque[DeckEvent] = deque()
        self._emitting = False

    # ----- Read side -----

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def animating(self) -> bool:
        return self._animating

    @property
    def toc_open(self) -> bool:
        return self._toc_open

    def current_slide(self) -> Slide | None:
        if not len(self.deck):
            return None
        return self.deck.get(self._current)

    def state(self) -> NavigationState:
        return NavigationState(
            current_index=self._current,
            animating=self._animating,
            toc_open=self._toc_open,
            fullscreen=self.fullscreen.is_active(),
        )

    # ----- Coordinators -----

    def attach(self, coordinator: RenderCoordinator) -> None:
        self._coordinators.append(coordinator)

    def _emit(self, event: DeckEvent) -> None:
        # Events raised by a coordinator while another is being delivered wait
        # their turn, so every coordinator sees Started before its Settled.
        self._pending.append(event)
        if self._emitting:
            return
        self._emitting = True
        try:
            while self._pending:
                queued = self._pending.popleft()
                for coordinator in list(self._coordinators):
                    coordinator.handle(queued)
        finally:
            self._emitting = False
            self._pending.clear()

    # ----- Transitions -----

    def go_to(self, target: int) -> bool:
        """Start a transition to ``target``. Returns False when nothing happened."""
        if self._animating:
            logger.debug("Navigation dropped: transition in flight", extra={"to_index": target})
            return False
        # Also covers the empty deck: no index is valid.
        if not self.deck.contains(target):
            logger.debug("Navigation ignored: out of range", extra={"to_index": target})
            return False
        if target == self._current:
            return False

        origin = self._current
        direction = Direction.FORWARD if target > origin else Direction.BACKWARD
        self._animating = True
        self._transition_started_at = self._clock()
        self._current = target
        logger.info(
            "Transition started",
            extra={"from_index": origin, "to_index": target, "direction": direction.value},
        )
        self._emit(TransitionStarted(from_index=origin, to_index=target, direction=direction))
        return True

    def next(self) -> bool:
        return self.go_to(self._current + 1)

    def previous(self) -> bool:
        return self.go_to(self._current - 1)

    def settle_transition(self) -> bool:
        """Renderer acknowledgement that the running transition finished."""
        if not self._animating:
            logger.warning("settle_transition() called with no transition in flight")
            return False
        self._animating = False
        self._transition_started_at = None
        self._stuck_reported = False
        logger.info("Navigation settled", extra={"current_index": self._current})
        self._emit(NavigationSettled(current_index=self._current))
        return True

    def stuck(self, threshold: float) -> bool:
        """True when a transition has waited longer than ``threshold`` seconds for its settle."""
        if not self._animating or self._transition_started_at is None:
            return False
        waited = self._clock() - self._transition_started_at
        if waited <= threshold:
            return False
        if self._stuck_reported:
            return True
        self._stuck_reported = True
        logger.warning(
            "StuckTransition: renderer has not settled",
            extra={"current_index": self._current, "waited_seconds": round(waited, 3)},
        )
        return True

    # ----- Table of contents -----

    def open_toc(self) -> bool:
        if self._toc_open or self._animating:
            return False
        self._toc_open = True
        self._emit(TocOpened())
        return True

    def close_toc(self) -> bool:
        if not self._toc_open or self._animating:
            return False
        self._toc_open = False
        self._emit(TocClosed())
        return True

    # ----- Fullscreen -----

    def toggle_fullscreen(self) -> bool:
        active = self.fullscreen.toggle()
        logger.debug("Fullscreen toggled", extra={"fullscreen": active})
        return True
