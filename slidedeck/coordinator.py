"""
Render Coordinator contract.

The engine never touches the display. It emits lifecycle events to one or
more coordinators; whoever animates the slides must call
``engine.settle_transition()`` exactly once per TransitionStarted, after its
own visual work is done. Until then the engine stays gated.
"""
from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from slidedeck.models import (
    DeckEvent,
    NavigationSettled,
    TocClosed,
    TocOpened,
    TransitionStarted,
)


class RenderCoordinator(ABC):
    @abstractmethod
    def on_transition_started(self, event: TransitionStarted) -> None:
        ...

    @abstractmethod
    def on_navigation_settled(self, event: NavigationSettled) -> None:
        ...

    @abstractmethod
    def on_toc_opened(self, event: TocOpened) -> None:
        ...

    @abstractmethod
    def on_toc_closed(self, event: TocClosed) -> None:
        ...

    def handle(self, event: DeckEvent) -> None:
        """Route an event to its callback."""
        if isinstance(event, TransitionStarted):
            self.on_transition_started(event)
        elif isinstance(event, NavigationSettled):
            self.on_navigation_settled(event)
        elif isinstance(event, TocOpened):
            self.on_toc_opened(event)
        elif isinstance(event, TocClosed):
            self.on_toc_closed(event)
        else:
            raise TypeError(f"Unknown deck event: {event!r}")


class BufferedCoordinator(RenderCoordinator):
    """
    Keeps events for a remote renderer (a browser polling the HTTP API).

    Each event gets a sequence number; the renderer asks for everything after
    the last number it has seen. Only the newest ``maxlen`` events are kept.
    """

    def __init__(self, maxlen: int = 256):
        self._events: deque[tuple[int, DeckEvent]] = deque(maxlen=maxlen)
        self._seq = 0

    def _record(self, event: DeckEvent) -> None:
        self._seq += 1
        self._events.append((self._seq, event))

    on_transition_started = _record
    on_navigation_settled = _record
    on_toc_opened = _record
    on_toc_closed = _record

    @property
    def last_seq(self) -> int:
        return self._seq

    def events_after(self, seq: int = 0) -> list[dict[str, Any]]:
        return [
            {"seq": n, **event.model_dump(mode="json")}
            for n, event in self._events
            if n > seq
        ]
