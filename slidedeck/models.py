"""
Records shared by the compiler, the engine and the render layer.

Slides and lifecycle events are frozen pydantic models: once built they are
handed to the presentation layer as plain values and never mutated.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Slide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""  # pre-rendered HTML


def make_slide(title: str, content: str = "") -> Slide:
    return Slide(title=title, content=content)


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Command(str, Enum):
    """Discrete commands an input binding can trigger. Values are wire names."""

    NEXT = "next"
    PREVIOUS = "previous"
    OPEN_TOC = "openToc"
    CLOSE_TOC = "closeToc"
    TOGGLE_FULLSCREEN = "toggleFullscreen"


class NavigationState(BaseModel):
    """Snapshot of the engine; derived on demand, never stored."""

    model_config = ConfigDict(frozen=True)

    current_index: int
    animating: bool
    toc_open: bool
    fullscreen: bool = False


# ----- Lifecycle events -----


class DeckEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str


class TransitionStarted(DeckEvent):
    kind: str = "transition_started"
    from_index: int
    to_index: int
    direction: Direction


class NavigationSettled(DeckEvent):
    kind: str = "navigation_settled"
    current_index: int


class TocOpened(DeckEvent):
    kind: str = "toc_opened"


class TocClosed(DeckEvent):
    kind: str = "toc_closed"
