"""
View projection: index-based facts the presentation layer turns into the
progress bar, the arrow controls and the TOC list.
"""
from pydantic import BaseModel

from slidedeck.models import NavigationState
from slidedeck.navigation import SlideEngine


class TocEntry(BaseModel):
    index: int
    title: str
    current: bool = False


class DeckView(BaseModel):
    slide_count: int
    progress_percent: float
    can_go_previous: bool
    can_go_next: bool
    toc: list[TocEntry]
    state: NavigationState


def progress_percent(current_index: int, length: int) -> float:
    if length <= 0:
        return 0.0
    return (current_index + 1) / length * 100


def project(engine: SlideEngine) -> DeckView:
    length = len(engine.deck)
    current = engine.current_index
    return DeckView(
        slide_count=length,
        progress_percent=progress_percent(current, length),
        can_go_previous=current > 0,
        can_go_next=current < length - 1,
        toc=[
            TocEntry(index=i, title=title, current=(i == current))
            for i, title in enumerate(engine.deck.titles())
        ],
        state=engine.state(),
    )
