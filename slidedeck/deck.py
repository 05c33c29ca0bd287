"""
Deck store: the ordered slides of one session.

Append-only while the compiler populates it, then sealed. Position lives in
the navigation engine; the deck only answers index-based reads.
"""
from collections.abc import Iterable, Iterator

from slidedeck.errors import DeckSealed, OutOfRangeIndex
from slidedeck.models import Slide


class Deck:
    def __init__(self, slides: Iterable[Slide] = ()):
        self._slides: list[Slide] = []
        self._sealed = False
        for slide in slides:
            self.append(slide)

    def append(self, slide: Slide) -> int:
        """Push to the end and return the new slide's index."""
        if self._sealed:
            raise DeckSealed("Deck is sealed; slides can only be added during compilation")
        self._slides.append(slide)
        return len(self._slides) - 1

    def get(self, index: int) -> Slide:
        if not 0 <= index < len(self._slides):
            raise OutOfRangeIndex(index, len(self._slides))
        return self._slides[index]

    def length(self) -> int:
        return len(self._slides)

    def seal(self) -> "Deck":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def titles(self) -> list[str]:
        return [s.title for s in self._slides]

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self._slides)

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)
