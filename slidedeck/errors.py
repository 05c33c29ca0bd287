"""Error taxonomy for the deck engine."""


class DeckError(Exception):
    """Base class for deck engine errors."""


class CompileFailure(DeckError):
    """The source document could not be fetched or produced no slides."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class OutOfRangeIndex(DeckError, IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"Slide index {index} outside [0, {length})")
        self.index = index
        self.length = length


class DeckSealed(DeckError):
    """Raised on append after the deck was populated by the compiler."""
