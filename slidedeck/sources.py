"""
Document sources: one-shot fetch of the deck's markdown.

Source registry: maps location scheme -> source class. http(s) URLs go
through httpx; anything else is a local path. Every failure surfaces as
CompileFailure so the caller can fall back to an empty deck.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

import httpx

from slidedeck.compiler import build_deck
from slidedeck.deck import Deck
from slidedeck.errors import CompileFailure

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    SUPPORTED_SCHEMES: list[str] = []

    @abstractmethod
    def fetch(self, location: str) -> str:
        ...

    @classmethod
    def supports(cls, location: str) -> bool:
        scheme = location.split("://", 1)[0].lower() if "://" in location else ""
        return scheme in cls.SUPPORTED_SCHEMES


class HttpSource(BaseSource):
    SUPPORTED_SCHEMES = ["http", "https"]

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def fetch(self, location: str) -> str:
        try:
            r = httpx.get(location, timeout=self.timeout, follow_redirects=True)
            r.raise_for_status()
        except httpx.HTTPError as e:
            raise CompileFailure(f"Could not fetch {location}: {e}", source=location) from e
        return r.content.decode("utf-8", errors="replace")


class FileSource(BaseSource):
    SUPPORTED_SCHEMES = ["", "file"]

    def fetch(self, location: str) -> str:
        path = Path(location.removeprefix("file://"))
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise CompileFailure(f"Could not read {path}: {e}", source=location) from e


def get_source(location: str, timeout: float = 10.0) -> BaseSource:
    """Return the source able to fetch this location."""
    if HttpSource.supports(location):
        return HttpSource(timeout=timeout)
    if FileSource.supports(location):
        return FileSource()
    raise CompileFailure(f"Unsupported document location: {location}", source=location)


def fetch_document(location: str, timeout: float = 10.0) -> str:
    return get_source(location, timeout).fetch(location)


def load_deck(location: str, timeout: float = 10.0) -> Deck:
    """Fetch and compile. Raises CompileFailure on fetch errors or an empty document."""
    text = fetch_document(location, timeout)
    deck = build_deck(text, source=location)
    logger.info("Deck loaded", extra={"source": location, "slides": len(deck)})
    return deck


def load_deck_or_placeholder(location: str, timeout: float = 10.0) -> tuple[Deck, CompileFailure | None]:
    """
    Never raises: on CompileFailure returns an empty sealed deck plus the
    error, so navigation stays a guaranteed no-op.
    """
    try:
        return load_deck(location, timeout), None
    except CompileFailure as e:
        logger.error("Deck unavailable; serving empty deck", extra={"source": location}, exc_info=True)
        return Deck().seal(), e
