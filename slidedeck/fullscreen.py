"""
Fullscreen capability seam. Pick one provider at startup via config; the
engine only ever calls enter/exit/is_active and never branches per platform.
"""
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class FullscreenProvider(ABC):
    @abstractmethod
    def enter(self) -> None:
        ...

    @abstractmethod
    def exit(self) -> None:
        ...

    @abstractmethod
    def is_active(self) -> bool:
        ...

    def toggle(self) -> bool:
        """Flip fullscreen and return the new state."""
        if self.is_active():
            self.exit()
        else:
            self.enter()
        return self.is_active()


class FlagFullscreen(FullscreenProvider):
    """
    Tracks the requested mode as a flag. The presentation layer reads it from
    the state projection and performs the actual fullscreen request.
    """

    def __init__(self):
        self._active = False

    def enter(self) -> None:
        self._active = True

    def exit(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active


class NoFullscreen(FullscreenProvider):
    """For hosts with no fullscreen capability: every request is a no-op."""

    def enter(self) -> None:
        logger.info("Fullscreen not supported by this host")

    def exit(self) -> None:
        pass

    def is_active(self) -> bool:
        return False
