"""
Input Dispatcher: the only entry point for user input.

While a transition is in flight every command is dropped outright. Stale
input is not buffered and does not cancel the running transition.
"""
import logging

from slidedeck.bindings import resolve_key
from slidedeck.models import Command
from slidedeck.navigation import SlideEngine

logger = logging.getLogger(__name__)

_NAVIGATION = {Command.NEXT, Command.PREVIOUS}


class InputDispatcher:
    def __init__(
        self,
        engine: SlideEngine,
        toc_blocks_navigation: bool = False,
        bindings: dict[str, Command] | None = None,
    ):
        self.engine = engine
        self.toc_blocks_navigation = toc_blocks_navigation
        self.bindings = bindings
        self._handlers = {
            Command.NEXT: engine.next,
            Command.PREVIOUS: engine.previous,
            Command.OPEN_TOC: engine.open_toc,
            Command.CLOSE_TOC: engine.close_toc,
            Command.TOGGLE_FULLSCREEN: engine.toggle_fullscreen,
        }

    def _gated(self, command: Command | None = None) -> bool:
        if self.engine.animating:
            return True
        return (
            self.toc_blocks_navigation
            and self.engine.toc_open
            and command in _NAVIGATION
        )

    def dispatch(self, command: Command | str) -> bool:
        """
        Forward ``command`` to the engine unless input is gated.
        Returns True if the command reached the engine.
        Raises ValueError for names that are not commands.
        """
        command = Command(command)
        if self._gated(command):
            logger.debug("Command dropped", extra={"command": command.value})
            return False
        self._handlers[command]()
        return True

    def dispatch_key(self, key: str) -> bool:
        command = resolve_key(key, self.bindings)
        if command is None:
            return False
        return self.dispatch(command)

    def select(self, index: int) -> bool:
        """TOC entry picked: jump straight to that slide. True only if a transition started."""
        if self._gated():
            logger.debug("TOC selection dropped", extra={"to_index": index})
            return False
        return self.engine.go_to(index)
