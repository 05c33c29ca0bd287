"""
Default key -> command table.

Adding a binding = add one line here. Key names are lower-case, as sent by
the presentation layer. Buttons (arrows, menu, TOC close) post commands
directly and need no entry.
"""
from slidedeck.models import Command

DEFAULT_KEY_BINDINGS: dict[str, Command] = {
    "right": Command.NEXT,
    "enter": Command.NEXT,
    "space": Command.NEXT,
    "left": Command.PREVIOUS,
    "down": Command.OPEN_TOC,
    "up": Command.CLOSE_TOC,
    "esc": Command.CLOSE_TOC,
    "shift": Command.TOGGLE_FULLSCREEN,
}


def resolve_key(key: str, bindings: dict[str, Command] | None = None) -> Command | None:
    table = DEFAULT_KEY_BINDINGS if bindings is None else bindings
    return table.get(key.strip().lower())
