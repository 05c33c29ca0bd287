"""
Markdown Compiler: one document -> ordered slides.

Every level-1 heading ("# Title") opens a new slide; deeper headings are
ordinary content. Text before the first title has no slide to land in and is
dropped. Each slide body is rendered to HTML when the slide is closed.
"""
import html
import logging
import re
from typing import Callable

from slidedeck.deck import Deck
from slidedeck.errors import CompileFailure
from slidedeck.models import Slide, make_slide
from slidedeck.rendering import render_markdown

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"^#(?!#)")
_TITLE_PREFIX = re.compile(r"^#\s?")


def is_title_line(line: str) -> bool:
    return bool(TITLE_PATTERN.match(line.strip()))


def title_text(line: str) -> str:
    """Strip the leading '#' and at most one whitespace character after it."""
    return _TITLE_PREFIX.sub("", line.strip(), count=1)


def _render_body(title: str, body: str, render: Callable[[str], str]) -> str:
    try:
        return render(body)
    except Exception:
        # Only this slide degrades; the rest of the document still compiles.
        logger.error("Slide body failed to render", extra={"title": title}, exc_info=True)
        return f"<pre>{html.escape(body)}</pre>" if body else ""


def compile_document(
    document: str,
    render: Callable[[str], str] = render_markdown,
) -> list[Slide]:
    slides: list[Slide] = []
    title: str | None = None
    body: list[str] = []

    def finalize():
        slides.append(make_slide(title, _render_body(title, "".join(body), render)))
        body.clear()

    for line in document.split("\n"):
        if is_title_line(line):
            if title is not None:
                finalize()
            title = title_text(line)
        elif title is not None:
            body.append(line + "\n")

    if title is not None:
        finalize()

    logger.debug("Compiled document", extra={"slides": len(slides)})
    return slides


def build_deck(document: str, source: str = "") -> Deck:
    """Compile into a sealed deck. An empty result is a CompileFailure."""
    slides = compile_document(document)
    if not slides:
        raise CompileFailure("Document contains no slides (no '# ' title lines)", source=source)
    return Deck(slides).seal()
