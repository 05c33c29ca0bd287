"""
Markdown -> HTML for slide bodies.

markdown-it (CommonMark + tables + strikethrough) with hard line breaks, so a
single newline inside a paragraph shows up on the slide. Fenced code goes
through Pygments: the fence's language tag picks the lexer, a bare fence gets
a guessed one. A tag Pygments doesn't know, or a lexer that blows up, leaves
that one block unhighlighted; markdown-it then escapes it as plain code.
"""
import logging
from functools import lru_cache

from markdown_it import MarkdownIt
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_FORMATTER = HtmlFormatter(nowrap=True)


def highlight_code(code: str, lang: str, attrs: str = "") -> str:
    """
    Return highlighted HTML spans for one fenced block, or "" to let
    markdown-it fall back to escaped raw text.
    """
    try:
        lexer = get_lexer_by_name(lang) if lang else guess_lexer(code)
    except ClassNotFound:
        logger.debug("No lexer for code block", extra={"lang": lang or None})
        return ""
    try:
        return highlight(code, lexer, _FORMATTER)
    except Exception:
        logger.warning("Highlighting failed; using raw text", extra={"lang": lang or None}, exc_info=True)
        return ""


class MarkdownRenderer:
    def __init__(self, breaks: bool = True, allow_html: bool = True):
        self._md = MarkdownIt(
            "commonmark",
            {"breaks": breaks, "html": allow_html, "highlight": highlight_code},
        ).enable("table").enable("strikethrough")

    def render(self, markdown_text: str) -> str:
        return self._md.render(markdown_text)


@lru_cache(maxsize=1)
def get_renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def render_markdown(markdown_text: str) -> str:
    return get_renderer().render(markdown_text)
