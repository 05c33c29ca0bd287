"""Markdown rendering and per-block highlight fallback."""
from unittest.mock import patch

from slidedeck.rendering import highlight_code, render_markdown


def test_paragraph():
    assert render_markdown("body\n") == "<p>body</p>\n"


def test_single_newline_is_a_line_break():
    assert "<br" in render_markdown("first\nsecond\n")


def test_tables_enabled():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>1</td>" in html


def test_known_language_is_highlighted():
    html = render_markdown("```python\nx = 1\n```\n")
    assert '<code class="language-python">' in html
    assert "<span" in html


def test_unknown_language_falls_back_to_escaped_text():
    html = render_markdown("```not-a-lexer\nif a < b: pass\n```\n")
    assert "<span" not in html
    assert "if a &lt; b: pass" in html


def test_highlight_code_returns_empty_for_unknown_lexer():
    assert highlight_code("x", "definitely-not-a-language") == ""


def test_highlighter_crash_only_affects_its_block():
    with patch("slidedeck.rendering.highlight", side_effect=RuntimeError("lexer bug")):
        html = render_markdown("```python\nx = 1\n```\n\ntext after\n")
    assert "x = 1" in html
    assert "<p>text after</p>" in html
