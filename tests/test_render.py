from confdiff.diff.session import DiffSession
from confdiff.report.highlight import mark_line, render_marked
from confdiff.report.markup import ANSI, MARKDOWN, PLAIN, RenderMode, markup_for
from confdiff.report.render import render

LEFT = {"a": "1", "b": "2"}
RIGHT = {"b": "2", "c": "3"}


def test_unified_plain():
    s = DiffSession(LEFT, RIGHT)
    text = render(s, RenderMode.UNIFIED, color=False, left_header="L", right_header="R")
    assert text == "--- L\n+++ R\n\n-a=1\n+a=\n-c=\n+c=3\n"


def test_unified_color_wraps_changed_words():
    s = DiffSession(LEFT, RIGHT)
    lines = render(s, "unified", color=True).splitlines()
    assert "-a=\u001b[31m1\u001b[0m" in lines
    assert "+a=" in lines
    assert "+c=\u001b[33m3\u001b[0m" in lines


def test_unified_include_unchanged():
    s = DiffSession(LEFT, RIGHT)
    text = render(s, RenderMode.UNIFIED, color=False, include_unchanged=True)
    assert " b=2" in text.splitlines()


def test_identical_sides_render_headers_only():
    s = DiffSession(LEFT, dict(LEFT))
    assert render(s, RenderMode.UNIFIED, color=False, left_header="L", right_header="R") == "--- L\n+++ R\n\n"


def test_tabular_markdown_markup():
    s = DiffSession(LEFT, RIGHT)
    text = render(s, RenderMode.TABULAR, color=False)
    assert text == "|left|right|\n|----|-----|\n|a=~1~|a=|\n|c=|c=**3**|\n"


def test_tabular_escapes_pipes():
    s = DiffSession({"k": "x|y"}, {"k": "x|z"})
    text = render(s, RenderMode.TABULAR, color=False, include_unchanged=True)
    assert "\\|" in text
    assert text.splitlines()[2].count("|") - text.splitlines()[2].count("\\|") == 3


def test_markup_selection():
    assert markup_for(RenderMode.UNIFIED, False) is PLAIN
    assert markup_for(RenderMode.TABULAR, False) is MARKDOWN
    assert markup_for(RenderMode.TABULAR, True) is ANSI
    assert MARKDOWN.format("x", is_old=True) == "~x~"
    assert MARKDOWN.format("x", is_old=False) == "**x**"


def test_mark_line_clamps_and_merges():
    brackets = lambda s: f"[{s}]"
    assert mark_line("abcdef", [(4, 99), (0, 1), (1, 2)], brackets) == "[ab]cd[ef]"
    assert mark_line("", [(0, 1)], brackets) == ""


def test_render_marked_escapes_html():
    assert render_marked("a=<b>", [(2, 5)], "new") == 'a=<mark class="new">&lt;b&gt;</mark>'
