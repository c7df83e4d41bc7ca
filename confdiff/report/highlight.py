# file: confdiff/report/highlight.py
# =========================
# Wraps word spans of a line in markup (terminal, markdown or HTML)
# =========================
from html import escape
from typing import Callable, Optional, Sequence, Tuple

from confdiff.diff.engine import merge_spans
from confdiff.report.markup import Markup

def mark_line(text: str, spans: Sequence[Tuple[int,int]], wrap: Callable[[str], str],
              esc: Optional[Callable[[str], str]] = None) -> str:
    """Apply `wrap` to each (clamped, merged) span of `text`; `esc` to everything."""
    esc = esc or (lambda s: s)
    if not text:
        return ""
    if not spans:
        return esc(text)

    parts = []
    cur = 0
    for s, e in merge_spans(list(spans)):
        s = max(0, min(len(text), s))
        e = max(0, min(len(text), e))
        if cur < s:
            parts.append(esc(text[cur:s]))
        parts.append(wrap(esc(text[s:e])))
        cur = e
    if cur < len(text):
        parts.append(esc(text[cur:]))
    return "".join(parts)

def mark_with(markup: Markup, text: str, spans: Sequence[Tuple[int,int]], is_old: bool) -> str:
    return mark_line(text, spans, lambda s: markup.format(s, is_old))

def render_marked(text: str, spans: Sequence[Tuple[int,int]], cls: str) -> str:
    """HTML-escaped text with <mark class=cls> around each span."""
    return mark_line(text, spans, lambda s: f'<mark class="{cls}">{s}</mark>',
                     esc=lambda s: escape(s, quote=False))
