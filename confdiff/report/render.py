# =========================
# file: confdiff/report/render.py
# =========================
from __future__ import annotations
from typing import List

from confdiff.diff.session import DiffSession
from confdiff.report.highlight import mark_with
from confdiff.report.markup import Markup, RenderMode, markup_for


def render_unified(session: DiffSession, markup: Markup, include_unchanged: bool = False,
                   left_header: str = "left", right_header: str = "right") -> str:
    out: List[str] = [f"--- {left_header}", f"+++ {right_header}", ""]
    for r in session.visible_rows(include_unchanged):
        if r.tag == "equal":
            out.append(" " + r.old_line)
            continue
        if r.tag != "insert":
            out.append("-" + mark_with(markup, r.old_line, r.old_spans, is_old=True))
        if r.tag != "delete":
            out.append("+" + mark_with(markup, r.new_line, r.new_spans, is_old=False))
    return "\n".join(out) + "\n"


def _cell(s: str) -> str:
    return s.replace("|", "\\|")


def render_tabular(session: DiffSession, markup: Markup, include_unchanged: bool = False) -> str:
    out: List[str] = ["|left|right|", "|----|-----|"]
    for r in session.visible_rows(include_unchanged):
        old = mark_with(markup, r.old_line, r.old_spans, is_old=True)
        new = mark_with(markup, r.new_line, r.new_spans, is_old=False)
        out.append(f"|{_cell(old)}|{_cell(new)}|")
    return "\n".join(out) + "\n"


def render(session: DiffSession, mode: RenderMode = RenderMode.UNIFIED, color: bool = True,
           include_unchanged: bool = False, left_header: str = "left", right_header: str = "right") -> str:
    mode = RenderMode(mode)
    markup = markup_for(mode, color)
    if mode is RenderMode.TABULAR:
        return render_tabular(session, markup, include_unchanged)
    return render_unified(session, markup, include_unchanged, left_header, right_header)
