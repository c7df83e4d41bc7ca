# =========================
# file: confdiff/report/markup.py
# =========================
from dataclasses import dataclass
from enum import Enum

ANSI_OLD = "\u001b[31m"   # red
ANSI_NEW = "\u001b[33m"   # yellow
ANSI_RESET = "\u001b[0m"


class RenderMode(str, Enum):
    UNIFIED = "unified"
    TABULAR = "tabular"


@dataclass(frozen=True)
class Markup:
    old_open: str = ""
    old_close: str = ""
    new_open: str = ""
    new_close: str = ""

    def tag(self, is_old: bool, start: bool) -> str:
        if is_old:
            return self.old_open if start else self.old_close
        return self.new_open if start else self.new_close

    def format(self, span: str, is_old: bool) -> str:
        return f"{self.tag(is_old, True)}{span}{self.tag(is_old, False)}"


PLAIN = Markup()
ANSI = Markup(ANSI_OLD, ANSI_RESET, ANSI_NEW, ANSI_RESET)
MARKDOWN = Markup("~", "~", "**", "**")


def markup_for(mode: RenderMode, color: bool) -> Markup:
    if color:
        return ANSI
    if RenderMode(mode) is RenderMode.TABULAR:
        return MARKDOWN
    return PLAIN
