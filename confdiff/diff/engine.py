# =========================
# file: confdiff/diff/engine.py
# =========================
from __future__ import annotations
import re
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Hashable, List, Optional, Sequence, Tuple

from confdiff.errors import DiffComputationError

Span = Tuple[int, int]

# Words, whitespace runs and punctuation each form one token.
_DELIMS = r"=,.:;\[\](){}/\\*+\-#"
TOKEN_RE = re.compile(rf"\s+|[{_DELIMS}]|[^\s{_DELIMS}]+", re.UNICODE)


@dataclass(frozen=True)
class DiffOperation:
    tag: str  # equal | replace | insert | delete
    i1: int
    i2: int
    j1: int
    j2: int
    old_lines: Tuple[str, ...]
    new_lines: Tuple[str, ...]


@dataclass(frozen=True)
class DiffRow:
    tag: str  # equal | change | insert | delete
    old_line: str
    new_line: str
    old_spans: Tuple[Span, ...] = ()
    new_spans: Tuple[Span, ...] = ()
    left_index: Optional[int] = None
    right_index: Optional[int] = None

    @property
    def changed(self) -> bool:
        return self.tag != "equal"


def _as_lines(seq, side: str) -> List[str]:
    if seq is None:
        raise DiffComputationError(f"{side} sequence is None")
    try:
        lines = list(seq)
    except TypeError as e:
        raise DiffComputationError(f"{side} sequence is not iterable: {e}") from e
    for i, x in enumerate(lines):
        if not isinstance(x, str):
            raise DiffComputationError(f"{side} line {i} is {type(x).__name__}, expected str")
    return lines


def _as_ids(ids, lines: List[str], side: str) -> list:
    if ids is None:
        return lines
    ids = list(ids)
    if len(ids) != len(lines):
        raise DiffComputationError(f"{side} has {len(ids)} ids for {len(lines)} lines")
    return ids


def diff_lines(left: Sequence[str], right: Sequence[str],
               left_ids: Optional[Sequence[Hashable]] = None,
               right_ids: Optional[Sequence[Hashable]] = None) -> List[DiffOperation]:
    """
    Line-level diff; the operations cover both sequences end to end.
    Lines are matched on `left_ids`/`right_ids` when given (one id per line),
    otherwise on their text.
    """
    a = _as_lines(left, "left")
    b = _as_lines(right, "right")
    ia = _as_ids(left_ids, a, "left")
    ib = _as_ids(right_ids, b, "right")
    sm = SequenceMatcher(None, ia, ib, autojunk=False)
    return [
        DiffOperation(tag, i1, i2, j1, j2, tuple(a[i1:i2]), tuple(b[j1:j2]))
        for tag, i1, i2, j1, j2 in sm.get_opcodes()
    ]


def tokenize_words(line: str) -> List[Tuple[str, int, int]]:
    return [(m.group(0), m.start(), m.end()) for m in TOKEN_RE.finditer(line)]


def merge_spans(spans: List[Span], gap: int = 0) -> List[Span]:
    if not spans:
        return []
    spans = sorted(spans)
    out = [spans[0]]
    for s, e in spans[1:]:
        last_s, last_e = out[-1]
        if s <= last_e + gap:
            out[-1] = (last_s, max(last_e, e))
        else:
            out.append((s, e))
    return out


def word_spans(old: str, new: str) -> Tuple[Tuple[Span, ...], Tuple[Span, ...]]:
    """Character ranges of the words only in `old` and only in `new`."""
    ta, tb = tokenize_words(old), tokenize_words(new)
    sm = SequenceMatcher(None, [t[0] for t in ta], [t[0] for t in tb], autojunk=False)
    old_spans, new_spans = [], []
    for tag, i1, i2, j1, j2 in sm.get_opcodes():
        if tag == "equal":
            continue
        if i2 > i1:
            old_spans.append((ta[i1][1], ta[i2 - 1][2]))
        if j2 > j1:
            new_spans.append((tb[j1][1], tb[j2 - 1][2]))
    return tuple(merge_spans(old_spans)), tuple(merge_spans(new_spans))


def _whole(line: str) -> Tuple[Span, ...]:
    return ((0, len(line)),) if line else ()


def rows_from_operations(ops: Sequence[DiffOperation], inline: bool = True) -> List[DiffRow]:
    rows: List[DiffRow] = []
    for op in ops:
        if op.tag == "equal":
            for k, line in enumerate(op.old_lines):
                rows.append(DiffRow("equal", line, line, left_index=op.i1 + k, right_index=op.j1 + k))
            continue
        n = min(len(op.old_lines), len(op.new_lines))
        for k in range(n):
            old, new = op.old_lines[k], op.new_lines[k]
            spans = word_spans(old, new) if inline else (_whole(old), _whole(new))
            rows.append(DiffRow("change", old, new, spans[0], spans[1], op.i1 + k, op.j1 + k))
        for k in range(n, len(op.old_lines)):
            old = op.old_lines[k]
            rows.append(DiffRow("delete", old, "", _whole(old), (), left_index=op.i1 + k))
        for k in range(n, len(op.new_lines)):
            new = op.new_lines[k]
            rows.append(DiffRow("insert", "", new, (), _whole(new), right_index=op.j1 + k))
    return rows
