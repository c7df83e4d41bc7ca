# =========================
# file: confdiff/diff/session.py
# =========================
from __future__ import annotations
from typing import List, Mapping, Optional

from confdiff.diff.engine import DiffOperation, DiffRow, diff_lines, rows_from_operations
from confdiff.diff.projection import project_lines
from confdiff.diff.reconcile import reconcile_keys


class DiffSession:
    """
    One comparison of two flat stores. Keys, projected lines, operations and
    rows are all computed here, once; the object is read-only afterwards.
    """
    def __init__(self, left: Mapping[str, str], right: Mapping[str, str],
                 separator: str = "=", absent_value: str = "", inline: bool = True):
        self.left = left
        self.right = right
        self.keys: List[str] = reconcile_keys(left, right)
        self.left_lines: List[str] = project_lines(left, self.keys, separator, absent_value)
        self.right_lines: List[str] = project_lines(right, self.keys, separator, absent_value)
        # match on (key, value) so an empty value never pairs with an absent key
        self.operations: List[DiffOperation] = diff_lines(
            self.left_lines, self.right_lines,
            left_ids=[(k, left.get(k)) for k in self.keys],
            right_ids=[(k, right.get(k)) for k in self.keys],
        )
        self.rows: List[DiffRow] = rows_from_operations(self.operations, inline=inline)

    def key_of(self, row: DiffRow) -> Optional[str]:
        idx = row.left_index if row.left_index is not None else row.right_index
        return self.keys[idx] if idx is not None else None

    def visible_rows(self, include_unchanged: bool = False) -> List[DiffRow]:
        return [r for r in self.rows if include_unchanged or r.changed]

    @property
    def has_changes(self) -> bool:
        return any(r.changed for r in self.rows)
