# =========================
# file: confdiff/diff/reconcile.py
# =========================
from typing import List, Mapping

def reconcile_keys(left: Mapping[str, str], right: Mapping[str, str]) -> List[str]:
    """Sorted union of the keys of both sides (plain code point order)."""
    return sorted(set(left) | set(right))
