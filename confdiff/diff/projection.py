# =========================
# file: confdiff/diff/projection.py
# =========================
from typing import List, Mapping, Sequence

def project_lines(store: Mapping[str, str], keys: Sequence[str],
                  separator: str = "=", absent_value: str = "") -> List[str]:
    """
    One `key<separator>value` line per key, in the order of `keys`.
    Keys missing from `store` get `absent_value`, so both sides stay index-aligned.
    """
    lines = []
    for k in keys:
        v = store[k] if k in store else absent_value
        lines.append(f"{k}{separator}{v}")
    return lines
