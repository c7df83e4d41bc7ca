# =========================
# file: confdiff/report/aggregate.py
# =========================
from typing import Dict, Any

from confdiff.diff.session import DiffSession

def aggregate_stats(session: DiffSession) -> Dict[str, Any]:
    counts = {"changed": 0, "added": 0, "removed": 0, "unchanged": 0}
    for k in session.keys:
        in_l, in_r = k in session.left, k in session.right
        if in_l and not in_r: counts["removed"] += 1
        elif in_r and not in_l: counts["added"] += 1
        elif session.left[k] != session.right[k]: counts["changed"] += 1
        else: counts["unchanged"] += 1
    summary = {
        "keys_left": len(session.left), "keys_right": len(session.right),
        "keys_total": len(session.keys), "differences": len(session.keys) - counts["unchanged"],
        **counts,
    }
    return {"summary": summary}
