# file: confdiff/io/writer_report.py
# =========================
# File sinks: plain text, JSON report, standalone HTML report
# =========================
from pathlib import Path
import json
import html
from typing import Dict, Any, List, Sequence

from confdiff.diff.session import DiffSession
from confdiff.report.highlight import render_marked

def write_text(path: Path, text: str):
    Path(path).write_text(text, encoding="utf-8")

def rows_payload(session: DiffSession, include_unchanged: bool = False) -> List[Dict[str, Any]]:
    out = []
    for r in session.visible_rows(include_unchanged):
        out.append({
            "tag": r.tag,
            "key": session.key_of(r),
            "old": r.old_line,
            "new": r.new_line,
            "old_spans": [list(s) for s in r.old_spans],
            "new_spans": [list(s) for s in r.new_spans],
        })
    return out

def write_json_report(path: Path, session: DiffSession, stats: Dict[str, Any],
                      left_sources: Sequence[str], right_sources: Sequence[str],
                      include_unchanged: bool = False):
    obj = {
        "summary": stats["summary"],
        "rows": rows_payload(session, include_unchanged),
        "meta": {"left": list(left_sources), "right": list(right_sources)},
    }
    Path(path).write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")

def _esc(s: str) -> str:
    return html.escape(s, quote=False)

def _get_css() -> str:
    return """
    :root {
      --bg: #f8fafc; --card: #ffffff; --text: #0f172a; --muted: #64748b; --border: #e2e8f0;
      --primary: #2563eb; --danger: #ef4444; --warning: #f59e0b; --success: #10b981;
    }
    body { font-family: system-ui, -apple-system, sans-serif; background: var(--bg); color: var(--text); margin: 0; padding: 20px; line-height: 1.5; }
    .container { max-width: 1200px; margin: 0 auto; }
    h1 { font-size: 24px; font-weight: 700; color: var(--primary); margin: 0; }
    .meta { font-size: 13px; color: var(--muted); font-family: monospace; }
    .card { background: var(--card); border: 1px solid var(--border); border-radius: 12px; padding: 20px; margin: 20px 0; }
    .metrics-grid { display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px; }
    .metric { text-align: center; padding: 16px; background: #f1f5f9; border-radius: 8px; }
    .metric-val { font-size: 24px; font-weight: 700; display: block; }
    .metric-label { font-size: 12px; color: var(--muted); text-transform: uppercase; letter-spacing: 0.5px; }
    table { width: 100%; border-collapse: collapse; font-family: 'Consolas', monospace; font-size: 13px; }
    th, td { border: 1px solid var(--border); padding: 6px 10px; text-align: left; vertical-align: top; white-space: pre-wrap; word-break: break-all; }
    th { background: #f1f5f9; color: var(--muted); }
    tr.equal td { color: var(--muted); }
    mark.old { background: #fecaca; }
    mark.new { background: #fef08a; }
    """

def write_html_report(path: Path, session: DiffSession, stats: Dict[str, Any],
                      left_sources: Sequence[str], right_sources: Sequence[str],
                      include_unchanged: bool = False):
    summary = stats["summary"]
    rows = session.visible_rows(include_unchanged)

    parts = [f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>confdiff report</title>
  <style>{_get_css()}</style>
</head>
<body>
<div class="container">
  <header>
    <h1>Configuration diff</h1>
    <div class="meta">left: {_esc(", ".join(left_sources))}</div>
    <div class="meta">right: {_esc(", ".join(right_sources))}</div>
  </header>
  <section class="card">
    <div class="metrics-grid">
      <div class="metric"><span class="metric-val" style="color:var(--warning)">{summary['changed']}</span><span class="metric-label">Changed</span></div>
      <div class="metric"><span class="metric-val" style="color:var(--success)">{summary['added']}</span><span class="metric-label">Added</span></div>
      <div class="metric"><span class="metric-val" style="color:var(--danger)">{summary['removed']}</span><span class="metric-label">Removed</span></div>
      <div class="metric"><span class="metric-val">{summary['keys_total']}</span><span class="metric-label">Keys</span></div>
    </div>
  </section>
  <section class="card">
    <table>
      <tr><th>left</th><th>right</th></tr>
"""]
    for r in rows:
        parts.append(
            f'      <tr class="{r.tag}"><td>{render_marked(r.old_line, r.old_spans, "old")}</td>'
            f'<td>{render_marked(r.new_line, r.new_spans, "new")}</td></tr>\n'
        )
    if not rows:
        parts.append('      <tr><td colspan="2">No differences.</td></tr>\n')
    parts.append("""    </table>
  </section>
</div></body></html>
""")
    Path(path).write_text("".join(parts), encoding="utf-8")
