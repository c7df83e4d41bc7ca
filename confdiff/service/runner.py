# file: confdiff/service/runner.py
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Any, Dict, TextIO

from confdiff.diff.session import DiffSession
from confdiff.io.config_loader import merge_sources
from confdiff.io.writer_report import rows_payload, write_html_report, write_json_report, write_text
from confdiff.report.aggregate import aggregate_stats
from confdiff.report.markup import RenderMode
from confdiff.report.render import render
from confdiff.service.options import DiffOptions
from confdiff.utils.logging import JsonLogger
from confdiff.utils.timing import Timer

logger = logging.getLogger(__name__)


def _write_file_sink(options: DiffOptions, session: DiffSession, stats: Dict[str, Any]):
    fmt = options.resolved_out_format()
    out = Path(options.out)
    if fmt == "json":
        write_json_report(out, session, stats, options.left, options.right, options.include_unchanged)
    elif fmt == "html":
        write_html_report(out, session, stats, options.left, options.right, options.include_unchanged)
    else:
        # file output never carries ANSI codes
        text = render(session, RenderMode(fmt), color=False,
                      include_unchanged=options.include_unchanged,
                      left_header=options.left_header, right_header=options.right_header)
        write_text(out, text)


# ---------- main ----------
def run_diff(options: DiffOptions, stream: TextIO = None) -> Dict[str, Any]:
    """
    Load -> reconcile/project/diff -> render to `stream` (stdout by default)
    -> optional file sink. A failing file sink is logged and reported in the
    result under "out_error"; everything else propagates.
    """
    stream = stream or sys.stdout
    with JsonLogger(options.log_jsonl) as jlog:
        timer = Timer(logger=jlog)
        jlog.log({"event": "start", "left": options.left, "right": options.right})

        with timer.section("load"):
            left = merge_sources(options.left)
            right = merge_sources(options.right)

        with timer.section("diff"):
            session = DiffSession(left, right, separator=options.separator,
                                  absent_value=options.absent_value, inline=options.inline)
            stats = aggregate_stats(session)

        with timer.section("render"):
            text = render(session, options.console_mode, color=options.color,
                          include_unchanged=options.include_unchanged,
                          left_header=options.left_header, right_header=options.right_header)
        stream.write(text)
        stream.flush()

        res: Dict[str, Any] = {
            "ok": True,
            "summary": stats["summary"],
            "rows": rows_payload(session, options.include_unchanged),
            "text": text,
            "out": None,
        }
        if options.out:
            try:
                with timer.section("write_out"):
                    _write_file_sink(options, session, stats)
                res["out"] = options.out
            except (OSError, ValueError) as e:
                logger.error(f"Could not write diff to {options.out}: {e}")
                res["out_error"] = str(e)

        jlog.log({"event": "done", "summary": stats["summary"], "sections": timer.sections})
        if session.has_changes:
            logger.info(f"{stats['summary']['differences']} differing keys out of {stats['summary']['keys_total']}")
        else:
            logger.info("no differences")
        return res
