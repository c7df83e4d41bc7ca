# =========================
# file: confdiff/cli/diff_configs.py
# =========================
import argparse
import logging
import sys

from confdiff.io.config_loader import split_sources
from confdiff.service.options import FILE_FORMATS, DiffOptions
from confdiff.service.runner import run_diff
from confdiff.utils.common import load_settings


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        sys.stderr.write(f"Parsing failed.  Reason: {message}\n")
        self.print_help(sys.stderr)
        self.exit(1)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog="confdiff", description="Diff two sets of configuration files key by key.")
    ap.add_argument("-l", "--left", required=True, help="Comma separated configs on the left side of the diff")
    ap.add_argument("-r", "--right", required=True, help="Comma separated configs on the right side of the diff")
    ap.add_argument("-o", "--out", help="Output file to write to (overwritten)")
    ap.add_argument("-i", "--include", action="store_true", default=None, help="Include unchanged keys")
    ap.add_argument("--format", choices=["unified", "tabular"], help="Console output style")
    ap.add_argument("--out-format", choices=FILE_FORMATS, help="Output file style (default: from the file suffix)")
    ap.add_argument("--no-color", action="store_true", help="Plain console output")
    ap.add_argument("--separator", help="Text between key and value (default '=')")
    ap.add_argument("--absent-value", help="Value shown for keys missing on one side (default empty)")
    ap.add_argument("--settings", help="YAML file overriding the packaged defaults")
    ap.add_argument("--log-jsonl", help="Append run events to this JSON-lines file")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = load_settings(args.settings)
    opts = DiffOptions.from_settings(
        settings,
        left=split_sources(args.left),
        right=split_sources(args.right),
        left_header=args.left,
        right_header=args.right,
        out=args.out,
        out_format=args.out_format,
        include_unchanged=args.include,
        console_mode=args.format,
        color=False if args.no_color else None,
        separator=args.separator,
        absent_value=args.absent_value,
        log_jsonl=args.log_jsonl,
    )
    run_diff(opts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
