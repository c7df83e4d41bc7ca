# =========================
# file: confdiff/service/options.py
# =========================
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from confdiff.report.markup import RenderMode

FILE_FORMATS = ("tabular", "unified", "json", "html")


@dataclass
class DiffOptions:
    """Everything one run needs; built once by the CLI or the web UI."""
    left: List[str]
    right: List[str]
    left_header: str = "left"
    right_header: str = "right"
    out: Optional[str] = None
    out_format: Optional[str] = None
    include_unchanged: bool = False
    console_mode: RenderMode = RenderMode.UNIFIED
    color: bool = True
    inline: bool = True
    separator: str = "="
    absent_value: str = ""
    log_jsonl: Optional[str] = None

    def __post_init__(self):
        self.console_mode = RenderMode(self.console_mode)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], **kwargs) -> "DiffOptions":
        proj = settings.get("projection", {}) or {}
        rend = settings.get("render", {}) or {}
        base = dict(
            separator=str(proj.get("separator", "=")),
            absent_value="" if proj.get("absent_value") is None else str(proj.get("absent_value")),
            console_mode=RenderMode(rend.get("console_mode", "unified")),
            out_format=rend.get("file_mode"),
            color=bool(rend.get("color", True)),
            include_unchanged=bool(rend.get("include_unchanged", False)),
            inline=bool(rend.get("inline", True)),
        )
        base.update({k: v for k, v in kwargs.items() if v is not None})
        return cls(**base)

    def resolved_out_format(self) -> str:
        if self.out_format:
            if self.out_format not in FILE_FORMATS:
                raise ValueError(f"unknown output format: {self.out_format}")
            return self.out_format
        suffix = Path(self.out or "").suffix.lower()
        if suffix == ".json":
            return "json"
        if suffix in (".html", ".htm"):
            return "html"
        return "tabular"
