# =========================
# file: confdiff/io/config_loader.py
# =========================
from __future__ import annotations
import configparser
import json
import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Sequence, Tuple

import yaml

from confdiff.errors import SourceLoadError

logger = logging.getLogger(__name__)

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_KEY_TERMINATORS = "=: \t\f"
_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")


@dataclass(frozen=True, eq=False)
class ConfigStore(Mapping):
    """Flat key -> value view of one side, merged from its sources in order."""
    data: Mapping[str, str] = field(default_factory=dict)
    sources: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __getitem__(self, key: str) -> str:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


def split_sources(arg: str) -> List[str]:
    """'a.properties, ,b.yaml' -> ['a.properties', 'b.yaml']"""
    if not arg:
        return []
    return [p.strip() for p in arg.split(",") if p.strip()]


def _to_str(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (list, tuple)):
        return ",".join(json.dumps(x, ensure_ascii=False) if isinstance(x, (dict, list)) else _to_str(x) for x in v)
    return str(v)


def flatten(d: Any, prefix: str = "") -> Dict[str, str]:
    out: Dict[str, str] = {}
    if not isinstance(d, dict):
        if d is not None:
            out[prefix or "root"] = _to_str(d)
        return out
    for k, v in d.items():
        nk = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict) and v:
            out.update(flatten(v, nk))
        else:
            out[nk] = _to_str(v)
    return out


# ---------- .properties ----------
def _logical_lines(text: str) -> Iterator[str]:
    buf = None
    for raw in text.splitlines():
        line = raw.lstrip() if buf is not None else raw
        if buf is None:
            stripped = line.lstrip()
            if not stripped or stripped[0] in "#!":
                continue
            line = stripped
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            buf = (buf or "") + line[:-1]
            continue
        yield (buf or "") + line
        buf = None
    if buf is not None:
        yield buf


def _unescape(s: str) -> str:
    out = []
    i = 0
    while i < len(s):
        c = s[i]
        if c != "\\" or i + 1 == len(s):
            out.append(c)
            i += 1
            continue
        nxt = s[i + 1]
        if nxt == "u":
            if not _HEX4_RE.fullmatch(s[i + 2:i + 6]):
                raise ValueError(f"malformed \\uxxxx escape: {s[i:i + 6]!r}")
            out.append(chr(int(s[i + 2:i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    # \uD83D\uDE00 style surrogate pairs become one code point; a lone surrogate is an error
    return "".join(out).encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def _split_property(line: str) -> Tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _KEY_TERMINATORS:
            break
        i += 1
    key, rest = line[:i], line[i:]
    rest = rest.lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> Dict[str, str]:
    m: Dict[str, str] = {}
    for line in _logical_lines(text):
        k, v = _split_property(line)
        m[k] = v
    return m


# ---------- other formats ----------
def _parse_yaml(text: str) -> Dict[str, str]:
    return flatten(yaml.safe_load(text))


def _parse_json(text: str) -> Dict[str, str]:
    return flatten(json.loads(text))


def _parse_ini(text: str) -> Dict[str, str]:
    # DEFAULT is kept as an ordinary section instead of leaking into every other one.
    cp = configparser.ConfigParser(interpolation=None, strict=False, default_section="\x00")
    cp.optionxform = str
    cp.read_string(text)
    out = {}
    for section in cp.sections():
        for k, v in cp.items(section, raw=True):
            out[f"{section}.{k}"] = v or ""
    return out


def _parse_xml(text: str) -> Dict[str, str]:
    root = ET.fromstring(text)
    out: Dict[str, str] = {}

    def put(k: str, v: str):
        out[k] = f"{out[k]},{v}" if k in out else v

    def walk(n, path: str):
        for k, v in n.attrib.items():
            put(f"{path}[@{k}]" if path else f"[@{k}]", v)
        if path and (n.text or "").strip():
            put(path, n.text.strip())
        for ch in list(n):
            tag = ch.tag.split("}")[-1]
            walk(ch, f"{path}.{tag}" if path else tag)

    walk(root, "")
    return out


_PARSERS = {
    ".properties": parse_properties,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
    ".ini": _parse_ini,
    ".cfg": _parse_ini,
    ".xml": _parse_xml,
}


def load_source(path: str) -> Dict[str, str]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config source not found: {path}")
    parser = _PARSERS.get(p.suffix.lower())
    if parser is None:
        logger.warning(f"Unknown config suffix for {path}, reading it as .properties")
        parser = parse_properties
    try:
        return parser(p.read_text(encoding="utf-8"))
    except (ValueError, yaml.YAMLError, configparser.Error, ET.ParseError) as e:
        raise SourceLoadError(path, str(e)) from e


def merge_sources(paths: Sequence[str]) -> ConfigStore:
    """Later paths override earlier ones key by key."""
    if not paths:
        logger.warning("No config sources given, side is empty")
    merged: Dict[str, str] = {}
    for p in paths:
        values = load_source(p)
        logger.info(f"Loaded {len(values)} keys from {p}")
        merged.update(values)
    return ConfigStore(data=merged, sources=tuple(paths))
