# confdiff/utils/common.py
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"

def load_yaml(path) -> Dict[str, Any]:
    """Read a YAML mapping; an empty file gives {}."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def deep_update(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out

def load_settings(path=None) -> Dict[str, Any]:
    """Packaged defaults, with the optional user settings file merged over them."""
    base = load_yaml(DEFAULT_SETTINGS_PATH) if DEFAULT_SETTINGS_PATH.exists() else {}
    if path:
        base = deep_update(base, load_yaml(path))
    return base
