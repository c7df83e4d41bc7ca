# =========================
# file: confdiff/utils/logging.py
# =========================
import json
from pathlib import Path
from typing import Dict, Any, Optional

class JsonLogger:
    """Append-only JSON-lines run log. `path=None` gives a logger that drops events."""
    def __init__(self, path: Optional[Path]):
        self.path = Path(path) if path else None
        self.f = open(self.path, "a", encoding="utf-8") if self.path else None

    def log(self, obj: Dict[str, Any]):
        if self.f is None:
            return
        self.f.write(json.dumps(obj, ensure_ascii=False) + "\n")
        self.f.flush()

    def close(self):
        if self.f is not None:
            self.f.close()
            self.f = None

    def __enter__(self):
        return self

    def __exit__(self, ex_type, ex_value, trace):
        self.close()
