# ================================
# file: webui/app.py
# ================================
from __future__ import annotations
import io
import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from confdiff.errors import SourceLoadError
from confdiff.report.markup import RenderMode
from confdiff.service.options import DiffOptions
from confdiff.service.runner import run_diff
from confdiff.utils.common import load_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="confdiff WebUI", version="1.0.0")

_INDEX_HTML = """<!doctype html>
<html><head><meta charset="utf-8"><title>confdiff</title></head>
<body style="font-family:system-ui;margin:24px">
<h2>confdiff</h2>
<form action="/api/diff" method="post" enctype="multipart/form-data">
  <p>Left (overlay order): <input type="file" name="left" multiple required></p>
  <p>Right (overlay order): <input type="file" name="right" multiple required></p>
  <p><label><input type="checkbox" name="include" value="true"> include unchanged keys</label></p>
  <p><select name="mode"><option>unified</option><option>tabular</option></select></p>
  <button type="submit">Diff</button>
</form>
</body></html>
"""


# ---------- utils ----------
def _read_json_file(path: Path) -> Dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"invalid json: {e}")

def _save_uploads(files: List[UploadFile], tmpdir: Path, prefix: str) -> List[str]:
    paths = []
    for i, f in enumerate(files):
        # the suffix picks the parser; unknown suffixes are read as properties
        name = Path(f.filename or "").name or "upload"
        p = tmpdir / f"{prefix}{i}_{name}"
        with open(p, "wb") as out:
            shutil.copyfileobj(f.file, out)
        paths.append(str(p))
    return paths


# ---------- routes ----------
@app.get("/", response_class=HTMLResponse)
def home():
    return HTMLResponse(_INDEX_HTML)

@app.get("/api/settings")
def get_settings():
    return load_settings()

@app.get("/api/report")
def get_report(path: str):
    p = Path(path)
    if not p.exists():
        raise HTTPException(status_code=404, detail=f"report not found: {p}")
    if p.suffix.lower() != ".json":
        raise HTTPException(status_code=400, detail="path must be a .json file")
    return JSONResponse(content=_read_json_file(p), media_type="application/json")

@app.post("/api/diff")
async def diff(
    left: List[UploadFile] = File(...),
    right: List[UploadFile] = File(...),
    include: bool = Form(False),
    mode: str = Form("unified"),
    color: bool = Form(False),
):
    try:
        console_mode = RenderMode(mode)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"unknown mode: {mode}")

    tmpdir = Path(tempfile.mkdtemp(prefix="confdiff_ui_"))
    try:
        left_paths = _save_uploads(left, tmpdir, "L")
        right_paths = _save_uploads(right, tmpdir, "R")
        opts = DiffOptions.from_settings(
            load_settings(),
            left=left_paths,
            right=right_paths,
            left_header=",".join(Path(f.filename).name for f in left),
            right_header=",".join(Path(f.filename).name for f in right),
            include_unchanged=include,
            console_mode=console_mode,
            color=color,
        )
        res = run_diff(opts, stream=io.StringIO())
        return {"ok": True, "summary": res["summary"], "text": res["text"], "rows": res["rows"]}
    except HTTPException:
        raise
    except (FileNotFoundError, SourceLoadError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("diff failed")
        raise HTTPException(status_code=500, detail=f"diff failed: {e}")
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)
