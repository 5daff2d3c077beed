"""JSON-file persistence for finished quiz reports and in-progress sessions.

Everything lives under ``DATA_DIR``: one file per report, an index of report
metadata used for per-user listings and exports, and a single file holding the
answers of sessions that have not been finished yet.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple


log = logging.getLogger(__name__)

DATA_ROOT = Path(os.getenv("DATA_DIR", "data")).resolve()
REPORTS_DIR = DATA_ROOT / "reports"
REPORT_INDEX_PATH = DATA_ROOT / "reports_index.json"
SESSIONS_PATH = DATA_ROOT / "sessions_active.json"

_LOCK = threading.Lock()


def _read_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("unreadable %s: %s", path, exc)
        return default


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True), encoding="utf-8")
    tmp.replace(path)


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _report_path(report_id: str) -> Path:
    return REPORTS_DIR / f"{report_id}.json"


def _index() -> Dict[str, Dict[str, Any]]:
    return _read_json(REPORT_INDEX_PATH, {})


# ---- reports ----
def save_report(report_id: str, report: Dict[str, Any], metadata: Dict[str, Any]) -> None:
    with _LOCK:
        index = _index()
        index[report_id] = metadata
        _write_json(REPORT_INDEX_PATH, index)
    _write_json(_report_path(report_id), report)


def load_report(report_id: str) -> Optional[Dict[str, Any]]:
    path = _report_path(report_id)
    if not path.exists():
        return None
    return _read_json(path, None)


def delete_report(report_id: str) -> bool:
    with _LOCK:
        index = _index()
        removed = index.pop(report_id, None) is not None
        if removed:
            _write_json(REPORT_INDEX_PATH, index)
    path = _report_path(report_id)
    if path.exists():
        path.unlink()
    return removed


def iter_reports() -> Iterator[Tuple[str, Dict[str, Any], Dict[str, Any]]]:
    """Yield (report_id, metadata, report) ordered by creation time."""
    index = _index()
    for rid, meta in sorted(index.items(), key=lambda kv: kv[1].get("createdAt", "")):
        report = load_report(rid)
        if report is not None:
            yield rid, meta, report


def list_reports_for_user(user_id: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for rid, meta in _index().items():
        if meta.get("userId") == user_id:
            out.append({"id": rid, **{k: v for k, v in meta.items() if k != "id"}})
    out.sort(key=lambda r: r.get("createdAt", ""), reverse=True)
    return out


def find_report_by_session(session_id: str) -> Optional[Dict[str, Any]]:
    for rid, meta in _index().items():
        if meta.get("sessionId") == session_id:
            return load_report(rid)
    return None


# ---- in-progress sessions ----
def _sessions() -> Dict[str, Dict[str, Any]]:
    return _read_json(SESSIONS_PATH, {})


def record_active_session(session_id: str, payload: Dict[str, Any]) -> None:
    with _LOCK:
        sessions = _sessions()
        sessions[session_id] = payload
        _write_json(SESSIONS_PATH, sessions)


def update_active_session(session_id: str, updates: Dict[str, Any]) -> None:
    with _LOCK:
        sessions = _sessions()
        if session_id not in sessions:
            return
        sessions[session_id].update(updates)
        _write_json(SESSIONS_PATH, sessions)


def clear_active_session(session_id: str) -> None:
    with _LOCK:
        sessions = _sessions()
        if sessions.pop(session_id, None) is not None:
            _write_json(SESSIONS_PATH, sessions)


def active_sessions_for_user(user_id: str) -> List[Dict[str, Any]]:
    out = [p for p in _sessions().values() if p.get("userId") == user_id]
    out.sort(key=lambda r: r.get("startedAt", ""), reverse=True)
    return out


def load_all_active_sessions() -> Dict[str, Dict[str, Any]]:
    return _sessions()
