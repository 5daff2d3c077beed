"""Flat result rows for spreadsheet-style logging, in JSON or CSV."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List
import csv
import io

from .config import NOT_MEASURED

_FIELDS: tuple[str, ...] = (
    "timestamp",
    "session_id",
    "overall_score",
    "archetype",
    "R1",
    "R2",
    "R3",
    "R4",
    "R5",
)


def result_row(result: Any, session_id: str = "", created_at: str = "") -> Dict[str, Any]:
    """Build one log row from a TestResult or its dict form."""

    data = result if isinstance(result, dict) else result.to_dict()
    pcts = data.get("subscale_percentages") or {}
    row: Dict[str, Any] = {
        "timestamp": created_at,
        "session_id": session_id,
        "overall_score": data.get("overall_score", 0),
        "archetype": data.get("archetype", ""),
    }
    for sub in ("R1", "R2", "R3", "R5"):
        row[sub] = pcts.get(sub, 0)
    row["R4"] = NOT_MEASURED
    return row


def _normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in _FIELDS:
        val = row.get(key)
        if key in {"overall_score", "R1", "R2", "R3", "R5"}:
            try:
                out[key] = int(val)
            except (TypeError, ValueError):
                out[key] = 0
        elif key == "R4":
            out[key] = NOT_MEASURED
        else:
            out[key] = "" if val is None else str(val)
    return out


def to_json(rows: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a JSON-safe payload for result export."""

    normalized: List[Dict[str, Any]] = [_normalize_row(r or {}) for r in rows]
    return {"results": normalized}


def to_csv(rows: Iterable[Dict[str, Any]]) -> str:
    """Render result rows as CSV with a fixed header."""

    normalized = [_normalize_row(r or {}) for r in rows]
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS)
    writer.writeheader()
    for row in normalized:
        writer.writerow(row)
    return buf.getvalue()


__all__ = ["result_row", "to_json", "to_csv"]
