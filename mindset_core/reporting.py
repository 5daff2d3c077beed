# mindset_core/reporting.py
from __future__ import annotations
import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

from .question_bank import SUBSCALE_LABELS
from .report_html import render_report_html

# -------- utils: make any object JSON-safe ----------
def to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(k): to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set, frozenset)):
        return [to_basic(v) for v in x]
    if hasattr(x, "to_dict"):
        return to_basic(x.to_dict())
    if hasattr(x, "__dict__"):
        return to_basic(vars(x))
    return str(x)


def _bullets(items: Any) -> List[str]:
    return [f"• {s}" for s in (items or [])]


def _pct_txt(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value}%"
    return "—"


# -------- plain-text export (share body / printable fallback) ----------
def render_text(result: Any, on: date | None = None) -> str:
    data: Dict[str, Any] = to_basic(result)
    pcts = data.get("subscale_percentages") or {}
    day = (on or date.today()).isoformat()

    lines = [
        "OUTCOME-MINDSET TEST RESULTS",
        f"Date: {day}",
        "",
        f"Overall score: {data.get('overall_score', 0)}/100",
        "",
        f"Archetype: {data.get('archetype', '')}",
        str(data.get("archetype_description", "")),
        "",
        "Profile:",
    ]
    for sub, label in SUBSCALE_LABELS.items():
        lines.append(f"• {label}: {_pct_txt(pcts.get(sub))}")
    lines += ["", "Strengths:", *_bullets(data.get("strengths"))]
    lines += ["", "Growth areas:", *_bullets(data.get("risks"))]
    lines += ["", "Recommendations:", *_bullets(data.get("development_steps"))]
    return "\n".join(lines) + "\n"


# -------- public API used by the CLI ----------
def write_report(result: Any, out_path: str, title: str = "Outcome-Mindset Report") -> str:
    """
    - Converts to plain dict
    - Writes HTML to out_path
    - Also writes JSON next to it
    Returns out_path.
    """
    basic = to_basic(result)

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_report_html(basic, title=title), encoding="utf-8")

    sidecar = out.with_suffix(".json")
    with sidecar.open("w", encoding="utf-8") as f:
        json.dump(basic, f, ensure_ascii=False, indent=2)

    return str(out)
