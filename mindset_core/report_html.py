from __future__ import annotations
from html import escape
from typing import Any, Dict, List

from .config import EXPORT_ENABLED
from .question_bank import SUBSCALE_LABELS

def _as_dict(result: Any) -> Dict[str, Any]:
    if isinstance(result, dict):
        return result
    if hasattr(result, "to_dict"):
        return result.to_dict()
    return dict(getattr(result, "__dict__", {}))

def _band(score: Any) -> str:
    if not isinstance(score, (int, float)) or isinstance(score, bool):
        return "na"
    if score >= 80: return "high"
    if score >= 60: return "mid"
    return "low"

def _row(label: str, score: Any) -> str:
    txt = f"{score}%" if _band(score) != "na" else "—"
    return f"<tr class=\"{_band(score)}\"><td>{escape(label)}</td><td>{txt}</td></tr>"

def _list(title: str, items: Any) -> str:
    lis = "".join(f"<li>{escape(str(s))}</li>" for s in (items or []))
    return f"<h3>{escape(title)}</h3><ul>{lis}</ul>" if lis else ""

def render_report_html(result: Any, title: str = "Outcome-Mindset Report") -> str:
    d = _as_dict(result)
    pcts = d.get("subscale_percentages") or {}
    overall = d.get("overall_score", 0)
    rows = "\n".join(_row(label, pcts.get(sub)) for sub, label in SUBSCALE_LABELS.items())

    ex_blocks: List[str] = []
    for ex in d.get("exercises") or []:
        ex = ex if isinstance(ex, dict) else getattr(ex, "__dict__", {})
        ex_blocks.append(
            "<li>"
            f"<b>{escape(str(ex.get('title', '')))}</b>: {escape(str(ex.get('description', '')))}"
            f" <span>({escape(str(ex.get('action', '')))})</span>"
            "</li>"
        )
    exercises = f"<h3>Micro-exercises</h3><ul>{''.join(ex_blocks)}</ul>" if ex_blocks else ""

    export_links = ""
    if EXPORT_ENABLED:
        report_id = d.get("reportId") or (d.get("meta") or {}).get("reportId")
        if report_id:
            rid = escape(str(report_id))
            export_links = (
                "<p class=\"export-links\">"
                f"<a href=\"/reports/{rid}/text\">Download as text</a> · "
                f"<a href=\"/reports/{rid}\">Download JSON</a>"
                "</p>"
            )

    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<title>{escape(title)}</title>
<style>
 body{{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial}}
 .wrap{{max-width:960px;margin:40px auto;padding:0 16px}}
 h1{{margin:0 0 16px}}
 .overall{{font-size:1.1rem;margin:8px 0 16px}}
 table{{border-collapse:collapse;width:100%}}
 th,td{{text-align:left}}
 tr.high td:last-child{{color:#15803d}}
 tr.mid td:last-child{{color:#a16207}}
 tr.low td:last-child{{color:#b91c1c}}
 tr.na td:last-child{{color:#6b7280}}
</style>
</head>
<body>
<div class="wrap">
  <h1>{escape(title)}</h1>
  <div class="overall"><b>Overall:</b> {overall}/100</div>

  <h2>{escape(str(d.get('archetype', '')))}</h2>
  <p>{escape(str(d.get('archetype_description', '')))}</p>

  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Subscale</th><th>Score</th></tr></thead>
    <tbody>{rows}</tbody>
  </table>

  {_list("Strengths", d.get("strengths"))}
  {_list("Growth areas", d.get("risks"))}
  {_list("Development steps", d.get("development_steps"))}
  {exercises}
  {export_links}
</div>
</body>
</html>"""

def export_report_html(result: Any, path: str) -> str:
    html = render_report_html(result)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return path
