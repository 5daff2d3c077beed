from __future__ import annotations
import json, importlib.resources as ir
from typing import Dict, List
from .types import Question
QUESTION_IDS = ["B1","B2","B3","B4","B5","B6","B7","B8","B9","B10"]
SUBSCALE_LABELS: Dict[str, str] = {
    "R1": "Result vs process",
    "R2": "Metrics and thresholds",
    "R3": "Money, risk, quality",
    "R4": "CARE tone",
    "R5": "Stop-rule discipline",
}
def load_questions() -> List[Question]:
    data = ir.files(__package__).joinpath("data/questions.json").read_text(encoding="utf-8")
    raw = json.loads(data)
    return [Question(**r) for r in raw]
