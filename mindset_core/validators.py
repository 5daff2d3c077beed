from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
from .types import Question
from .question_bank import load_questions
from .scoring import latest_answers
def _int(v: Any) -> Optional[int]:
    if isinstance(v, bool): return None
    if isinstance(v, int): return v
    if isinstance(v, float) and v.is_integer(): return int(v)
    return None
def _ranking_issue(q: Question, value: Any) -> Optional[str]:
    if not isinstance(value, (list, tuple)):
        return f"{q.id}: ranking must be a list"
    n = len(q.options or [])
    if len(value) != n:
        return f"{q.id}: expected {n} rank entries, got {len(value)}"
    ranks = [_int(v) for v in value]
    if any(r is None or r < 0 or r > 3 for r in ranks):
        return f"{q.id}: ranks must be integers 0-3"
    picked = [r for r in ranks if r]
    if len(picked) != 3 or len(set(picked)) != 3:
        return f"{q.id}: exactly three distinct priorities 1-3 required"
    return None
def _answer_issue(q: Question, value: Any) -> Optional[str]:
    if value is None:
        return f"{q.id}: missing answer"
    if q.type == "likert":
        v = _int(value)
        if v is None or not 1 <= v <= 5: return f"{q.id}: rating must be 1-5"
        return None
    if q.type == "ranking":
        return _ranking_issue(q, value)
    n = len(q.options or [])
    if q.type == "single-choice":
        v = _int(value)
        if v is None or not 0 <= v < n: return f"{q.id}: choice index out of range"
        return None
    if q.type == "multi-choice":
        if not isinstance(value, (list, tuple, set, frozenset)) or not value:
            return f"{q.id}: select at least one option"
        idx = [_int(v) for v in value]
        if any(i is None or not 0 <= i < n for i in idx): return f"{q.id}: choice index out of range"
        return None
    return None
def completeness_issues(answers: Iterable[Any], questions: List[Question] | None = None) -> List[str]:
    """Optional pre-pass before scoring; the engine itself never rejects input."""
    qs = questions if questions is not None else load_questions()
    given: Dict[str, Any] = latest_answers(answers)
    issues: List[str] = []
    for q in qs:
        if q.id not in given:
            issues.append(f"{q.id}: missing answer"); continue
        issue = _answer_issue(q, given[q.id])
        if issue: issues.append(issue)
    return issues
def is_complete(answers: Iterable[Any], questions: List[Question] | None = None) -> bool:
    return not completeness_issues(answers, questions)
