from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Sequence, Tuple

from . import config
from .types import Answer, SubscaleTotals

log = logging.getLogger(__name__)

RANKING_IDEALS: Dict[str, Tuple[int, ...]] = {
    "B2": (1, 2, 1, 3, 2),
    "B6": (3, 3, 2, 3, 1, 1, 3),
    "B9": (3, 3, 3, 2, 1, 1),
}

MULTI_CORRECT: Dict[str, FrozenSet[int]] = {
    "B5": frozenset({1, 3}),
}


def _as_number(x: Any) -> Optional[float]:
    if isinstance(x, bool):
        return None
    if isinstance(x, (int, float)) and math.isfinite(x):
        return float(x)
    return None


def _as_index(x: Any) -> Optional[int]:
    n = _as_number(x)
    if n is None or n != int(n):
        return None
    return int(n)


def ranking_score(user: Sequence[Any], ideal: Sequence[Any]) -> float:
    """Position-wise closeness of a rank assignment to the ideal weights.

    1.0 per exact match, 0.5 per off-by-one, nothing otherwise. Compares up to
    the shorter of the two sequences.
    """
    score = 0.0
    for u, w in zip(user, ideal):
        a, b = _as_number(u), _as_number(w)
        if a is None or b is None:
            continue
        if a == b:
            score += 1.0
        elif abs(a - b) == 1:
            score += 0.5
    return score


# ---- evaluators: raw answer value -> raw points ----
def _rating(value: Any) -> float:
    v = _as_number(value)
    if v is None:
        return 0.0
    return max(0.0, min(4.0, v - 1.0))


def _ranking(ideal: Tuple[int, ...]) -> Callable[[Any], float]:
    def evaluate(value: Any) -> float:
        if not isinstance(value, (list, tuple)):
            return 0.0
        return ranking_score(value, ideal) / len(ideal) * 4.0
    return evaluate


def _single(points: Dict[int, float]) -> Callable[[Any], float]:
    def evaluate(value: Any) -> float:
        idx = _as_index(value)
        if idx is None:
            return 0.0
        return points.get(idx, 0.0)
    return evaluate


def _multi(correct: FrozenSet[int]) -> Callable[[Any], float]:
    def evaluate(value: Any) -> float:
        if not isinstance(value, (list, tuple, set, frozenset)):
            return 0.0
        picked = {i for i in (_as_index(v) for v in value) if i is not None}
        score = 0.0
        for idx in picked:
            score += 1.0 if idx in correct else -0.5
        return max(0.0, min(2.0, score))
    return evaluate


@dataclass(frozen=True)
class ScoreWeightEntry:
    question_id: str
    kind: str
    raw_max: float
    evaluate: Callable[[Any], float]
    distribution: Tuple[Tuple[str, float], ...]

    def max_points(self) -> Dict[str, float]:
        return {sub: self.raw_max * frac for sub, frac in self.distribution}

    def points(self, value: Any) -> Dict[str, float]:
        raw = score_answer(self, value)
        return {sub: raw * frac for sub, frac in self.distribution}


def score_answer(entry: ScoreWeightEntry, value: Any) -> float:
    """Raw points for one answer value. Malformed values score 0."""
    try:
        return entry.evaluate(value)
    except (TypeError, ValueError):
        return 0.0


WEIGHT_TABLE: Tuple[ScoreWeightEntry, ...] = (
    ScoreWeightEntry("B1", "rating", 4.0, _rating, (("R1", 1.0),)),
    ScoreWeightEntry("B2", "ranking", 4.0, _ranking(RANKING_IDEALS["B2"]), (("R1", 0.7), ("R2", 0.3))),
    ScoreWeightEntry("B3", "single", 2.0, _single({0: 2.0}), (("R5", 1.0),)),
    ScoreWeightEntry("B4", "single", 2.0, _single({1: 2.0, 0: 1.0}), (("R5", 1.0),)),
    ScoreWeightEntry("B5", "multi", 2.0, _multi(MULTI_CORRECT["B5"]), (("R1", 1.0),)),
    ScoreWeightEntry("B6", "ranking", 4.0, _ranking(RANKING_IDEALS["B6"]), (("R1", 0.4), ("R2", 0.4), ("R3", 0.2))),
    ScoreWeightEntry("B7", "single", 2.0, _single({1: 2.0}), (("R1", 0.5), ("R5", 0.5))),
    ScoreWeightEntry("B8", "single", 2.0, _single({0: 2.0}), (("R3", 1.0),)),
    ScoreWeightEntry("B9", "ranking", 4.0, _ranking(RANKING_IDEALS["B9"]), (("R1", 0.5), ("R3", 0.5))),
    ScoreWeightEntry("B10", "single", 2.0, _single({4: 2.0}), (("R1", 0.4), ("R2", 0.3), ("R3", 0.3))),
)

WEIGHTS_BY_ID: Dict[str, ScoreWeightEntry] = {e.question_id: e for e in WEIGHT_TABLE}


def _question_id(answer: Any) -> Any:
    if isinstance(answer, Answer):
        return answer.question_id
    if isinstance(answer, dict):
        return answer.get("question_id", answer.get("questionId"))
    if isinstance(answer, (list, tuple)) and len(answer) == 2:
        return answer[0]
    return None


def _answer_value(answer: Any) -> Any:
    if isinstance(answer, Answer):
        return answer.value
    if isinstance(answer, dict):
        return answer.get("value")
    if isinstance(answer, (list, tuple)) and len(answer) == 2:
        return answer[1]
    return None


def latest_answers(answers: Iterable[Any]) -> Dict[str, Any]:
    """Collapse an answer collection to {question_id: value}, last one wins.

    Accepts Answer objects, (id, value) pairs or {"questionId"/"question_id", "value"}
    mappings. Entries without a usable id are dropped.
    """
    out: Dict[str, Any] = {}
    for ans in answers or ():
        qid = _question_id(ans)
        if not isinstance(qid, str):
            log.debug("dropping answer without question id: %r", ans)
            continue
        out.pop(qid, None)
        out[qid] = _answer_value(ans)
    return out


def accumulate(answers: Iterable[Any]) -> SubscaleTotals:
    totals = SubscaleTotals()
    for qid, value in latest_answers(answers).items():
        entry = WEIGHTS_BY_ID.get(qid)
        if entry is None:
            log.debug("skipping unknown question %s", qid)
            continue
        earned = entry.points(value)
        if config.DEBUG_TRACE:
            log.debug("%s %s earned=%s", qid, entry.kind, earned)
        for sub, pts in entry.max_points().items():
            totals.add(sub, earned[sub], pts)
    return totals


__all__ = [
    "RANKING_IDEALS",
    "MULTI_CORRECT",
    "ScoreWeightEntry",
    "WEIGHT_TABLE",
    "WEIGHTS_BY_ID",
    "ranking_score",
    "score_answer",
    "latest_answers",
    "accumulate",
]
