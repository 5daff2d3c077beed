# mindset_core/engine.py
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .archetypes import ARCHETYPES, DEFAULT_ARCHETYPE, classify
from .config import DEBUG_TRACE, MEASURED_SUBSCALES, SUBSCALES, TRACE_FIELDS
from .exercises import generate_exercises
from .normalize import has_measurement, overall_percentage, subscale_percentages
from .question_bank import load_questions
from .scoring import accumulate
from .types import Answer, Question, TestResult


log = logging.getLogger(__name__)


def _emit_trace(**values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = [f"{key}={values[key]}" for key in TRACE_FIELDS if key in values]
    if ordered:
        log.info("trace %s", " ".join(ordered))


def calculate_test_results(
    answers: Iterable[Any],
    cfg: Mapping[str, Any] | None = None,
) -> TestResult:
    """Score a completed answer set.

    Unknown questions are ignored and missing ones contribute nothing to either side of
    the ratio, so a partial set is scored against what it does cover.
    """

    totals = accumulate(answers)
    pcts = subscale_percentages(totals)
    overall = overall_percentage(totals)

    # nothing measured: every percentage is a placeholder zero, not a real low score
    if has_measurement(totals):
        archetype = classify({s: pcts[s] for s in MEASURED_SUBSCALES})
    else:
        archetype = ARCHETYPES[DEFAULT_ARCHETYPE]

    _emit_trace(
        overall=overall,
        archetype=archetype.key,
        **{s: pcts[s] for s in MEASURED_SUBSCALES},
    )

    return TestResult(
        overall_score=overall,
        subscale_scores={s: totals.earned[s] for s in SUBSCALES},
        subscale_percentages=pcts,
        archetype=archetype.name,
        archetype_key=archetype.key,
        archetype_description=archetype.description,
        strengths=list(archetype.strengths),
        risks=list(archetype.risks),
        development_steps=list(archetype.development_steps),
        exercises=generate_exercises(pcts, cfg),
    )


class QuizSession:
    """Walks the question catalog in order and keeps the latest answer per question."""

    def __init__(self, questions: Optional[List[Question]] = None, cfg: Mapping[str, Any] | None = None):
        self.cfg = dict(cfg or {})
        self.questions: List[Question] = list(questions) if questions is not None else load_questions()
        self.answers: Dict[str, Any] = {}
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def progress(self) -> float:
        if not self.questions:
            return 100.0
        return min(self._pos + 1, len(self.questions)) * 100.0 / len(self.questions)

    def current(self) -> Optional[Question]:
        if 0 <= self._pos < len(self.questions):
            return self.questions[self._pos]
        return None

    def next_question(self) -> Optional[Question]:
        """Return the first unanswered question at or after the cursor."""
        while self._pos < len(self.questions) and self.questions[self._pos].id in self.answers:
            self._pos += 1
        return self.current()

    def answer(self, answer: Answer) -> None:
        self.answers.pop(answer.question_id, None)
        self.answers[answer.question_id] = answer.value
        cur = self.current()
        if cur is not None and cur.id == answer.question_id:
            self._pos += 1

    def back(self) -> Optional[Question]:
        self._pos = max(0, self._pos - 1)
        return self.current()

    def answer_list(self) -> List[Answer]:
        return [Answer(question_id=qid, value=val) for qid, val in self.answers.items()]

    def finalize(self) -> TestResult:
        return calculate_test_results(self.answer_list(), self.cfg)
