from __future__ import annotations

import json
import logging
from typing import List

from .config import DEBUG_TRACE
from .engine import QuizSession
from .scoring import MULTI_CORRECT, RANKING_IDEALS
from .types import Answer, Question


def _maybe_enable_trace() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if DEBUG_TRACE:
        logging.getLogger("mindset_core.engine").setLevel(logging.INFO)


_SINGLE_KEYS = {"B3": 0, "B4": 1, "B7": 1, "B8": 0, "B10": 4}


def _auto_answer(q: Question) -> Answer:
    if q.type == "likert":
        return Answer(question_id=q.id, value=5)
    if q.type == "ranking":
        return Answer(question_id=q.id, value=list(RANKING_IDEALS[q.id]))
    if q.type == "multi-choice":
        return Answer(question_id=q.id, value=sorted(MULTI_CORRECT[q.id]))
    return Answer(question_id=q.id, value=_SINGLE_KEYS.get(q.id, 0))


def run_smoke_session() -> None:
    _maybe_enable_trace()

    session = QuizSession()
    logging.info("Starting scripted run over %d questions", len(session.questions))

    asked: List[str] = []
    while True:
        q = session.next_question()
        if q is None:
            break
        asked.append(q.id)
        session.answer(_auto_answer(q))

    result = session.finalize()
    logging.info("Answered: %s", ", ".join(asked))
    logging.info("Overall=%s archetype=%s", result.overall_score, result.archetype)
    for sub, pct in result.subscale_percentages.items():
        logging.info("  %s: %s", sub, pct)
    logging.info("Exercises: %d", len(result.exercises))
    logging.debug("payload %s", json.dumps(result.to_dict(), ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    run_smoke_session()
