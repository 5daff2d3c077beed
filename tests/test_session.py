from __future__ import annotations

from mindset_core.engine import QuizSession, calculate_test_results
from mindset_core.question_bank import QUESTION_IDS, load_questions
from mindset_core.types import Answer

from tests.conftest import IDEAL_VALUES


def test_catalog_matches_weight_table():
    qs = load_questions()
    assert [q.id for q in qs] == QUESTION_IDS
    kinds = {q.id: q.type for q in qs}
    assert kinds["B1"] == "likert"
    assert [k for k, v in kinds.items() if v == "ranking"] == ["B2", "B6", "B9"]
    assert kinds["B5"] == "multi-choice"
    sizes = {q.id: len(q.options or []) for q in qs}
    assert (sizes["B2"], sizes["B5"], sizes["B6"], sizes["B9"], sizes["B10"]) == (5, 6, 7, 6, 5)


def test_session_walks_catalog_in_order():
    sess = QuizSession()
    seen = []
    while True:
        q = sess.next_question()
        if q is None:
            break
        seen.append(q.id)
        sess.answer(Answer(q.id, IDEAL_VALUES[q.id]))
    assert seen == QUESTION_IDS
    assert sess.progress() == 100.0
    assert sess.finalize() == calculate_test_results(sess.answer_list())
    assert sess.finalize().overall_score == 100


def test_back_and_reanswer_keeps_latest_value():
    sess = QuizSession()
    q = sess.next_question()
    sess.answer(Answer(q.id, 1))
    assert sess.back().id == "B1"
    sess.answer(Answer("B1", 5))
    assert sess.answers["B1"] == 5
    assert sess.next_question().id == "B2"


def test_progress_counts_current_question():
    sess = QuizSession()
    assert sess.progress() == 10.0
    sess.answer(Answer("B1", 3))
    assert sess.progress() == 20.0
