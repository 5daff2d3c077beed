from __future__ import annotations

import random

from mindset_core.archetypes import DEFAULT_ARCHETYPE
from mindset_core.config import NOT_MEASURED
from mindset_core.engine import calculate_test_results
from mindset_core.types import Answer

from tests.conftest import WORST_VALUES, build_answers


def _in_range(result) -> bool:
    vals = [result.overall_score] + [v for k, v in result.subscale_percentages.items() if k != "R4"]
    return all(isinstance(v, int) and 0 <= v <= 100 for v in vals)


def test_ideal_answers_score_full_marks(ideal_answers):
    res = calculate_test_results(ideal_answers)
    assert res.overall_score == 100
    assert res.subscale_percentages == {"R1": 100, "R2": 100, "R3": 100, "R4": NOT_MEASURED, "R5": 100}
    assert res.archetype_key == "integrator"
    assert len(res.strengths) == len(res.risks) == len(res.development_steps) == 3


def test_worst_answers_are_process_focused(worst_answers):
    res = calculate_test_results(worst_answers)
    assert res.overall_score == 0
    assert res.archetype_key == "process_stakhanovite"
    assert [e.subscale for e in res.exercises] == ["R1", "R2", "R3", "R5"]


def test_no_answers_yields_zeros_and_default_archetype():
    res = calculate_test_results([])
    assert res.overall_score == 0
    assert res.subscale_percentages == {"R1": 0, "R2": 0, "R3": 0, "R4": NOT_MEASURED, "R5": 0}
    assert res.archetype_key == DEFAULT_ARCHETYPE


def test_only_unknown_questions_is_the_same_as_no_answers():
    assert calculate_test_results([Answer("Q99", 3)]) == calculate_test_results([])


def test_partial_set_is_scored_against_what_it_covers():
    res = calculate_test_results([Answer("B1", 5)])
    assert res.subscale_percentages["R1"] == 100
    assert res.subscale_percentages["R2"] == 0
    assert res.overall_score == 100
    assert res.archetype_key == "goal_romantic"


def test_overall_weighs_points_not_percentages():
    # R1 4/4 and R5 0/2: 4/6, not the 50 an average would give
    res = calculate_test_results([Answer("B1", 5), Answer("B3", 1)])
    assert res.subscale_percentages["R1"] == 100
    assert res.subscale_percentages["R5"] == 0
    assert res.overall_score == 67


def test_percentages_round_half_up():
    # R1 earns 1 of 8 points: 12.5 rounds to 13
    res = calculate_test_results([Answer("B1", 2), Answer("B5", []), Answer("B9", [1, 1, 1, 0, 3, 3])])
    assert res.subscale_percentages["R1"] == 13
    assert res.overall_score == 10


def test_raw_subscale_scores_are_reported():
    res = calculate_test_results([Answer("B10", 4)])
    assert res.subscale_scores["R1"] == 0.8
    assert res.subscale_scores["R4"] == 0.0


def test_accepts_pairs_and_frontend_mappings():
    pairs = calculate_test_results([("B1", 5), ("B3", 0)])
    dicts = calculate_test_results([{"questionId": "B1", "value": 5}, {"questionId": "B3", "value": 0}])
    assert pairs == dicts
    assert pairs.overall_score == 100


def test_engine_is_idempotent(valid_answers):
    first = calculate_test_results(valid_answers)
    second = calculate_test_results(valid_answers)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_percentages_stay_in_bounds_for_arbitrary_input():
    rng = random.Random(7)
    junk = [None, "x", -5, 99, 2.5, [9, 9, 9], [], [0, 1, 2, 3, 4, 5, 6, 7], {"a": 1}, True]
    for _ in range(200):
        answers = []
        for qid in WORST_VALUES:
            if rng.random() < 0.2:
                continue
            if rng.random() < 0.3:
                val = rng.choice(junk)
            else:
                val = [rng.randint(0, 3) for _ in range(rng.randint(0, 8))] if rng.random() < 0.5 else rng.randint(-1, 6)
            answers.append(Answer(qid, val))
        res = calculate_test_results(answers)
        assert _in_range(res)
        assert res.subscale_percentages["R4"] == NOT_MEASURED


def test_answer_order_does_not_matter(valid_answers):
    fwd = calculate_test_results(valid_answers)
    rev = calculate_test_results(list(reversed(valid_answers)))
    assert rev.subscale_percentages == fwd.subscale_percentages
    assert rev.overall_score == fwd.overall_score
    assert rev.archetype_key == fwd.archetype_key


def test_duplicates_resolve_to_the_last_answer():
    answers = build_answers(B3=1) + [Answer("B3", 0)]
    assert calculate_test_results(answers).subscale_percentages["R5"] == 100
