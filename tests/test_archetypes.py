from __future__ import annotations

import pytest

from mindset_core.archetypes import ARCHETYPES, DEFAULT_ARCHETYPE, RULES, classify


def _scores(a, b, c, e):
    return {"R1": a, "R2": b, "R3": c, "R5": e}


@pytest.mark.parametrize(
    "scores, key",
    [
        ((80, 80, 80, 60), "integrator"),
        ((30, 30, 30, 90), "process_stakhanovite"),
        ((80, 40, 80, 80), "business_driver"),
        ((80, 80, 40, 80), "result_engineer"),
        ((80, 40, 40, 80), "goal_romantic"),
        ((40, 80, 40, 80), "metrics_collector"),
        ((60, 60, 60, 40), "experimenter"),
        ((60, 60, 80, 80), "risk_safer"),
        ((65, 65, 65, 65), "system_practitioner"),
        ((65, 50, 50, 75), "disciplined_executor"),
        ((55, 90, 80, 55), "analyst_consultant"),
        ((55, 55, 55, 55), "developing_practitioner"),
    ],
)
def test_each_rule_reachable(scores, key):
    assert classify(_scores(*scores)).key == key


def test_ladder_has_twelve_rules_with_default_last():
    assert len(RULES) == 12
    assert RULES[-1].archetype == DEFAULT_ARCHETYPE
    assert {r.archetype for r in RULES} == set(ARCHETYPES)


def test_first_match_wins_over_later_rules():
    scores = _scores(70, 70, 70, 70)
    integrator = next(r for r in RULES if r.archetype == "integrator")
    practitioner = next(r for r in RULES if r.archetype == "system_practitioner")
    assert integrator.matches(scores) and practitioner.matches(scores)
    assert classify(scores).key == "integrator"


def test_integrator_needs_discipline_of_sixty():
    assert classify(_scores(90, 90, 90, 59)).key != "integrator"


def test_boundaries_are_inclusive_where_stated():
    assert classify(_scores(60, 60, 60, 60)).key == "system_practitioner"
    assert classify(_scores(70, 60, 60, 60)).key == "system_practitioner"


def test_payloads_are_complete():
    for arch in ARCHETYPES.values():
        assert arch.name and arch.description
        assert len(arch.strengths) == 3
        assert len(arch.risks) == 3
        assert len(arch.development_steps) == 3
