from __future__ import annotations

import pytest

from mindset_core.config import NOT_MEASURED
from mindset_core.normalize import overall_percentage, round_half_up, subscale_percentages
from mindset_core.types import SubscaleTotals


@pytest.mark.parametrize("x, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (12.5, 13), (12.49, 12), (99.5, 100), (0.0, 0)])
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


def test_overall_uses_point_sums_not_percentage_average():
    totals = SubscaleTotals()
    totals.add("R1", 4.0, 4.0)
    totals.add("R2", 0.0, 1.0)
    pcts = subscale_percentages(totals)
    assert pcts["R1"] == 100 and pcts["R2"] == 0
    assert overall_percentage(totals) == 80


def test_zero_maximum_reports_zero():
    pcts = subscale_percentages(SubscaleTotals())
    assert pcts == {"R1": 0, "R2": 0, "R3": 0, "R4": NOT_MEASURED, "R5": 0}
    assert overall_percentage(SubscaleTotals()) == 0


def test_unmeasured_slot_is_excluded_from_overall():
    totals = SubscaleTotals()
    totals.add("R5", 1.0, 2.0)
    totals.add("R4", 10.0, 10.0)
    assert overall_percentage(totals) == 50
    assert subscale_percentages(totals)["R4"] == NOT_MEASURED
