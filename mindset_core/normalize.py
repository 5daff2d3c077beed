# mindset_core/normalize.py
from __future__ import annotations
import math
from typing import Dict

from .config import MEASURED_SUBSCALES, NOT_MEASURED, SUBSCALES
from .types import Percentage, SubscaleTotals


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _pct(earned: float, maximum: float) -> int:
    if maximum <= 0:
        return 0
    return max(0, min(100, round_half_up(earned / maximum * 100.0)))


def subscale_percentages(totals: SubscaleTotals) -> Dict[str, Percentage]:
    out: Dict[str, Percentage] = {}
    for sub in SUBSCALES:
        if sub in MEASURED_SUBSCALES:
            out[sub] = _pct(totals.earned[sub], totals.maximum[sub])
        else:
            out[sub] = NOT_MEASURED
    return out


def overall_percentage(totals: SubscaleTotals) -> int:
    """Ratio of summed points across measured subscales, not a mean of percentages."""
    earned = sum(totals.earned[s] for s in MEASURED_SUBSCALES)
    maximum = sum(totals.maximum[s] for s in MEASURED_SUBSCALES)
    return _pct(earned, maximum)


def has_measurement(totals: SubscaleTotals) -> bool:
    return any(totals.maximum[s] > 0 for s in MEASURED_SUBSCALES)
