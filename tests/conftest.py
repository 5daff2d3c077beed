from __future__ import annotations

from typing import Any, Dict, List

import pytest

from mindset_core.types import Answer

# Matches the answer key exactly: every subscale at 100%.
IDEAL_VALUES: Dict[str, Any] = {
    "B1": 5,
    "B2": [1, 2, 1, 3, 2],
    "B3": 0,
    "B4": 1,
    "B5": [1, 3],
    "B6": [3, 3, 2, 3, 1, 1, 3],
    "B7": 1,
    "B8": 0,
    "B9": [3, 3, 3, 2, 1, 1],
    "B10": 4,
}

# Every ranking entry at distance 2 from the ideal, every choice wrong.
WORST_VALUES: Dict[str, Any] = {
    "B1": 1,
    "B2": [3, 0, 3, 1, 0],
    "B3": 1,
    "B4": 2,
    "B5": [],
    "B6": [1, 1, 0, 1, 3, 3, 1],
    "B7": 0,
    "B8": 1,
    "B9": [1, 1, 1, 0, 3, 3],
    "B10": 0,
}

# Well-formed the way the quiz UI enforces it: rankings use 1, 2, 3 exactly once.
VALID_VALUES: Dict[str, Any] = {
    "B1": 4,
    "B2": [1, 2, 0, 3, 0],
    "B3": 0,
    "B4": 1,
    "B5": [1, 3],
    "B6": [3, 0, 2, 0, 1, 0, 0],
    "B7": 1,
    "B8": 0,
    "B9": [1, 2, 3, 0, 0, 0],
    "B10": 4,
}


def build_answers(base: Dict[str, Any] | None = None, **overrides: Any) -> List[Answer]:
    """Answer list from a value map; keyword overrides replace single questions."""

    values = dict(IDEAL_VALUES if base is None else base)
    values.update(overrides)
    return [Answer(question_id=qid, value=val) for qid, val in values.items()]


@pytest.fixture
def ideal_answers() -> List[Answer]:
    return build_answers()


@pytest.fixture
def worst_answers() -> List[Answer]:
    return build_answers(WORST_VALUES)


@pytest.fixture
def valid_answers() -> List[Answer]:
    return build_answers(VALID_VALUES)
