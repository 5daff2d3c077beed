from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from . import config as cfg_defaults
from .types import Exercise

log = logging.getLogger(__name__)


_SUBSCALE_EXERCISES: Dict[str, Exercise] = {
    "R1": Exercise(
        title="Focus on results",
        description="Every morning ask yourself: 'What concrete result do I want to get today?'",
        action="Write down one or two key results for the day",
        subscale="R1",
    ),
    "R2": Exercise(
        title="Measure progress",
        description="Define two or three key metrics for your projects and track them weekly",
        action="Set up a simple metrics spreadsheet",
        subscale="R2",
    ),
    "R3": Exercise(
        title="Think like the business",
        description="Before deciding, ask: 'How will this affect the business results?'",
        action="Learn the company's main business metrics",
        subscale="R3",
    ),
    "R5": Exercise(
        title="Decision discipline",
        description="Set clear definitions of done before you start working on a task",
        action="Practise making decisions against a timer",
        subscale="R5",
    ),
}

GENERAL_EXERCISE = Exercise(
    title="Outcome thinking",
    description="Keep asking yourself: 'Why am I doing this?' and 'What result will the user get?'",
    action="Keep a results journal",
)


@dataclass(frozen=True)
class ExerciseSettings:
    threshold: int
    min_count: int
    max_count: int

    @staticmethod
    def from_cfg(cfg: Mapping[str, Any] | None) -> "ExerciseSettings":
        def _cfg_value(name: str, default: Any) -> Any:
            if isinstance(cfg, Mapping) and name in cfg:
                return cfg[name]
            return default

        return ExerciseSettings(
            threshold=int(_cfg_value("EXERCISE_THRESHOLD", cfg_defaults.EXERCISE_THRESHOLD)),
            min_count=int(_cfg_value("EXERCISES_MIN", cfg_defaults.EXERCISES_MIN)),
            max_count=int(_cfg_value("EXERCISES_MAX", cfg_defaults.EXERCISES_MAX)),
        )


def _safe_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def generate_exercises(
    percentages: Mapping[str, Any],
    cfg: Mapping[str, Any] | None = None,
) -> List[Exercise]:
    """Pick micro-exercises for the weak measured subscales.

    One exercise per subscale under the threshold, in R1, R2, R3, R5 order. The general
    exercise is appended when fewer than ``EXERCISES_MIN`` were picked.
    """

    settings = ExerciseSettings.from_cfg(cfg)
    out: List[Exercise] = []
    for sub in cfg_defaults.MEASURED_SUBSCALES:
        if _safe_float(percentages.get(sub), 0.0) < settings.threshold:
            out.append(_SUBSCALE_EXERCISES[sub])
    if len(out) < settings.min_count:
        out.append(GENERAL_EXERCISE)
    log.debug("exercises picked: %s", [e.title for e in out])
    return out[: max(0, settings.max_count)]
