from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


SUBSCALES: tuple[str, ...] = ("R1", "R2", "R3", "R4", "R5")
MEASURED_SUBSCALES: tuple[str, ...] = ("R1", "R2", "R3", "R5")
NOT_MEASURED: str = "n/a"

EXERCISE_THRESHOLD: int = 60
EXERCISES_MIN: int = 3
EXERCISES_MAX: int = 5

EXPORT_ENABLED: bool = True

DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "overall",
    "archetype",
    "R1",
    "R2",
    "R3",
    "R5",
)
# // env overrides for staging/ops
EXPORT_ENABLED = _env_bool("EXPORT_ENABLED", EXPORT_ENABLED)
EXERCISES_MAX = _env_int("EXERCISES_MAX", EXERCISES_MAX)
EXERCISE_THRESHOLD = _env_int("EXERCISE_THRESHOLD", EXERCISE_THRESHOLD)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)
