from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

QuestionType = Literal["likert", "ranking", "single-choice", "multi-choice"]
SubscaleId = Literal["R1", "R2", "R3", "R4", "R5"]
Percentage = Union[int, str]


@dataclass
class Question:
    id: str; type: QuestionType; title: str; content: str
    options: Optional[List[str]] = None
    explanation: str = ""


@dataclass
class Answer:
    question_id: str; value: Any


@dataclass
class SubscaleTotals:
    """Earned and max-possible points per subscale slot.

    R4 is part of the taxonomy but no question ever feeds it.
    """

    earned: Dict[str, float] = field(default_factory=lambda: {s: 0.0 for s in ("R1", "R2", "R3", "R4", "R5")})
    maximum: Dict[str, float] = field(default_factory=lambda: {s: 0.0 for s in ("R1", "R2", "R3", "R4", "R5")})

    def add(self, subscale: str, earned: float, maximum: float) -> None:
        self.earned[subscale] += earned
        self.maximum[subscale] += maximum


@dataclass(frozen=True)
class Archetype:
    key: str
    name: str
    description: str
    strengths: Tuple[str, ...]
    risks: Tuple[str, ...]
    development_steps: Tuple[str, ...]


@dataclass(frozen=True)
class Exercise:
    title: str; description: str; action: str
    subscale: Optional[str] = None


@dataclass
class TestResult:
    overall_score: int
    subscale_scores: Dict[str, float]
    subscale_percentages: Dict[str, Percentage]
    archetype: str
    archetype_key: str
    archetype_description: str
    strengths: List[str]
    risks: List[str]
    development_steps: List[str]
    exercises: List[Exercise] = field(default_factory=list)

    __test__ = False  # not a pytest test class

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
