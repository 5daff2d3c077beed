# mindset_core/archetypes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Tuple

from .types import Archetype

Scores = Mapping[str, float]

ARCHETYPES: Dict[str, Archetype] = {a.key: a for a in (
    Archetype(
        key="integrator",
        name="Cross-functional integrator",
        description=(
            "You balance outcomes, metrics, business context and discipline with ease. "
            "You see the whole picture and make well-weighed decisions."
        ),
        strengths=("Systems thinking", "Balance across every aspect", "Strategic planning"),
        risks=("Possible slowness", "Perfectionism", "Difficulty delegating"),
        development_steps=(
            "Work on the speed of your decisions",
            "Learn to delegate the details",
            "Focus on the key metrics",
        ),
    ),
    Archetype(
        key="process_stakhanovite",
        name="Process stakhanovite",
        description=(
            "You concentrate on executing processes well, but may lose sight of the end "
            "result and of the business context."
        ),
        strengths=("Quality of execution", "Following procedures", "Reliability"),
        risks=("Losing focus on results", "Ignoring metrics", "Underestimating business context"),
        development_steps=(
            "Learn the key business metrics",
            "Connect your work to its outcomes",
            "Ask 'why?' more often",
        ),
    ),
    Archetype(
        key="business_driver",
        name="Business driver",
        description=(
            "You understand the business context and focus on results, but may underrate "
            "the importance of measurement."
        ),
        strengths=("Business thinking", "Focus on results", "Risk awareness"),
        risks=("Too little measurement", "Intuitive decisions", "Hard to scale"),
        development_steps=(
            "Introduce a metrics system",
            "Study analytics",
            "Document practices that worked",
        ),
    ),
    Archetype(
        key="result_engineer",
        name="Result engineer",
        description=(
            "You work masterfully with results and metrics, but may underestimate business "
            "risks and constraints."
        ),
        strengths=("Measurable results", "Analytical thinking", "Process optimisation"),
        risks=("Ignoring business context", "Underestimating risk", "Local optimisation"),
        development_steps=(
            "Study the company's business model",
            "Take financial constraints into account",
            "Consult the business team",
        ),
    ),
    Archetype(
        key="goal_romantic",
        name="Goal romantic",
        description=(
            "You focus on results very well, but may miss the importance of measurement "
            "and of the business context."
        ),
        strengths=("Clear goals", "Motivating the team", "Vision of the result"),
        risks=("No measurement", "Ignoring constraints", "Overestimating what is possible"),
        development_steps=(
            "Put a measurement system in place",
            "Study the business constraints",
            "Break goals into measurable stages",
        ),
    ),
    Archetype(
        key="metrics_collector",
        name="Metrics collector",
        description="You are strong with data and metrics, but may lose focus on the final result.",
        strengths=("Analytical skills", "Measurement accuracy", "Spotting patterns"),
        risks=("Losing focus on results", "Analysis paralysis", "Metrics for their own sake"),
        development_steps=(
            "Tie metrics to business results",
            "Focus on the key indicators",
            "Make decisions based on data",
        ),
    ),
    Archetype(
        key="experimenter",
        name="Experimenter without stop rules",
        description=(
            "You understand results and context well, but may struggle to make the final "
            "call and stop iterating."
        ),
        strengths=("Openness to experiments", "Flexible thinking", "Searching for better solutions"),
        risks=("Endless iterations", "Missed deadlines", "Uncertainty for the team"),
        development_steps=(
            "Set clear definitions of done",
            "Practise deciding under uncertainty",
            "Introduce time-boxing",
        ),
    ),
    Archetype(
        key="risk_safer",
        name="Risk safer",
        description=(
            "You understand the business context and its risks very well, but may be too "
            "cautious in pursuing results."
        ),
        strengths=("Risk management", "Business thinking", "Preventing mistakes"),
        risks=("Excessive caution", "Slow decisions", "Missed opportunities"),
        development_steps=(
            "Balance risks against opportunities",
            "Practise rapid prototyping",
            "Study lean approaches",
        ),
    ),
    Archetype(
        key="system_practitioner",
        name="System practitioner",
        description=(
            "You show a balanced approach to every aspect of outcome-based thinking, with "
            "good room to grow."
        ),
        strengths=("Balanced approach", "Systems view", "Growth potential"),
        risks=("Limited depth in some areas", "Blurred focus", "Average at everything"),
        development_steps=(
            "Pick one or two areas to go deeper",
            "Build expertise step by step",
            "Find a mentor in your strong areas",
        ),
    ),
    Archetype(
        key="disciplined_executor",
        name="Disciplined executor",
        description=(
            "You combine a focus on results with strong discipline, but may miss analytics "
            "and the business context."
        ),
        strengths=("Delivery discipline", "Meeting deadlines", "Focus on results"),
        risks=("Too little analytics", "Ignoring business context", "Rigid approach"),
        development_steps=(
            "Learn the key metrics",
            "Develop business thinking",
            "Add flexibility to your processes",
        ),
    ),
    Archetype(
        key="analyst_consultant",
        name="Analyst consultant",
        description=(
            "You work great with data and understand the business, but may lose focus on "
            "the final result."
        ),
        strengths=("Deep analytics", "Business consulting", "Strategic thinking"),
        risks=("Losing focus on results", "Slow decisions", "Overvaluing analysis"),
        development_steps=(
            "Tie analysis to action",
            "Focus on the key results",
            "Practise making quick decisions",
        ),
    ),
    Archetype(
        key="developing_practitioner",
        name="Developing practitioner",
        description=(
            "You are in the middle of developing outcome-based thinking. You have strengths "
            "worth building on."
        ),
        strengths=("Growth potential", "Openness to development", "Basic grasp of the principles"),
        risks=("Uneven skill development", "Lack of focus", "Need for structure"),
        development_steps=(
            "Choose a priority area to develop",
            "Study best practices",
            "Ask colleagues for feedback",
        ),
    ),
)}

DEFAULT_ARCHETYPE = "developing_practitioner"


@dataclass(frozen=True)
class ArchetypeRule:
    archetype: str
    predicate: Callable[[float, float, float, float], bool]

    def matches(self, scores: Scores) -> bool:
        return self.predicate(
            float(scores.get("R1", 0)),
            float(scores.get("R2", 0)),
            float(scores.get("R3", 0)),
            float(scores.get("R5", 0)),
        )


# Checked top to bottom, first match wins. Arguments are (A, B, C, E) = (R1, R2, R3, R5).
RULES: Tuple[ArchetypeRule, ...] = (
    ArchetypeRule("integrator", lambda a, b, c, e: a >= 70 and b >= 70 and c >= 70 and e >= 60),
    ArchetypeRule("process_stakhanovite", lambda a, b, c, e: a < 40 and b < 40 and c < 40),
    ArchetypeRule("business_driver", lambda a, b, c, e: a >= 70 and b < 50 and c >= 70),
    ArchetypeRule("result_engineer", lambda a, b, c, e: a >= 70 and b >= 70 and c < 50),
    ArchetypeRule("goal_romantic", lambda a, b, c, e: a >= 70 and b < 50 and c < 50),
    ArchetypeRule("metrics_collector", lambda a, b, c, e: a < 50 and b >= 70 and c < 50),
    ArchetypeRule("experimenter", lambda a, b, c, e: e < 50 and (a + b + c) / 3 >= 50),
    ArchetypeRule("risk_safer", lambda a, b, c, e: c >= 70 and (a + b) / 2 < 70),
    ArchetypeRule("system_practitioner", lambda a, b, c, e: 60 <= a <= 70 and 60 <= b <= 70 and 60 <= c <= 70),
    ArchetypeRule("disciplined_executor", lambda a, b, c, e: a >= 60 and e >= 70 and b < 60 and c < 60),
    ArchetypeRule("analyst_consultant", lambda a, b, c, e: b >= 70 and c >= 70 and a < 60 and e < 60),
    ArchetypeRule(DEFAULT_ARCHETYPE, lambda a, b, c, e: True),
)


def classify(scores: Scores) -> Archetype:
    for rule in RULES:
        if rule.matches(scores):
            return ARCHETYPES[rule.archetype]
    return ARCHETYPES[DEFAULT_ARCHETYPE]
