"""Evaluator implementations for the screening engine."""

from .skills import SkillEvaluator
from .experience import ExperienceEvaluator
from .culture import CultureEvaluator
from .education import EducationEvaluator
from .signals import SignalEvaluator


def default_evaluators() -> list:
    """Evaluators with their built-in keyword tables."""
    return [
        SkillEvaluator(),
        ExperienceEvaluator(),
        CultureEvaluator(),
        EducationEvaluator(),
        SignalEvaluator(),
    ]


__all__ = [
    "SkillEvaluator",
    "ExperienceEvaluator",
    "CultureEvaluator",
    "EducationEvaluator",
    "SignalEvaluator",
    "default_evaluators",
]
