"""Core screening engine components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import JobRequirements

# NOTE: keep imports explicit for export clarity.
from .results import (
    CandidateScore,
    ReportSummary,
    ScoreBreakdown,
    ScreeningReport,
    ScreeningResult,
    SkillMatch,
)
from .screening import EvaluationResult, ScreeningEngine
from .report import build_screening_report
from .evaluators import (
    CultureEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    SignalEvaluator,
    SkillEvaluator,
)


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing screening scores."""

    method: str

    def evaluate(self, text: str, requirements: JobRequirements) -> dict:
        """Return scores and metadata for normalized resume text."""


__all__ = [
    "Evaluator",
    "ScreeningEngine",
    "EvaluationResult",
    "CandidateScore",
    "ScoreBreakdown",
    "SkillMatch",
    "ScreeningResult",
    "ScreeningReport",
    "ReportSummary",
    "build_screening_report",
    "SkillEvaluator",
    "ExperienceEvaluator",
    "CultureEvaluator",
    "EducationEvaluator",
    "SignalEvaluator",
]
