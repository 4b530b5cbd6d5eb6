"""Result types produced by the screening engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

RecommendationType = Literal["strong_hire", "hire", "maybe", "no_hire"]


@dataclass(slots=True)
class SkillMatch:
    skill: str
    required_level: int
    candidate_level: int
    match_score: float
    evidence: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ScoreBreakdown:
    """Evidence behind a candidate score."""

    skills: list[SkillMatch] = field(default_factory=list)
    experience_years: int = 0
    education_level: str = "high_school"
    cultural_indicators: list[str] = field(default_factory=list)
    red_flags: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CandidateScore:
    """Composite score, sub-scores and hiring recommendation."""

    total_score: float
    skill_match: float
    experience_match: float
    cultural_fit: float
    education_match: float
    breakdown: ScoreBreakdown
    recommendation: RecommendationType


@dataclass(slots=True)
class ScreeningResult:
    candidate_id: str
    score: CandidateScore


@dataclass(slots=True)
class ReportSummary:
    total_candidates: int = 0
    strong_hires: int = 0
    hires: int = 0
    maybes: int = 0
    no_hires: int = 0
    avg_score: float = 0.0


@dataclass(slots=True)
class ScreeningReport:
    """Aggregate view over a ranked candidate pool."""

    summary: ReportSummary
    top_candidates: list[ScreeningResult]
    insights: list[str]
