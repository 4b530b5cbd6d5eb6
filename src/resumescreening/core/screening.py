"""Screening engine orchestration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import structlog

from ..schemas import CandidateResume, JobRequirements
from .evaluators import default_evaluators
from .report import build_screening_report
from .results import (
    CandidateScore,
    RecommendationType,
    ScoreBreakdown,
    ScreeningReport,
    ScreeningResult,
    SkillMatch,
)
from .text import normalize_text

SUB_SCORES: tuple[str, ...] = (
    "skill_match",
    "experience_match",
    "cultural_fit",
    "education_match",
)


@dataclass(slots=True)
class EvaluationResult:
    """Normalized evaluator output."""

    method: str
    scores: dict[str, float]
    metadata: dict[str, Any] = field(default_factory=dict)


class ScreeningEngine:
    """Runs evaluators over resume text and folds them into a recommendation."""

    DEFAULT_WEIGHTS: dict[str, float] = {
        "skill_match": 0.4,
        "experience_match": 0.3,
        "cultural_fit": 0.2,
        "education_match": 0.1,
    }

    DEFAULT_THRESHOLDS: dict[str, float] = {
        "strong_hire": 8.5,
        "hire": 7.0,
        "maybe": 5.0,
    }

    DEFAULT_RED_FLAG_PENALTY = 1.5
    DEFAULT_MAX_RED_FLAGS = 2
    MAX_SCORE = 10.0

    def __init__(
        self,
        evaluators: Iterable[Any] | None = None,
        *,
        score_weights: Mapping[str, float] | None = None,
        thresholds: Mapping[str, float] | None = None,
        red_flag_penalty: float | None = None,
        max_red_flags: int | None = None,
    ) -> None:
        self._evaluators = list(evaluators) if evaluators is not None else default_evaluators()
        self._score_weights = {**self.DEFAULT_WEIGHTS, **(score_weights or {})}
        self._thresholds = {**self.DEFAULT_THRESHOLDS, **(thresholds or {})}
        self._red_flag_penalty = (
            self.DEFAULT_RED_FLAG_PENALTY if red_flag_penalty is None else red_flag_penalty
        )
        self._max_red_flags = (
            self.DEFAULT_MAX_RED_FLAGS if max_red_flags is None else max_red_flags
        )
        self._logger = structlog.get_logger(__name__)

    def screen_candidate(
        self,
        resume_text: str,
        requirements: JobRequirements | Mapping[str, Any],
    ) -> CandidateScore:
        requirements = self._coerce_requirements(requirements)
        text = normalize_text(resume_text)

        scores: dict[str, float] = {}
        metadata: dict[str, dict[str, Any]] = {}
        for evaluator in self._evaluators:
            result = self._normalize_evaluation_result(evaluator.evaluate(text, requirements))
            metadata[result.method] = result.metadata
            for key, value in result.scores.items():
                scores[key] = scores.get(key, 0.0) + value

        sub_scores = {name: self._clamp(scores.get(name, 0.0)) for name in SUB_SCORES}
        breakdown = self._build_breakdown(metadata)

        raw_total = sum(
            sub_scores.get(metric, 0.0) * weight
            for metric, weight in self._score_weights.items()
        )
        adjusted = max(0.0, raw_total - self._red_flag_penalty * len(breakdown.red_flags))
        total_score = min(self.MAX_SCORE, _round_half_up(adjusted))

        return CandidateScore(
            total_score=total_score,
            skill_match=_round_half_up(sub_scores["skill_match"]),
            experience_match=sub_scores["experience_match"],
            cultural_fit=sub_scores["cultural_fit"],
            education_match=sub_scores["education_match"],
            breakdown=breakdown,
            recommendation=self._recommend(total_score, len(breakdown.red_flags)),
        )

    def batch_screen(
        self,
        candidates: Iterable[CandidateResume | Mapping[str, Any]],
        requirements: JobRequirements | Mapping[str, Any],
    ) -> list[ScreeningResult]:
        """Score every candidate and rank by total score, stable on ties."""
        requirements = self._coerce_requirements(requirements)
        results: list[ScreeningResult] = []
        for candidate in candidates:
            if not isinstance(candidate, CandidateResume):
                candidate = CandidateResume.model_validate(candidate)
            results.append(
                ScreeningResult(
                    candidate_id=candidate.id,
                    score=self.screen_candidate(candidate.resume, requirements),
                )
            )

        results.sort(key=lambda item: item.score.total_score, reverse=True)
        self._logger.info(
            "screening.batch_scored",
            job_id=requirements.job_id,
            candidate_count=len(results),
        )
        return results

    def generate_screening_report(self, results: list[ScreeningResult]) -> ScreeningReport:
        return build_screening_report(results)

    @staticmethod
    def _coerce_requirements(
        requirements: JobRequirements | Mapping[str, Any],
    ) -> JobRequirements:
        if isinstance(requirements, JobRequirements):
            return requirements
        return JobRequirements.model_validate(requirements)

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores={k: float(v) for k, v in scores.items()},
            metadata=dict(metadata),
        )

    @staticmethod
    def _build_breakdown(metadata: dict[str, dict[str, Any]]) -> ScoreBreakdown:
        skills = metadata.get("skills", {})
        experience = metadata.get("experience", {})
        culture = metadata.get("culture", {})
        education = metadata.get("education", {})
        signals = metadata.get("signals", {})

        return ScoreBreakdown(
            skills=[SkillMatch(**detail) for detail in skills.get("skills", [])],
            experience_years=int(experience.get("experience_years", 0)),
            education_level=education.get("education_level", "high_school"),
            cultural_indicators=list(culture.get("cultural_indicators", [])),
            red_flags=list(signals.get("red_flags", [])),
            highlights=list(signals.get("highlights", [])),
        )

    def _clamp(self, value: float) -> float:
        if math.isnan(value):
            return 0.0
        return min(max(value, 0.0), self.MAX_SCORE)

    def _recommend(self, score: float, red_flag_count: int) -> RecommendationType:
        if red_flag_count > self._max_red_flags:
            return "no_hire"

        if score >= self._thresholds["strong_hire"]:
            return "strong_hire"
        if score >= self._thresholds["hire"]:
            return "hire"
        if score >= self._thresholds["maybe"]:
            return "maybe"
        return "no_hire"


def _round_half_up(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10
