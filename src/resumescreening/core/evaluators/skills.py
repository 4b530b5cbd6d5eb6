"""Skill coverage evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from rapidfuzz import fuzz, process

from ...schemas import JobRequirements, RequiredSkill
from ..text import canonical_tag, freeze_table, normalize_text

DEFAULT_SKILL_SYNONYMS: dict[str, tuple[str, ...]] = {
    "javascript": (
        "javascript",
        "js",
        "node.js",
        "nodejs",
        "react",
        "vue",
        "angular",
        "typescript",
    ),
    "python": ("python", "django", "flask", "pandas", "numpy", "tensorflow", "pytorch"),
    "sql": ("sql", "mysql", "postgresql", "mongodb", "database", "rdbms"),
    "project_management": (
        "project management",
        "agile",
        "scrum",
        "kanban",
        "jira",
        "confluence",
    ),
    "leadership": ("leadership", "team lead", "manager", "supervision", "mentoring"),
}


@dataclass(frozen=True)
class SkillConfig:
    """Synonym table and level heuristics for skill matching."""

    synonyms: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_SKILL_SYNONYMS)
    )
    alias_min_similarity: float = 90.0
    expert_bonus: int = 3
    senior_bonus: int = 2
    experience_bonus: int = 1
    max_level: int = 10
    evidence_limit: int = 3
    short_keyword_length: int = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "synonyms", freeze_table(self.synonyms))


class SkillEvaluator:
    """Estimate a candidate level per required skill from keyword evidence."""

    method = "skills"

    def __init__(self, *, config: SkillConfig | None = None) -> None:
        self._config = config or SkillConfig()

    def evaluate(self, text: str, requirements: JobRequirements) -> dict[str, Any]:
        details: list[dict[str, Any]] = []
        weighted_sum = 0.0
        total_weight = 0.0

        for required in requirements.required_skills:
            level, evidence = self._assess_skill(text, required.skill)
            match_score = self._match_score(level, required)
            details.append(
                {
                    "skill": required.skill,
                    "required_level": required.level,
                    "candidate_level": level,
                    "match_score": match_score,
                    "evidence": evidence,
                }
            )
            weight = max(float(required.weight), 0.0)
            weighted_sum += match_score * weight
            total_weight += weight

        skill_match = weighted_sum / total_weight if total_weight > 0 else 0.0

        return {
            "method": self.method,
            "scores": {"skill_match": skill_match},
            "metadata": {
                "skills": details,
                "total_weight": total_weight,
            },
        }

    def keywords_for(self, skill: str) -> tuple[str, ...]:
        """Return the synonym list for a requested skill name."""
        synonyms = self._config.synonyms
        key = canonical_tag(skill)
        if key in synonyms:
            return synonyms[key]
        best = process.extractOne(
            key,
            list(synonyms),
            scorer=fuzz.ratio,
            score_cutoff=self._config.alias_min_similarity,
        )
        if best is not None:
            return synonyms[best[0]]
        return (skill,)

    def _assess_skill(self, text: str, skill: str) -> tuple[int, list[str]]:
        mentions = 0
        context_bonus = 0
        evidence: list[str] = []

        for keyword in self.keywords_for(skill):
            normalized = normalize_text(keyword)
            if not normalized:
                continue
            pattern = re.escape(normalized)
            # short keywords such as "js" or "c" only count as whole words
            if len(normalized) <= self._config.short_keyword_length:
                pattern = rf"\b{pattern}\b"
            matches = re.findall(pattern, text)
            if not matches:
                continue
            mentions += len(matches)
            for match in matches:
                if match not in evidence:
                    evidence.append(match)
            context_bonus += self._context_bonus(text, pattern)

        level = min(mentions + context_bonus, self._config.max_level)
        return level, evidence[: self._config.evidence_limit]

    def _context_bonus(self, text: str, keyword: str) -> int:
        def found(template: str) -> bool:
            return re.search(template.format(kw=keyword), text) is not None

        bonus = 0
        if found("expert in {kw}") or found("{kw} expert"):
            bonus += self._config.expert_bonus
        if found("senior {kw}") or found("lead {kw}"):
            bonus += self._config.senior_bonus
        if found("experience with {kw}") or found("{kw} experience"):
            bonus += self._config.experience_bonus
        return bonus

    @staticmethod
    def _match_score(level: int, required: RequiredSkill) -> float:
        if required.level <= 0:
            return 10.0
        return min(level / required.level, 1.0) * 10.0
