"""Years-of-experience evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ...schemas import JobRequirements

DEFAULT_EXPERIENCE_PATTERNS: tuple[str, ...] = (
    r"(\d+)\+?\s*years?\s*(?:of\s*)?experience",
    r"(\d+)\+?\s*yrs?\s*(?:of\s*)?experience",
    r"experience\s*(?:of\s*)?(\d+)\+?\s*years?",
    r"(\d+)\+?\s*years?\s*in",
    r"worked\s*for\s*(\d+)\+?\s*years?",
)


@dataclass(frozen=True)
class ExperienceConfig:
    """Extraction patterns and scoring curve for experience matching."""

    patterns: tuple[str, ...] = DEFAULT_EXPERIENCE_PATTERNS
    meets_base: float = 8.0
    per_year_bonus: float = 0.2
    shortfall_scale: float = 8.0
    max_score: float = 10.0
    max_years: int = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", tuple(self.patterns))


class ExperienceEvaluator:
    """Compare stated years of experience with the required years."""

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()
        self._patterns = [
            re.compile(pattern, re.IGNORECASE) for pattern in self._config.patterns
        ]

    def evaluate(self, text: str, requirements: JobRequirements) -> dict[str, Any]:
        candidate_years = self.extract_years(text)
        required_years = max(requirements.experience_years, 0)

        return {
            "method": self.method,
            "scores": {
                "experience_match": self._score(candidate_years, required_years),
            },
            "metadata": {
                "experience_years": candidate_years,
                "required_years": required_years,
            },
        }

    def extract_years(self, text: str) -> int:
        """Largest year count stated anywhere in the text, 0 when none.

        Counts are capped at ``max_years``.
        """
        max_years = self._config.max_years
        years = 0
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                digits = match.group(1).lstrip("0") or "0"
                if len(digits) > len(str(max_years)):
                    return max_years
                years = max(years, min(int(digits), max_years))
        return years

    def _score(self, candidate_years: int, required_years: int) -> float:
        config = self._config
        if candidate_years >= required_years:
            surplus = candidate_years - required_years
            return min(config.max_score, config.meets_base + config.per_year_bonus * surplus)
        # candidate_years >= 0 here, so required_years is positive
        return max(0.0, candidate_years / required_years * config.shortfall_scale)
