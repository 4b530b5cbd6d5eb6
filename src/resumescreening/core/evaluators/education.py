"""Education level evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from ...schemas import EDUCATION_LEVELS, JobRequirements
from ..text import freeze_table

# Checked from the highest level down; the first hit wins.
DEFAULT_EDUCATION_INDICATORS: dict[str, tuple[str, ...]] = {
    "phd": (r"\bphd\b", r"\bph d\b", r"\bdoctorate\b"),
    "master": (r"\bmaster", r"\bmba\b", r"\bmsc\b", r"\bms\b", r"\bma\b"),
    "bachelor": (r"\bbachelor", r"\bbsc\b", r"\bbs\b", r"\bba\b", r"\bdegree"),
    "associate": (r"\bassociate", r"\baa\b"),
}


@dataclass(frozen=True)
class EducationConfig:
    """Level hierarchy and level-indicating patterns."""

    levels: tuple[str, ...] = EDUCATION_LEVELS
    indicators: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_EDUCATION_INDICATORS)
    )
    meets_base: float = 8.0
    shortfall_scale: float = 6.0
    max_score: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "levels", tuple(self.levels))
        object.__setattr__(self, "indicators", freeze_table(self.indicators))


class EducationEvaluator:
    """Infer the highest education level mentioned and compare it to the requirement."""

    method = "education"

    def __init__(self, *, config: EducationConfig | None = None) -> None:
        self._config = config or EducationConfig()
        self._patterns = {
            level: [re.compile(pattern) for pattern in patterns]
            for level, patterns in self._config.indicators.items()
        }

    def evaluate(self, text: str, requirements: JobRequirements) -> dict[str, Any]:
        candidate_level = self.infer_level(text)
        required_index = self._index(requirements.education_level)
        candidate_index = self._index(candidate_level)

        return {
            "method": self.method,
            "scores": {
                "education_match": self._score(candidate_index, required_index),
            },
            "metadata": {
                "education_level": candidate_level,
                "required_level": requirements.education_level,
            },
        }

    def infer_level(self, text: str) -> str:
        levels = self._config.levels
        for level in reversed(levels[1:]):
            if any(pattern.search(text) for pattern in self._patterns.get(level, [])):
                return level
        return levels[0]

    def _index(self, level: str) -> int:
        try:
            return self._config.levels.index(level)
        except ValueError:
            return 0

    def _score(self, candidate_index: int, required_index: int) -> float:
        config = self._config
        if candidate_index >= required_index:
            return min(config.max_score, config.meets_base + (candidate_index - required_index))
        return max(0.0, candidate_index / required_index * config.shortfall_scale)
