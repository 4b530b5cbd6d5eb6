"""Cultural fit evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...schemas import JobRequirements
from ..text import canonical_tag, freeze_table, normalize_text

DEFAULT_CULTURAL_INDICATORS: dict[str, tuple[str, ...]] = {
    "collaboration": (
        "team player",
        "collaborative",
        "cross-functional",
        "stakeholder",
        "communication",
    ),
    "innovation": (
        "innovative",
        "creative",
        "problem-solving",
        "thinking outside",
        "solutions",
    ),
    "growth_mindset": (
        "learning",
        "development",
        "growth",
        "continuous improvement",
        "adaptable",
    ),
    "ownership": (
        "ownership",
        "responsibility",
        "accountable",
        "initiative",
        "proactive",
    ),
}


@dataclass(frozen=True)
class CultureConfig:
    """Indicator vocabulary per cultural value tag."""

    indicators: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_CULTURAL_INDICATORS)
    )
    per_value_cap: int = 2
    scale: float = 2.0
    max_score: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "indicators", freeze_table(self.indicators))


class CultureEvaluator:
    """Keyword-presence score against the requested value tags."""

    method = "culture"

    def __init__(self, *, config: CultureConfig | None = None) -> None:
        self._config = config or CultureConfig()

    def evaluate(self, text: str, requirements: JobRequirements) -> dict[str, Any]:
        values = requirements.cultural_values
        per_value: dict[str, list[str]] = {}
        total = 0

        for value in values:
            matched = self._matched_indicators(text, self._indicators_for(value))
            per_value[value] = matched
            total += min(len(matched), self._config.per_value_cap)

        if values:
            cultural_fit = min(total / len(values) * self._config.scale, self._config.max_score)
        else:
            cultural_fit = 0.0

        return {
            "method": self.method,
            "scores": {"cultural_fit": cultural_fit},
            "metadata": {
                "values": per_value,
                "cultural_indicators": self._detected_indicators(text),
            },
        }

    def _indicators_for(self, value: str) -> tuple[str, ...]:
        return self._config.indicators.get(canonical_tag(value), (value,))

    @staticmethod
    def _matched_indicators(text: str, indicators: tuple[str, ...]) -> list[str]:
        matched: list[str] = []
        for indicator in indicators:
            normalized = normalize_text(indicator)
            if normalized and normalized in text:
                matched.append(indicator)
        return matched

    def _detected_indicators(self, text: str) -> list[str]:
        """First matching keyword for every known value, in table order."""
        detected: list[str] = []
        for value, indicators in self._config.indicators.items():
            matched = self._matched_indicators(text, indicators)
            if matched:
                detected.append(f"{value}: {matched[0]}")
        return detected
