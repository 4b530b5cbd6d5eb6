"""Red flag and highlight detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import JobRequirements
from ..text import contains_phrase

DEFAULT_HIGHLIGHTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Demonstrated achievements", ("achieved", "increased", "improved")),
    ("Awards and recognition", ("award", "recognition", "honor")),
    ("Publications/Research", ("published", "patent", "research")),
    ("Professional certifications", ("certification", "certified")),
)


@dataclass(frozen=True)
class SignalConfig:
    """Built-in red flag patterns and highlight categories."""

    unemployment_phrase: str = "currently unemployed for"
    unemployment_unit: str = "years"
    unemployment_label: str = "Extended unemployment gap"
    termination_terms: tuple[str, ...] = ("fired", "terminated")
    termination_label: str = "Previous termination mentioned"
    highlights: tuple[tuple[str, tuple[str, ...]], ...] = DEFAULT_HIGHLIGHTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "termination_terms", tuple(self.termination_terms))
        object.__setattr__(
            self,
            "highlights",
            tuple((label, tuple(keywords)) for label, keywords in self.highlights),
        )


class SignalEvaluator:
    """Collect red flags and achievement highlights from resume text."""

    method = "signals"

    def __init__(self, *, config: SignalConfig | None = None) -> None:
        self._config = config or SignalConfig()

    def evaluate(self, text: str, requirements: JobRequirements) -> dict[str, Any]:
        red_flags = self.red_flags(text, requirements.disqualifiers)
        highlights = self.highlights(text)

        return {
            "method": self.method,
            "scores": {"red_flag_count": float(len(red_flags))},
            "metadata": {
                "red_flags": red_flags,
                "highlights": highlights,
            },
        }

    def red_flags(self, text: str, disqualifiers: list[str]) -> list[str]:
        config = self._config
        flags = [phrase for phrase in disqualifiers if contains_phrase(text, phrase)]

        if contains_phrase(text, config.unemployment_phrase) and contains_phrase(
            text, config.unemployment_unit
        ):
            flags.append(config.unemployment_label)

        if any(contains_phrase(text, term) for term in config.termination_terms):
            flags.append(config.termination_label)

        return flags

    def highlights(self, text: str) -> list[str]:
        return [
            label
            for label, keywords in self._config.highlights
            if any(contains_phrase(text, keyword) for keyword in keywords)
        ]
