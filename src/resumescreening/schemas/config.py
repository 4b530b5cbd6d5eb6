"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CoreConfig(BaseModel):
    score_weights: dict[str, float] | None = None
    thresholds: dict[str, float] | None = None
    red_flag_penalty: float | None = None
    max_red_flags: int | None = None


class EvaluatorConfig(BaseModel):
    skills: dict[str, Any] | None = None
    experience: dict[str, Any] | None = None
    culture: dict[str, Any] | None = None
    education: dict[str, Any] | None = None
    signals: dict[str, Any] | None = None


class ReaderConfig(BaseModel):
    pdf: dict[str, Any] | None = None


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    readers: ReaderConfig = Field(default_factory=ReaderConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        core_settings = self.core.model_dump(exclude_none=True)
        if core_settings:
            settings["core"] = core_settings
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        reader_settings = self.readers.model_dump(exclude_none=True)
        if reader_settings:
            settings["readers"] = reader_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a raw YAML mapping; non-mappings raise ``ValidationError``."""
    return AppConfig.model_validate(raw)
