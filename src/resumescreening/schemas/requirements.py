from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

EducationLevel = Literal["high_school", "associate", "bachelor", "master", "phd"]

EDUCATION_LEVELS: tuple[str, ...] = (
    "high_school",
    "associate",
    "bachelor",
    "master",
    "phd",
)


class RequiredSkill(BaseModel):
    """Skill requirement with a target level and relative weight."""

    skill: str
    level: int = 5
    weight: float = 1.0

    model_config = ConfigDict(extra="forbid")


class JobRequirements(BaseModel):
    """Structured requirements profile a resume is scored against."""

    job_id: str | None = None
    required_skills: list[RequiredSkill] = Field(default_factory=list)
    experience_years: int = 0
    education_level: EducationLevel = "high_school"
    cultural_values: list[str] = Field(default_factory=list)
    disqualifiers: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("education_level", mode="before")
    @classmethod
    def _normalize_education(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().replace(" ", "_").replace("-", "_")
        return value
