"""Pydantic schema definitions for screening inputs."""

from __future__ import annotations

from .candidate import CandidateResume
from .requirements import (
    EDUCATION_LEVELS,
    EducationLevel,
    JobRequirements,
    RequiredSkill,
)

__all__ = [
    "CandidateResume",
    "EDUCATION_LEVELS",
    "EducationLevel",
    "JobRequirements",
    "RequiredSkill",
]
