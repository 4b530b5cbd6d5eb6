from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CandidateResume(BaseModel):
    """A candidate entry submitted for screening."""

    id: str
    resume: str = ""
    resume_path: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
