from __future__ import annotations

import pytest
from pydantic import ValidationError

from resumescreening.schemas import CandidateResume, JobRequirements, RequiredSkill


def test_job_requirements_defaults():
    requirements = JobRequirements()

    assert requirements.job_id is None
    assert requirements.required_skills == []
    assert requirements.experience_years == 0
    assert requirements.education_level == "high_school"
    assert requirements.cultural_values == []
    assert requirements.disqualifiers == []


def test_education_level_is_normalized():
    assert JobRequirements(education_level="Bachelor").education_level == "bachelor"
    assert JobRequirements(education_level=" High School ").education_level == "high_school"
    assert JobRequirements(education_level="PhD").education_level == "phd"


def test_unknown_education_level_is_rejected():
    with pytest.raises(ValidationError):
        JobRequirements(education_level="bootcamp")


def test_required_skill_defaults_and_mapping_input():
    requirements = JobRequirements(required_skills=[{"skill": "python"}])

    skill = requirements.required_skills[0]
    assert isinstance(skill, RequiredSkill)
    assert skill.level == 5
    assert skill.weight == pytest.approx(1.0)


def test_required_skill_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        RequiredSkill(skill="python", years=3)


def test_job_requirements_are_immutable():
    requirements = JobRequirements(experience_years=3)

    with pytest.raises(ValidationError):
        requirements.experience_years = 5  # type: ignore[misc]


def test_candidate_resume_coerces_numeric_id():
    candidate = CandidateResume(id=42, resume="text")

    assert candidate.id == "42"
    assert candidate.resume_path is None
    assert candidate.metadata == {}


def test_candidate_resume_requires_id():
    with pytest.raises(ValidationError):
        CandidateResume(resume="text")
