from __future__ import annotations

import json
from pathlib import Path

import pytest

from resumescreening.pipeline import (
    CandidateLoadError,
    CandidateLoader,
    ReaderRegistry,
    RequirementsLoader,
)
from resumescreening.readers import PlainTextReader


def build_loader() -> CandidateLoader:
    return CandidateLoader(ReaderRegistry([PlainTextReader()]))


def write_lines(path: Path, records: list[object]) -> None:
    path.write_text(
        "\n".join(
            record if isinstance(record, str) else json.dumps(record, ensure_ascii=False)
            for record in records
        ),
        encoding="utf-8",
    )


def test_candidate_loader_reads_inline_and_file_resumes(tmp_path: Path):
    resumes = tmp_path / "resumes"
    resumes.mkdir()
    (resumes / "c2.md").write_text("# Jane\nPython expert", encoding="utf-8")
    path = tmp_path / "candidates.jsonl"
    write_lines(
        path,
        [
            {"id": "C-001", "resume": "Inline resume"},
            "",
            {"id": 2, "resume_path": "resumes/c2.md"},
        ],
    )

    candidates = build_loader().load(path)

    assert [c.id for c in candidates] == ["C-001", "2"]
    assert candidates[0].resume == "Inline resume"
    assert candidates[1].resume == "# Jane\nPython expert"


def test_candidate_loader_raises_on_invalid_json(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    write_lines(path, [{"id": "C-001", "resume": "ok"}, "{invalid}"])

    with pytest.raises(CandidateLoadError) as exc:
        build_loader().load(path)
    assert "invalid JSON" in str(exc.value)
    assert [c.id for c in exc.value.partial] == ["C-001"]


def test_candidate_loader_skips_invalid_and_reports(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    write_lines(
        path,
        [
            {"id": "C-001", "resume": "ok"},
            {"resume": "no id"},
            {"id": "C-003", "resume_path": "resume.docx"},
            {"id": "C-004", "resume_path": "missing.txt"},
        ],
    )

    with pytest.raises(CandidateLoadError) as exc:
        build_loader().load(path)
    error = exc.value
    assert "missing id" in error.errors[0]
    assert "unsupported resume file type" in error.errors[1]
    assert "cannot read" in error.errors[2]
    assert len(error.partial) == 1


def test_reader_registry_rejects_unknown_suffix():
    registry = ReaderRegistry([PlainTextReader()])

    assert registry.suffixes() == [".txt", ".md", ".markdown"]
    with pytest.raises(KeyError):
        registry.get(Path("resume.pdf"))


def test_requirements_loader_reads_yaml(tmp_path: Path):
    path = tmp_path / "requirements.yaml"
    path.write_text(
        "job_id: JD-9\n"
        "required_skills:\n"
        "  - {skill: python, level: 6, weight: 2}\n"
        "experience_years: 4\n"
        "education_level: Master\n",
        encoding="utf-8",
    )

    requirements = RequirementsLoader().load(path)

    assert requirements.job_id == "JD-9"
    assert requirements.required_skills[0].weight == 2
    assert requirements.education_level == "master"


def test_requirements_loader_invalid_json(tmp_path: Path):
    path = tmp_path / "requirements.json"
    path.write_text("{invalid", encoding="utf-8")

    with pytest.raises(ValueError):
        RequirementsLoader().load(path)


def test_candidate_loader_accepts_zero_id(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    write_lines(path, [{"id": 0, "resume": "ok"}, {"id": None, "resume": "no id"}])

    with pytest.raises(CandidateLoadError) as exc:
        build_loader().load(path)
    assert [c.id for c in exc.value.partial] == ["0"]
    assert exc.value.errors == ["line 2: missing id field"]
