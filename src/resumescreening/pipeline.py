"""Screening pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, List

import pendulum
import structlog
import yaml
from pydantic import ValidationError

from .core import ScreeningEngine
from .readers import ResumeReader
from .schemas import CandidateResume, JobRequirements
from . import __version__


class ReaderRegistry:
    """Registry mapping file suffixes to resume readers."""

    def __init__(self, readers: Iterable[ResumeReader]):
        self._readers: dict[str, ResumeReader] = {}
        for reader in readers:
            for suffix in reader.suffixes:
                self._readers[suffix.lower()] = reader

    def get(self, path: Path) -> ResumeReader:
        path = Path(path)
        suffix = path.suffix.lower()
        try:
            return self._readers[suffix]
        except KeyError as exc:
            raise KeyError(f"Unsupported resume file type: {suffix or path.name!r}") from exc

    def suffixes(self) -> List[str]:
        return list(self._readers.keys())


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[CandidateResume]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class CandidateLoader:
    """Load candidate resumes from JSONL, resolving ``resume_path`` entries."""

    def __init__(self, registry: ReaderRegistry):
        self._registry = registry

    def load(self, path: Path) -> list[CandidateResume]:
        candidates: list[CandidateResume] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict) or record.get("id") in (None, ""):
                    errors.append(f"line {idx}: missing id field")
                    continue
                try:
                    candidate = CandidateResume.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if candidate.resume_path:
                    resume_file = self._resolve(path, candidate.resume_path)
                    try:
                        reader = self._registry.get(resume_file)
                    except KeyError:
                        errors.append(
                            f"line {idx}: unsupported resume file type '{resume_file.suffix}'"
                        )
                        continue
                    try:
                        text = reader.read(resume_file)
                    except OSError as exc:
                        errors.append(f"line {idx}: cannot read {resume_file} ({exc})")
                        continue
                    candidate = candidate.model_copy(update={"resume": text})
                candidates.append(candidate)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates

    @staticmethod
    def _resolve(source: Path, resume_path: str) -> Path:
        resume_file = Path(resume_path)
        if resume_file.is_absolute():
            return resume_file
        return source.parent / resume_file


class RequirementsLoader:
    """Load job requirements from JSON or YAML."""

    def load(self, path: Path) -> JobRequirements:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                try:
                    data = yaml.safe_load(handle)
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid requirements YAML: {exc}") from exc
            else:
                try:
                    data = json.load(handle)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"Invalid requirements JSON: {exc}") from exc
        return JobRequirements.model_validate(data)


class OutputWriter:
    """Persist screening outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class ScreeningPipeline:
    """End-to-end screening orchestrator."""

    def __init__(
        self,
        *,
        engine: ScreeningEngine,
        registry: ReaderRegistry,
        candidate_loader: CandidateLoader | None = None,
        requirements_loader: RequirementsLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._engine = engine
        self._registry = registry
        self._candidates = candidate_loader or CandidateLoader(registry)
        self._requirements = requirements_loader or RequirementsLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        candidates_path: Path,
        requirements_path: Path,
        output_path: Path,
        audit_logger: "AuditLogger | None" = None,
    ) -> dict[str, Any]:
        requirements = self._requirements.load(requirements_path)
        load_errors: list[str] = []
        try:
            candidates = self._candidates.load(candidates_path)
        except CandidateLoadError as exc:
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        results = self._engine.batch_screen(candidates, requirements)
        report = self._engine.generate_screening_report(results)

        for rank, result in enumerate(results, start=1):
            score = result.score
            if audit_logger:
                audit_logger.append(
                    {
                        "candidate_id": result.candidate_id,
                        "job_id": requirements.job_id,
                        "rank": rank,
                        "total_score": score.total_score,
                        "recommendation": score.recommendation,
                        "red_flags": score.breakdown.red_flags,
                        "timestamp": pendulum.now().to_iso8601_string(),
                    }
                )

            self._logger.info(
                "screening.result",
                candidate_id=result.candidate_id,
                job_id=requirements.job_id,
                rank=rank,
                total_score=score.total_score,
                recommendation=score.recommendation,
                red_flags=score.breakdown.red_flags,
            )

        metadata = {
            "job_id": requirements.job_id,
            "candidate_count": len(candidates),
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        payload = {
            "metadata": metadata,
            "report": asdict(report),
            "results": [asdict(result) for result in results],
        }

        self._writer.write(output_path, payload)
        self._logger.info(
            "pipeline.completed",
            job_id=requirements.job_id,
            candidate_count=len(candidates),
            error_count=len(load_errors),
        )
        return payload


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")
