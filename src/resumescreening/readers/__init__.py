"""Resume file readers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from .pdf import PdfResumeReader
from .text import PlainTextReader


@runtime_checkable
class ResumeReader(Protocol):
    """Resume file reader contract.

    Implementations turn a resume file of one of their ``suffixes`` into
    plain text suitable for the screening engine.
    """

    suffixes: tuple[str, ...]

    def read(self, path: Path) -> str:
        """Return the resume text stored at ``path``."""


__all__ = ["ResumeReader", "PlainTextReader", "PdfResumeReader"]
