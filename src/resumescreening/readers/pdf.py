"""PDF resume reader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .. import pdf_utils


@dataclass(frozen=True)
class PdfReaderConfig:
    """Boilerplate lines to strip from extracted PDF text."""

    exclude_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))


class PdfResumeReader:
    """Extract resume text from PDFs as markdown."""

    suffixes: tuple[str, ...] = (".pdf",)

    def __init__(self, *, config: PdfReaderConfig | None = None) -> None:
        self._config = config or PdfReaderConfig()

    def read(self, path: Path) -> str:
        return pdf_utils.extract_markdown(
            path,
            exclude_patterns=self._config.exclude_patterns,
        )
