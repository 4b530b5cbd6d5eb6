"""Utilities for extracting markdown from PDF resumes."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

import pymupdf4llm

# Page footers such as "Page 2 of 5" or a bare "2 / 5".
_PAGE_FOOTER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\s*page\s+\d+\s*(?:of|/)\s*\d+\s*$", re.IGNORECASE),
    re.compile(r"^\s*\d+\s*/\s*\d+\s*$"),
)


def extract_markdown(
    pdf_path: str | Path,
    *,
    exclude_patterns: Sequence[str] | None = None,
) -> str:
    """Return markdown text extracted from a PDF, removing boilerplate lines.

    Parameters
    ----------
    pdf_path:
        Path to the source PDF file.
    exclude_patterns:
        Optional list of literal strings. Any line containing one of them
        (optionally followed by a page counter like ``1 / 3``) is dropped.
        Page footer lines are always dropped.
    """

    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(pdf_path)

    markdown = pymupdf4llm.to_markdown(str(pdf_path))
    patterns = _build_patterns(exclude_patterns or ())

    cleaned_lines: list[str] = []
    for line in markdown.splitlines():
        if not line.strip():
            cleaned_lines.append(line)
            continue
        if any(pattern.search(line) for pattern in patterns):
            continue
        cleaned_lines.append(line)
    return "\n".join(cleaned_lines)


def _build_patterns(excludes: Iterable[str]) -> list[re.Pattern[str]]:
    patterns: list[re.Pattern[str]] = list(_PAGE_FOOTER_PATTERNS)
    for text in excludes:
        if not text:
            continue
        escaped = re.escape(text)
        patterns.append(re.compile(rf"{escaped}(?:\s+\d+\s*/\s*\d+)?"))
    return patterns


__all__ = ["extract_markdown"]
