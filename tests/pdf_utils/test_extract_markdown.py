from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

import resumescreening.pdf_utils as pdf_utils
from resumescreening.readers import PdfResumeReader
from resumescreening.readers.pdf import PdfReaderConfig

SAMPLE_MARKDOWN = (
    "# Jane Doe\n"
    "CONFIDENTIAL - do not forward 1 / 3\n"
    "Senior python developer with 7 years of experience\n"
    "\n"
    "Page 2 of 3\n"
    "2 / 3\n"
    "Bachelor of Science"
)


@pytest.fixture(autouse=True)
def stub_pymupdf4llm(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], str]:
    def fake_to_markdown(path: str) -> str:  # pragma: no cover - simple passthrough
        return SAMPLE_MARKDOWN

    monkeypatch.setattr(pdf_utils.pymupdf4llm, "to_markdown", fake_to_markdown)
    return fake_to_markdown


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-1.4\n% Dummy")  # Presence is enough, content not used.
    return path


def test_extract_markdown_drops_page_footers(pdf_file: Path) -> None:
    result = pdf_utils.extract_markdown(pdf_file)

    assert "Page 2 of 3" not in result
    assert "\n2 / 3\n" not in f"\n{result}\n"
    assert "CONFIDENTIAL" in result
    assert "# Jane Doe" in result
    assert "Bachelor of Science" in result


def test_extract_markdown_excludes_boilerplate(pdf_file: Path) -> None:
    result = pdf_utils.extract_markdown(pdf_file, exclude_patterns=["CONFIDENTIAL", ""])

    assert "CONFIDENTIAL" not in result
    assert "Senior python developer with 7 years of experience" in result


def test_extract_markdown_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        pdf_utils.extract_markdown(tmp_path / "missing.pdf")


def test_pdf_reader_applies_configured_excludes(pdf_file: Path) -> None:
    reader = PdfResumeReader(config=PdfReaderConfig(exclude_patterns=["CONFIDENTIAL"]))

    text = reader.read(pdf_file)

    assert reader.suffixes == (".pdf",)
    assert "CONFIDENTIAL" not in text
    assert "Page 2 of 3" not in text
