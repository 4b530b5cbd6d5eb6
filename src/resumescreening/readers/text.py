"""Plain text and markdown resume reader."""

from __future__ import annotations

from pathlib import Path


class PlainTextReader:
    """Read UTF-8 text resumes, replacing undecodable bytes."""

    suffixes: tuple[str, ...] = (".txt", ".md", ".markdown")

    def read(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8", errors="replace")
