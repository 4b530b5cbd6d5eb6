"""Text normalization shared by the evaluators."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping

_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_TAG_SEPARATOR_PATTERN = re.compile(r"[\s\-]+")


def normalize_text(text: str) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace."""
    lowered = (text or "").lower()
    spaced = _PUNCTUATION_PATTERN.sub(" ", lowered)
    return _WHITESPACE_PATTERN.sub(" ", spaced).strip()


def canonical_tag(name: str) -> str:
    """Canonical lookup key for skill names and value tags.

    ``"Project Management"`` and ``"project-management"`` both become
    ``"project_management"``.
    """
    return _TAG_SEPARATOR_PATTERN.sub("_", (name or "").strip().lower())


def contains_phrase(text: str, phrase: str) -> bool:
    normalized = normalize_text(phrase)
    return bool(normalized) and normalized in text


def freeze_table(table: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    """Return a read-only copy of a keyword table keyed by canonical tags."""
    return MappingProxyType(
        {canonical_tag(key): tuple(values) for key, values in table.items()}
    )


__all__ = ["normalize_text", "canonical_tag", "contains_phrase", "freeze_table"]
