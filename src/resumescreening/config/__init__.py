"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> Any:
        """Load a YAML configuration by name, with or without its extension.

        An empty document loads as an empty mapping.
        """
        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
        return {} if loaded is None else loaded

    def _resolve(self, name: str) -> Path:
        direct = self._base_path / name
        if direct.suffix in _SUFFIXES or direct.is_file():
            return direct
        for suffix in _SUFFIXES:
            path = self._base_path / f"{name}{suffix}"
            if path.exists():
                return path
        return self._base_path / f"{name}{_SUFFIXES[0]}"


__all__ = ["ConfigManager"]
