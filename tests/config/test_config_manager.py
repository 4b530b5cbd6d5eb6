from __future__ import annotations

from pathlib import Path

import pytest

from resumescreening.config import ConfigManager


def test_load_by_name_without_suffix(tmp_path: Path):
    (tmp_path / "screening.yaml").write_text(
        "core:\n  red_flag_penalty: 2.0\n", encoding="utf-8"
    )

    loaded = ConfigManager(tmp_path).load("screening")

    assert loaded == {"core": {"red_flag_penalty": 2.0}}


def test_load_yml_suffix_and_explicit_name(tmp_path: Path):
    (tmp_path / "weights.yml").write_text("core:\n  score_weights:\n    skill_match: 0.5\n", encoding="utf-8")
    manager = ConfigManager(tmp_path)

    assert manager.load("weights") == {"core": {"score_weights": {"skill_match": 0.5}}}
    assert manager.load("weights.yml") == manager.load("weights")


def test_empty_document_loads_as_empty_mapping(tmp_path: Path):
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")

    assert ConfigManager(tmp_path).load("empty") == {}


def test_missing_config_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path).load("absent")
