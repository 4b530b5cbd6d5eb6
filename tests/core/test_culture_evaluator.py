from __future__ import annotations

import pytest

from resumescreening.core.evaluators import CultureEvaluator
from resumescreening.core.evaluators.culture import CultureConfig
from resumescreening.core.text import normalize_text
from resumescreening.schemas import JobRequirements


def test_cultural_fit_caps_points_per_value_and_normalizes():
    evaluator = CultureEvaluator()
    text = normalize_text(
        "Collaborative team player with strong communication; took ownership of releases."
    )

    result = evaluator.evaluate(
        text,
        JobRequirements(cultural_values=["collaboration", "ownership", "customer_focus"]),
    )

    # collaboration capped at 2, ownership 1, unknown tag 0 -> 3 / 3 * 2
    assert result["scores"]["cultural_fit"] == pytest.approx(2.0)
    assert result["metadata"]["values"]["collaboration"] == [
        "team player",
        "collaborative",
        "communication",
    ]
    assert result["metadata"]["values"]["customer_focus"] == []


def test_cultural_fit_zero_without_values():
    evaluator = CultureEvaluator()

    result = evaluator.evaluate(normalize_text("team player"), JobRequirements())

    assert result["scores"]["cultural_fit"] == 0.0


def test_hyphenated_indicators_match_normalized_text():
    evaluator = CultureEvaluator()
    text = normalize_text("Led cross-functional squads and problem-solving workshops")

    result = evaluator.evaluate(
        text, JobRequirements(cultural_values=["collaboration", "innovation"])
    )

    assert result["metadata"]["values"]["collaboration"] == ["cross-functional"]
    assert result["metadata"]["values"]["innovation"] == ["problem-solving"]
    assert result["scores"]["cultural_fit"] == pytest.approx(2.0)


def test_custom_value_falls_back_to_literal_match():
    evaluator = CultureEvaluator()
    text = normalize_text("Known for customer focus and Kaizen habits")

    result = evaluator.evaluate(
        text, JobRequirements(cultural_values=["customer focus", "kaizen"])
    )

    assert result["scores"]["cultural_fit"] == pytest.approx(2.0)


def test_cultural_indicators_list_first_keyword_per_known_value():
    evaluator = CultureEvaluator()
    text = normalize_text("A team player who is proactive and takes responsibility")

    result = evaluator.evaluate(text, JobRequirements())

    assert result["metadata"]["cultural_indicators"] == [
        "collaboration: team player",
        "ownership: responsibility",
    ]


def test_value_tags_are_matched_case_insensitively():
    evaluator = CultureEvaluator(config=CultureConfig(indicators={"Growth Mindset": ["learning"]}))

    result = evaluator.evaluate(
        normalize_text("Always learning"), JobRequirements(cultural_values=["growth-mindset"])
    )

    assert result["scores"]["cultural_fit"] == pytest.approx(2.0)
