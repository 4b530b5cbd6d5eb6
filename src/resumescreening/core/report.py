"""Aggregate reporting over screening results."""

from __future__ import annotations

from typing import Sequence

from .results import ReportSummary, ScreeningReport, ScreeningResult

_RECOMMENDED: frozenset[str] = frozenset({"strong_hire", "hire"})


def build_screening_report(
    results: Sequence[ScreeningResult],
    *,
    top_n: int = 5,
) -> ScreeningReport:
    """Summarize results that are already ranked by ``batch_screen``."""
    summary = _summarize(results)
    top_candidates = [
        result for result in results if result.score.recommendation in _RECOMMENDED
    ][:top_n]
    return ScreeningReport(
        summary=summary,
        top_candidates=top_candidates,
        insights=_insights(summary, results),
    )


def _summarize(results: Sequence[ScreeningResult]) -> ReportSummary:
    counts = {"strong_hire": 0, "hire": 0, "maybe": 0, "no_hire": 0}
    for result in results:
        counts[result.score.recommendation] += 1

    total = len(results)
    avg_score = sum(r.score.total_score for r in results) / total if total else 0.0

    return ReportSummary(
        total_candidates=total,
        strong_hires=counts["strong_hire"],
        hires=counts["hire"],
        maybes=counts["maybe"],
        no_hires=counts["no_hire"],
        avg_score=avg_score,
    )


def _insights(summary: ReportSummary, results: Sequence[ScreeningResult]) -> list[str]:
    total = summary.total_candidates
    strong_share = summary.strong_hires / total * 100 if total else 0.0
    return [
        f"{summary.strong_hires + summary.hires} candidates recommended for interview",
        f"Average screening score: {summary.avg_score:.1f}/10",
        f"{strong_share:.0f}% strong hire candidates",
        f"Top candidate scored {results[0].score.total_score}/10"
        if results
        else "No candidates scored",
    ]
