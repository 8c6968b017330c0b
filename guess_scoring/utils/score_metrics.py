"""Summary statistics for scored guesses."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Sequence

import numpy as np

from guess_scoring.models.scoring import ScoreResult, max_possible_score

logger = logging.getLogger(__name__)


def _percent(score: float, max_score: float) -> int:
    """Whole percent of max_score, halves rounded up."""
    if not max_score:
        return 0
    return int(Decimal(score / max_score * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def summarize_result(result: ScoreResult, positions: int | None = None) -> dict[str, Any]:
    """
    Calculator-page statistics for one scored guess.

    Args:
        result: Scored guess
        positions: Number of actual positions considered (defaults to the
            positions that had a competitor)

    Returns:
        Dict with total_score, max_possible_score, percentage (integer percent),
        average_per_position, best_position_points and scored_positions
    """
    if positions is None:
        positions = sum(1 for entry in result.breakdown if entry.competitor is not None)
    positions = min(positions, len(result.breakdown))

    max_score = max_possible_score(result.session_type, positions)
    points = [entry.points for entry in result.breakdown[:positions]]

    return {
        "total_score": result.total_score,
        "max_possible_score": max_score,
        "percentage": _percent(result.total_score, max_score),
        "average_per_position": round(result.total_score / positions, 1) if positions else 0.0,
        "best_position_points": max((p for p in points if p > 0), default=0),
        "scored_positions": sum(1 for p in points if p > 0),
    }


def aggregate_scores(results: Sequence[ScoreResult]) -> dict[str, Any]:
    """Aggregate totals across many scored guesses, per session type."""
    if not results:
        return {"error": "No results to aggregate"}

    by_session: dict[str, list[float]] = {}
    for result in results:
        by_session.setdefault(result.session_type.value.lower(), []).append(result.total_score)

    aggregated: dict[str, Any] = {}
    for session, totals in by_session.items():
        aggregated[session] = {
            "count": len(totals),
            "mean": float(np.mean(totals)),
            "std": float(np.std(totals)),
            "best": float(np.max(totals)),
        }

    aggregated["n_results"] = len(results)
    logger.debug(f"Aggregated {len(results)} scored guesses")
    return aggregated
