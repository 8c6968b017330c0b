"""Scoring payload type definitions."""

from .score_types import (
    GuessedDriver,
    LiveScore,
    LiveStanding,
    PositionBreakdownEntry,
    ScoreResponse,
    StandingsEntry,
)

__all__ = [
    "GuessedDriver",
    "LiveScore",
    "LiveStanding",
    "PositionBreakdownEntry",
    "ScoreResponse",
    "StandingsEntry",
]
