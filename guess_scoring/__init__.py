"""Position-based scoring of race and qualifying guesses."""

from guess_scoring.models.matrices import SessionType
from guess_scoring.models.scoring import (
    QualifyingScoreCalculator,
    RaceScoreCalculator,
    ScoreResult,
    calculate_score,
    max_possible_score,
    score_guess,
)
from guess_scoring.utils.validation import (
    InvalidSessionTypeError,
    MalformedInputError,
    ScoreRequestError,
)

__all__ = [
    "InvalidSessionTypeError",
    "MalformedInputError",
    "QualifyingScoreCalculator",
    "RaceScoreCalculator",
    "ScoreRequestError",
    "ScoreResult",
    "SessionType",
    "calculate_score",
    "max_possible_score",
    "score_guess",
]
