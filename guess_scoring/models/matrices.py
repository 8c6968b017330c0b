"""
Scoring matrices for race and qualifying guesses.

Row ``i`` holds the points awarded to the competitor who actually finished in
position ``i + 1``, indexed by the position (0-based) at which the guess placed
that competitor. Rows are fixed data, they are not derived from a formula.
"""

from enum import Enum
from types import MappingProxyType


class SessionType(str, Enum):
    """Session a guess was made for."""

    QUALIFYING = "QUALIFYING"
    RACE = "RACE"


RACE_MATRIX: tuple[tuple[float, ...], ...] = (
    (25, 21.25, 18.062, 12.282, 10.44),
    (21.25, 25, 21.25, 14.45, 12.282, 10.44),
    (18.062, 21.25, 25, 17, 14.45, 12.282, 7.83),
    (15.353, 18.062, 21.25, 20, 17, 14.45, 9.212, 7.83),
    (13.05, 15.353, 18.062, 17, 20, 17, 10.837, 9.212, 7.83),
    (0, 13.05, 15.353, 14.45, 17, 20, 12.75, 10.837, 9.212, 7.83),
    (0, 0, 13.05, 12.282, 14.45, 17, 15, 12.75, 10.837, 9.212),
    (0, 0, 0, 10.44, 12.282, 14.45, 12.75, 15, 12.75, 10.837),
    (0, 0, 0, 0, 10.44, 12.282, 10.837, 12.75, 15, 12.75),
    (0, 0, 0, 0, 0, 10.44, 9.212, 10.837, 12.75, 15),
    (0, 0, 0, 0, 0, 0, 7.83, 9.212, 10.837, 12.75),
    (0, 0, 0, 0, 0, 0, 0, 7.83, 9.212, 10.837),
    (0, 0, 0, 0, 0, 0, 0, 0, 7.83, 9.212),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 7.83),
)

QUALIFYING_MATRIX: tuple[tuple[float, ...], ...] = (
    (5.0, 4.25, 3.612),
    (4.25, 5.0, 4.25, 2.89),
    (3.612, 4.25, 5.0, 3.4, 2.89),
    (0, 3.612, 4.25, 4.0, 3.4, 2.89),
    (0, 0, 3.612, 3.4, 4.0, 3.4, 2.167),
    (0, 0, 0, 2.89, 3.4, 4.0, 2.55, 2.167),
    (0, 0, 0, 0, 2.89, 3.4, 3.0, 2.55, 2.167),
    (0, 0, 0, 0, 0, 2.89, 2.55, 3.0, 2.55),
    (0, 0, 0, 0, 0, 0, 2.167, 2.55, 3.0, 2.55),
    (0, 0, 0, 0, 0, 0, 0, 2.167, 2.55, 3.0),
    (0, 0, 0, 0, 0, 0, 0, 0, 2.167, 2.55),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 2.167),
)

SCORING_MATRICES = MappingProxyType(
    {
        SessionType.RACE: RACE_MATRIX,
        SessionType.QUALIFYING: QUALIFYING_MATRIX,
    }
)


def get_matrix(session_type: SessionType) -> tuple[tuple[float, ...], ...]:
    """Return the scoring matrix for a session type."""
    return SCORING_MATRICES[session_type]


def scored_positions(session_type: SessionType) -> int:
    """Number of actual positions that can earn points (14 race, 12 qualifying)."""
    return len(SCORING_MATRICES[session_type])
