"""Position-based scoring of race and qualifying guesses."""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Hashable, Sequence

from guess_scoring.models.matrices import SessionType, get_matrix
from guess_scoring.utils.validation import ensure_order, parse_session_type

logger = logging.getLogger(__name__)

NOT_FOUND = -1
SCORE_DECIMALS = 3


def round_score(total: float) -> float:
    """Round to 3 decimals, ties away from zero (x * 1000, round, / 1000)."""
    scaled = Decimal(total * 10**SCORE_DECIMALS).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(scaled) / 10**SCORE_DECIMALS


def map_guess_positions(
    actual_order: Sequence[Hashable], guess_order: Sequence[Hashable]
) -> dict[int, int]:
    """
    Map each actual position index to the index of that competitor in the guess.

    Only the first occurrence of a competitor in the guess counts. Competitors
    missing from the guess map to NOT_FOUND.
    """
    first_seen: dict[Hashable, int] = {}
    duplicates = set()
    for index, competitor in enumerate(guess_order):
        if competitor in first_seen:
            duplicates.add(competitor)
            continue
        first_seen[competitor] = index

    if duplicates:
        logger.warning(f"Guess contains duplicate competitors, first occurrence wins: {duplicates}")

    return {
        index: first_seen.get(competitor, NOT_FOUND)
        for index, competitor in enumerate(actual_order)
    }


@dataclass(frozen=True)
class PositionScore:
    """Points earned for one actual finishing position."""

    actual_position: int
    competitor: Any
    guessed_position: int | None
    points: float

    def to_dict(self) -> dict:
        return {
            "actualPosition": self.actual_position,
            "competitor": self.competitor,
            "guessedPosition": self.guessed_position,
            "points": self.points,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Total score of a guess plus the per-position breakdown it was summed from."""

    session_type: SessionType
    total_score: float
    breakdown: tuple[PositionScore, ...]

    @property
    def correct_positions(self) -> int:
        """Number of competitors guessed in exactly their actual position."""
        return sum(
            1 for entry in self.breakdown if entry.guessed_position == entry.actual_position
        )


class GuessScoreCalculator:
    """Base calculator. Subclasses pick the session type (and with it the matrix)."""

    session_type: SessionType

    def __init__(self, actual_order: Sequence[Hashable], guess_order: Sequence[Hashable]):
        self.actual_order = tuple(ensure_order(actual_order, "actualOrder"))
        self.guess_order = tuple(ensure_order(guess_order, "guessOrder"))
        self.matrix = get_matrix(self.session_type)
        self.position_map = map_guess_positions(self.actual_order, self.guess_order)

        if len(self.actual_order) > len(self.matrix):
            logger.warning(
                f"{self.session_type.value}: only the first {len(self.matrix)} of "
                f"{len(self.actual_order)} actual positions are scored"
            )

    def points_for(self, actual_index: int) -> float:
        """Points for one actual position, 0 when not guessed or guessed out of range."""
        guessed_index = self.position_map.get(actual_index, NOT_FOUND)
        row = self.matrix[actual_index]
        if 0 <= guessed_index < len(row):
            return row[guessed_index]
        return 0

    def breakdown(self) -> tuple[PositionScore, ...]:
        entries = []
        for actual_index in range(len(self.matrix)):
            guessed_index = self.position_map.get(actual_index, NOT_FOUND)
            competitor = (
                self.actual_order[actual_index] if actual_index < len(self.actual_order) else None
            )
            entries.append(
                PositionScore(
                    actual_position=actual_index + 1,
                    competitor=competitor,
                    guessed_position=guessed_index + 1 if guessed_index != NOT_FOUND else None,
                    points=self.points_for(actual_index),
                )
            )
        return tuple(entries)

    def result(self) -> ScoreResult:
        """Score the guess. The total is rounded once, after summing every row."""
        breakdown = self.breakdown()
        total = 0
        for entry in breakdown:
            total += entry.points
        return ScoreResult(
            session_type=self.session_type,
            total_score=round_score(total),
            breakdown=breakdown,
        )

    def calculate(self) -> float:
        return self.result().total_score


class RaceScoreCalculator(GuessScoreCalculator):
    session_type = SessionType.RACE


class QualifyingScoreCalculator(GuessScoreCalculator):
    session_type = SessionType.QUALIFYING


CALCULATORS: dict[SessionType, type[GuessScoreCalculator]] = {
    SessionType.RACE: RaceScoreCalculator,
    SessionType.QUALIFYING: QualifyingScoreCalculator,
}


def get_calculator(
    session_type: SessionType | str,
    actual_order: Sequence[Hashable],
    guess_order: Sequence[Hashable],
) -> GuessScoreCalculator:
    """Build the calculator for a session type."""
    return CALCULATORS[parse_session_type(session_type)](actual_order, guess_order)


def score_guess(
    session_type: SessionType | str,
    actual_order: Sequence[Hashable],
    guess_order: Sequence[Hashable],
) -> ScoreResult:
    """Score a guess and keep the per-position breakdown."""
    return get_calculator(session_type, actual_order, guess_order).result()


def calculate_score(
    session_type: SessionType | str,
    actual_order: Sequence[Hashable],
    guess_order: Sequence[Hashable],
) -> float:
    """
    Score a guess against the actual order of a session.

    Args:
        session_type: QUALIFYING or RACE
        actual_order: Competitor ids in finishing order (index 0 = winner)
        guess_order: Competitor ids in guessed order

    Returns:
        Total points rounded to 3 decimals

    Raises:
        InvalidSessionTypeError: Unknown session type
        MalformedInputError: Either order is None, not a list or holds booleans
    """
    return score_guess(session_type, actual_order, guess_order).total_score


def calculate_race_score(actual_order: Sequence[Hashable], guess_order: Sequence[Hashable]) -> float:
    return RaceScoreCalculator(actual_order, guess_order).calculate()


def calculate_qualifying_score(
    actual_order: Sequence[Hashable], guess_order: Sequence[Hashable]
) -> float:
    return QualifyingScoreCalculator(actual_order, guess_order).calculate()


def exact_position_points(session_type: SessionType | str) -> tuple[float, ...]:
    """
    Headline points per actual position, as shown next to a guess.

    This is the value at the row's own index, or the row's last value when the
    row is shorter than its position (P11 onwards in both tables).
    """
    matrix = get_matrix(parse_session_type(session_type))
    return tuple(row[min(index, len(row) - 1)] for index, row in enumerate(matrix))


def max_possible_score(session_type: SessionType | str, positions: int | None = None) -> float:
    """Sum of exact_position_points over the first ``positions`` positions."""
    points = exact_position_points(session_type)
    if positions is not None:
        points = points[: max(positions, 0)]
    return round_score(sum(points))
