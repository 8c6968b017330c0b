"""Type definitions for scoring payloads."""

from typing import NotRequired, TypedDict


class PositionBreakdownEntry(TypedDict):
    """Points earned for one actual finishing position."""

    actualPosition: int
    competitor: int | str | None
    guessedPosition: int | None
    points: float


class ScoreResponse(TypedDict):
    """Response returned by the calculation boundary."""

    sessionType: str
    totalScore: float
    perPositionBreakdown: list[PositionBreakdownEntry]
    maxPossibleScore: float
    correctGuesses: int


class GuessedDriver(TypedDict):
    """One entry of a guess as used by live timing."""

    pilot_id: int | str
    code: NotRequired[str]
    family_name: NotRequired[str]
    pilot_name: NotRequired[str]


class LiveStanding(TypedDict):
    """One entry of the live timing order."""

    driver_acronym: NotRequired[str]
    driver_name: NotRequired[str]


class LiveScore(TypedDict):
    """Score of a guess against the current live order."""

    score: float
    correct_guesses: int
    actual_order: list[int | str]


class StandingsEntry(TypedDict):
    """One participant's score for one event."""

    participant: str
    team: NotRequired[str]
    event: str
    score: float
