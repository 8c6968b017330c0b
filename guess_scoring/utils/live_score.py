"""Scores a guess against the current live timing order."""

import logging
from typing import Sequence

from guess_scoring.models.matrices import SessionType
from guess_scoring.models.scoring import score_guess
from guess_scoring.types import GuessedDriver, LiveScore, LiveStanding
from guess_scoring.utils import config_loader
from guess_scoring.utils.validation import ensure_order, parse_session_type

logger = logging.getLogger(__name__)


def _matches(guess: GuessedDriver, standing: LiveStanding) -> bool:
    acronym = standing.get("driver_acronym")
    driver_name = standing.get("driver_name") or ""
    code = guess.get("code")
    family_name = guess.get("family_name")
    pilot_name = guess.get("pilot_name")

    if code and code == acronym:
        return True
    if family_name and (family_name == driver_name or family_name in driver_name):
        return True
    return bool(pilot_name) and pilot_name == driver_name


def build_live_actual_order(
    guesses: Sequence[GuessedDriver],
    standings: Sequence[LiveStanding],
    placeholder_id_base: int | None = None,
) -> list[int | str]:
    """
    Translate live standings into guessed-driver ids.

    Standings entries that match no guessed driver get ``placeholder_id_base + index``
    so they never score. The result has exactly as many entries as the guess.
    """
    if placeholder_id_base is None:
        placeholder_id_base = config_loader.get("live_timing.placeholder_id_base", 999999)

    actual: list[int | str] = []
    unmatched = []
    for index, standing in enumerate(standings):
        match = next((g for g in guesses if _matches(g, standing)), None)
        if match is None:
            unmatched.append(standing.get("driver_acronym") or standing.get("driver_name"))
            actual.append(placeholder_id_base + index)
        else:
            actual.append(match["pilot_id"])

    if unmatched:
        logger.warning(f"Live standings without a guessed driver: {unmatched}")

    actual = actual[: len(guesses)]
    while len(actual) < len(guesses):
        actual.append(placeholder_id_base + len(actual))
    return actual


def calculate_live_score(
    guesses: Sequence[GuessedDriver],
    standings: Sequence[LiveStanding],
    session_type: SessionType | str = SessionType.RACE,
    placeholder_id_base: int | None = None,
) -> LiveScore:
    """Score a guess against the live order and count exact position hits."""
    session = parse_session_type(session_type)
    guesses = ensure_order(guesses, "guesses")
    standings = ensure_order(standings, "standings")

    guess_ids = [g["pilot_id"] for g in guesses]
    actual = build_live_actual_order(guesses, standings, placeholder_id_base)
    result = score_guess(session, actual, guess_ids)

    correct = sum(1 for guessed, current in zip(guess_ids, actual) if guessed == current)

    return {
        "score": result.total_score,
        "correct_guesses": correct,
        "actual_order": actual,
    }
