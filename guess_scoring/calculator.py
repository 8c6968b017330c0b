"""
Score calculation boundary.

Accepts a raw request (as posted by the calculator page), validates it and
returns the total with its per-position breakdown.
"""

import logging
from typing import Any

from guess_scoring.models.scoring import max_possible_score, score_guess
from guess_scoring.types import ScoreResponse
from guess_scoring.utils import config_loader
from guess_scoring.utils.validation import validate_score_request

logger = logging.getLogger(__name__)


def calculate_score_response(payload: Any) -> ScoreResponse:
    """
    Validate a score request and compute the response.

    Args:
        payload: ``{"sessionType", "actualOrder", "guessOrder"}`` (snake_case and
            the calculator page's ``guessType/actualResult/userGuess`` keys work too)

    Returns:
        Response with totalScore, perPositionBreakdown, maxPossibleScore and
        correctGuesses

    Raises:
        InvalidSessionTypeError: Unknown session type
        MalformedInputError: Missing or malformed orders
    """
    calculator_config = config_loader.get_section("calculator")
    request = validate_score_request(
        payload,
        require_equal_length=calculator_config.get("require_equal_length", True),
        max_entries=calculator_config.get("max_entries"),
    )

    result = score_guess(request.session_type, request.actual_order, request.guess_order)
    considered = min(len(request.actual_order), len(result.breakdown))

    logger.info(
        f"Scored {request.session_type.value} guess: {result.total_score} "
        f"({len(request.guess_order)} guessed, {len(request.actual_order)} actual)"
    )

    return {
        "sessionType": request.session_type.value,
        "totalScore": result.total_score,
        "perPositionBreakdown": [entry.to_dict() for entry in result.breakdown],
        "maxPossibleScore": max_possible_score(request.session_type, considered),
        "correctGuesses": result.correct_positions,
    }
