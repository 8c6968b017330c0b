"""
Input validation for guess scoring requests.

Everything fatal is detected here, before the scoring computation runs.
A competitor missing from the guess is not an error, it simply scores zero.
"""

import logging
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
)

from guess_scoring.models.matrices import SessionType

logger = logging.getLogger(__name__)

CompetitorId = StrictInt | StrictStr


class ScoreRequestError(ValueError):
    """Base class for rejected scoring requests."""


class InvalidSessionTypeError(ScoreRequestError):
    """Session type is missing or not one of QUALIFYING / RACE."""


class MalformedInputError(ScoreRequestError):
    """Actual or guessed order is missing or has the wrong shape."""


def parse_session_type(value: Any) -> SessionType:
    """Coerce a session type (enum member or case-insensitive name)."""
    if isinstance(value, SessionType):
        return value
    if isinstance(value, str):
        try:
            return SessionType(value.strip().upper())
        except ValueError:
            pass
    valid = ", ".join(member.value for member in SessionType)
    raise InvalidSessionTypeError(f"Invalid session type {value!r}. Expected one of: {valid}")


def ensure_order(order: Any, name: str) -> list:
    """Reject null or non-sequence orders and boolean ids. Strings are not accepted as orders."""
    if order is None:
        raise MalformedInputError(f"{name} is required")
    if isinstance(order, (str, bytes)) or not isinstance(order, (list, tuple)):
        raise MalformedInputError(f"{name} must be a list, got {type(order).__name__}")
    if any(isinstance(item, bool) for item in order):
        raise MalformedInputError(f"{name} must not contain booleans")
    return list(order)


class ScoreRequest(BaseModel):
    """Validated payload of a score calculation request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    session_type: SessionType = Field(
        validation_alias=AliasChoices("session_type", "sessionType", "guessType")
    )
    actual_order: list[CompetitorId] = Field(
        validation_alias=AliasChoices("actual_order", "actualOrder", "actualResult")
    )
    guess_order: list[CompetitorId] = Field(
        validation_alias=AliasChoices("guess_order", "guessOrder", "userGuess")
    )


def _pick(payload: dict, *keys: str) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def validate_score_request(
    payload: Any,
    require_equal_length: bool = False,
    max_entries: int | None = None,
) -> ScoreRequest:
    """
    Validate a raw request dict and build a ScoreRequest.

    Args:
        payload: Dict with a session type and the two orders (camelCase or
            snake_case keys)
        require_equal_length: Reject orders of different lengths
        max_entries: Reject orders longer than this

    Returns:
        Validated request

    Raises:
        InvalidSessionTypeError: Unknown or missing session type
        MalformedInputError: Missing orders, wrong element types or length rules
    """
    if not isinstance(payload, dict):
        raise MalformedInputError(f"Request must be an object, got {type(payload).__name__}")

    session_type = parse_session_type(_pick(payload, "session_type", "sessionType", "guessType"))
    actual = ensure_order(_pick(payload, "actual_order", "actualOrder", "actualResult"), "actualOrder")
    guess = ensure_order(_pick(payload, "guess_order", "guessOrder", "userGuess"), "guessOrder")

    if require_equal_length and len(actual) != len(guess):
        raise MalformedInputError(
            f"actualOrder and guessOrder must have the same length "
            f"({len(actual)} != {len(guess)})"
        )

    if max_entries is not None:
        for name, order in (("actualOrder", actual), ("guessOrder", guess)):
            if len(order) > max_entries:
                raise MalformedInputError(
                    f"{name} has {len(order)} entries, maximum is {max_entries}"
                )

    try:
        return ScoreRequest(session_type=session_type, actual_order=actual, guess_order=guess)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid competitor ids: {e}") from e
