"""
Tests for guess scoring: position mapping, lookup and rounding.
"""

import logging

import pytest

from guess_scoring.models.matrices import SessionType
from guess_scoring.models.scoring import (
    NOT_FOUND,
    QualifyingScoreCalculator,
    RaceScoreCalculator,
    calculate_qualifying_score,
    calculate_race_score,
    calculate_score,
    exact_position_points,
    get_calculator,
    map_guess_positions,
    max_possible_score,
    round_score,
    score_guess,
)
from guess_scoring.utils.validation import InvalidSessionTypeError, MalformedInputError


# Position mapping


def test_map_guess_positions_finds_each_competitor():
    mapping = map_guess_positions(["A", "B", "C"], ["B", "A"])
    assert mapping == {0: 1, 1: 0, 2: NOT_FOUND}


def test_map_guess_positions_first_occurrence_wins():
    mapping = map_guess_positions(["A"], ["X", "Y", "A", "Z", "W", "A"])
    assert mapping == {0: 2}


def test_map_guess_positions_compares_ids_strictly():
    """Integer 1 and string '1' are different competitors."""
    mapping = map_guess_positions([1], ["1"])
    assert mapping == {0: NOT_FOUND}


def test_map_guess_positions_empty_inputs():
    assert map_guess_positions([], ["A"]) == {}
    assert map_guess_positions(["A"], []) == {0: NOT_FOUND}


# Lookup and accumulate


def test_race_swapped_leaders(race_top3):
    actual, guess = race_top3
    # 21.25 (P1 guessed 2nd) + 21.25 (P2 guessed 1st) + 25 (P3 exact)
    assert calculate_score(SessionType.RACE, actual, guess) == 67.5


def test_qualifying_swapped_leaders(race_top3):
    actual, guess = race_top3
    # 4.25 + 4.25 + 5.0
    assert calculate_score(SessionType.QUALIFYING, actual, guess) == 13.5


def test_perfect_race_guess(full_race_order):
    """Rows 11-14 have no entry at their own index, so only the top 10 score."""
    score = calculate_score("RACE", full_race_order, list(full_race_order))
    assert score == 195.0


def test_perfect_qualifying_guess(full_qualifying_order):
    """Rows 11-12 have no entry at their own index, so only the top 10 score."""
    score = calculate_score("QUALIFYING", full_qualifying_order, list(full_qualifying_order))
    assert score == 39.0


def test_zero_overlap_scores_nothing():
    assert calculate_score("RACE", [1, 2, 3], [7, 8, 9]) == 0
    assert calculate_score("QUALIFYING", [1, 2, 3], []) == 0


def test_last_entry_of_row_still_scores():
    guess = ["x0", "x1", "x2", "x3", "A"]
    assert calculate_race_score(["A"], guess) == 10.44


def test_guess_beyond_row_scores_zero():
    guess = ["x0", "x1", "x2", "x3", "x4", "A"]
    assert calculate_race_score(["A"], guess) == 0


def test_zero_cells_score_zero():
    """P6 guessed as winner is inside the row but worth nothing."""
    actual = ["a1", "a2", "a3", "a4", "a5", "F"]
    assert calculate_race_score(actual, ["F"]) == 0


def test_duplicate_guess_uses_first_occurrence():
    guess = ["X", "Y", "A", "Z", "W", "A"]
    # Index 2 gives 18.062, index 5 would be out of range for P1
    assert calculate_race_score(["A"], guess) == 18.062


def test_actual_positions_beyond_matrix_are_ignored():
    actual = [f"d{i}" for i in range(20)]
    guess = ["d19"]
    assert calculate_qualifying_score(actual, guess) == 0


def test_short_actual_order_leaves_rows_unscored():
    result = score_guess(SessionType.RACE, ["A"], ["A"])
    assert result.total_score == 25
    assert len(result.breakdown) == 14
    assert all(entry.points == 0 for entry in result.breakdown[1:])
    assert result.breakdown[1].competitor is None


def test_breakdown_matches_total(race_top3):
    actual, guess = race_top3
    result = score_guess(SessionType.RACE, actual, guess)

    first = result.breakdown[0]
    assert first.actual_position == 1
    assert first.competitor == "VER"
    assert first.guessed_position == 2
    assert first.points == 21.25

    assert result.breakdown[3].guessed_position is None
    assert round_score(sum(e.points for e in result.breakdown)) == result.total_score
    assert result.correct_positions == 1


def test_breakdown_to_dict_uses_response_keys(race_top3):
    actual, guess = race_top3
    entry = score_guess("RACE", actual, guess).breakdown[2]
    assert entry.to_dict() == {
        "actualPosition": 3,
        "competitor": "LEC",
        "guessedPosition": 3,
        "points": 25,
    }


def test_repeated_calls_are_identical(race_top3):
    actual, guess = race_top3
    first = score_guess("RACE", actual, guess)
    second = score_guess("RACE", actual, guess)
    assert first == second


# Calculators


def test_calculator_classes_pick_their_matrix(race_top3):
    actual, guess = race_top3
    assert RaceScoreCalculator(actual, guess).calculate() == 67.5
    assert QualifyingScoreCalculator(actual, guess).calculate() == 13.5


def test_get_calculator_accepts_lowercase_session():
    calculator = get_calculator("qualifying", ["A"], ["A"])
    assert isinstance(calculator, QualifyingScoreCalculator)


def test_unknown_session_type_rejected():
    with pytest.raises(InvalidSessionTypeError, match="SPRINT"):
        calculate_score("SPRINT", ["A"], ["A"])


def test_none_orders_rejected():
    with pytest.raises(MalformedInputError, match="actualOrder"):
        calculate_score("RACE", None, ["A"])

    with pytest.raises(MalformedInputError, match="guessOrder"):
        RaceScoreCalculator(["A"], None)


# Rounding


def test_round_score_ties_go_up():
    # 2.0625 is exact in binary, so this is a true tie at the third decimal
    assert round_score(2.0625) == 2.063


def test_round_score_removes_float_noise():
    assert round_score(0.1 + 0.2) == 0.3
    assert round_score(67.5) == 67.5
    assert round_score(0) == 0


# Max possible score


def test_max_possible_score_full_tables():
    assert max_possible_score(SessionType.RACE) == 235.629
    assert max_possible_score(SessionType.QUALIFYING) == 43.717


def test_max_possible_score_limited_positions():
    assert max_possible_score("RACE", 3) == 75.0
    assert max_possible_score("QUALIFYING", 0) == 0
    assert max_possible_score("QUALIFYING", 50) == 43.717


def test_exact_position_points():
    assert exact_position_points("RACE") == (
        25, 25, 25, 20, 20, 20, 15, 15, 15, 15, 12.75, 10.837, 9.212, 7.83,
    )
    assert exact_position_points("QUALIFYING") == (
        5.0, 5.0, 5.0, 4.0, 4.0, 4.0, 3.0, 3.0, 3.0, 3.0, 2.55, 2.167,
    )


def test_boolean_ids_rejected():
    """True would otherwise collide with competitor 1."""
    with pytest.raises(MalformedInputError, match="guessOrder must not contain booleans"):
        calculate_score("RACE", [1], [True])

    with pytest.raises(MalformedInputError, match="actualOrder must not contain booleans"):
        calculate_score("RACE", [False], [0])


def test_long_actual_order_logs_warning(caplog):
    actual = [f"d{i}" for i in range(16)]
    with caplog.at_level(logging.WARNING, logger="guess_scoring.models.scoring"):
        score = calculate_race_score(actual, actual)

    assert score == 195.0
    assert "only the first 14 of 16 actual positions are scored" in caplog.text
