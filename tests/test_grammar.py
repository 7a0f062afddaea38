from datetime import date

import pytest

from liftbook.core.errors import (
    ArityMismatch,
    InvalidDate,
    InvalidInput,
    InvalidValue,
    MissingAction,
    MissingFlag,
    MissingParameter,
    UnknownDay,
)
from liftbook.core.grammar import to_date, to_weight, validate
from liftbook.core.parser import parse


def check(line: str):
    return validate(parse(line))


@pytest.mark.parametrize(
    "line",
    [
        "program /assign leg day /to thurs",
        "program /assign leg day /to THURSDAY",
        "program /clear",
        "program /clear sun",
        "program /log benchpress /weight 60 70 80 /sets 3 /reps 5 8 10",
        "program /log benchpress /weight 62.5 /sets 1 /reps 5 /date 2024-03-25",
        "program /today",
        "program /history",
        "program /history 2024-03-25",
        "program /list",
        "exercise /edit bench /to benchpress",
        "workout /assign barbell squat /to leg day",
        "workout /unassign deadlift /from full day",
        "help /program 3",
        "exit",
    ],
)
def test_well_formed_commands_pass(line):
    cmd = parse(line)
    assert validate(cmd) is cmd


def test_empty_and_unknown_commands_are_invalid():
    with pytest.raises(InvalidInput):
        check("")
    with pytest.raises(InvalidInput):
        check("lift /log benchpress")
    with pytest.raises(InvalidInput):
        check("program /dance")


def test_missing_action_is_its_own_kind():
    with pytest.raises(MissingAction):
        check("help")
    with pytest.raises(MissingAction):
        check("program")


def test_preamble_is_rejected():
    with pytest.raises(InvalidInput):
        check("program stray /list")


def test_empty_required_parameter():
    with pytest.raises(MissingParameter):
        check("program /assign")
    with pytest.raises(MissingParameter):
        check("program /log /weight 500 /sets 5 /reps 5")


def test_forbidden_parameter():
    with pytest.raises(InvalidInput):
        check("program /list everything")


@pytest.mark.parametrize(
    "line",
    [
        "program /log benchpress /weight 500 /sets 5",
        "program /log benchpress /weight 500 /reps 5",
        "program /log benchpress /sets 5 /reps 5",
        "program /log benchpress /weight /sets 5 /reps 5",
        "program /log benchpress /weight 2 /sets /reps 5",
        "program /log benchpress /weight 2 /sets 5 /reps ",
        "program /log benchpress /weight /sets /reps ",
        "program /assign/to thurs",
        "program /assign leg day",
    ],
)
def test_missing_flags(line):
    with pytest.raises(InvalidInput):
        check(line)


def test_missing_flag_kind():
    with pytest.raises(MissingFlag):
        check("program /log benchpress /weight 500 /sets 5")


def test_unknown_flag_is_invalid():
    with pytest.raises(InvalidInput):
        check("program /log benchpress /weight 5 /sets 1 /reps 5 /tempo slow")


@pytest.mark.parametrize(
    "line",
    [
        "program /log benchpress /weight 60 70 /sets 2 /reps 5",
        "program /log benchpress /weight 60 70 /sets 3 /reps 5 5",
        "program /log benchpress /weight 60 /sets 1 2 /reps 5",
        "program /assign leg day /to wrong day",
    ],
)
def test_arity_mismatch(line):
    with pytest.raises(ArityMismatch):
        check(line)


@pytest.mark.parametrize(
    "line",
    [
        "program /log benchpress /weight abc /sets 3 /reps 4",
        "program /log benchpress /weight 5 /sets test /reps 4",
        "program /log benchpress /weight 5 /sets 1 /reps abc",
        "program /log benchpress /weight -5 /sets 1 /reps 4",
        "program /log benchpress /weight 5 /sets 0 /reps",
        "program /log benchpress /weight " + "9" * 400 + " /sets 1 /reps 4",
        "help /program three",
    ],
)
def test_invalid_values(line):
    with pytest.raises(InvalidInput):
        check(line)


def test_invalid_value_kind():
    with pytest.raises(InvalidValue):
        check("program /log benchpress /weight abc /sets 1 /reps 4")


def test_weight_overflowing_to_infinity_is_rejected():
    with pytest.raises(InvalidValue):
        to_weight("9" * 400)


def test_unknown_day():
    with pytest.raises(UnknownDay):
        check("program /clear noday")
    with pytest.raises(UnknownDay):
        check("program /assign leg day /to 2024-03-11")


@pytest.mark.parametrize("token", ["2024-2323-23", "2024-02-30", "25-03-2024", "20240325", "yesterday"])
def test_bad_dates(token):
    with pytest.raises(InvalidDate):
        check(f"program /log benchpress /weight 500 /sets 1 /reps 5 /date {token}")


def test_future_date_is_allowed():
    cmd = check("program /log benchpress /weight 50 /sets 1 /reps 5 /date 2999-01-01")
    assert to_date(cmd.values("date")[0]) == date(2999, 1, 1)


def test_repeated_flag_last_wins_during_validation():
    # the first /weight has two values and would not match /sets 1
    check("program /log benchpress /weight 50 60 /sets 1 /reps 5 /weight 70")


def test_weight_conversion():
    assert to_weight("62.5") == 62.5
    assert to_weight("60") == 60.0
