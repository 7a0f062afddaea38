import pytest

from liftbook.core.parser import parse


def test_splits_command_action_parameter_and_flags():
    cmd = parse("program /log benchpress /weight 60 70 80 /sets 3 /reps 5 8 10")
    assert cmd.command == "program"
    assert cmd.action == "log"
    assert cmd.primary_param == "benchpress"
    assert list(cmd.flags) == ["weight", "sets", "reps"]
    assert cmd.values("weight") == ("60", "70", "80")
    assert cmd.values("sets") == ("3",)
    assert cmd.values("reps") == ("5", "8", "10")
    assert cmd.preamble == ""


def test_command_and_flag_names_are_lower_cased():
    cmd = parse("PROGRAM /Assign Leg Day /TO Thurs")
    assert cmd.command == "program"
    assert cmd.action == "assign"
    # names keep their case; only the keywords are folded
    assert cmd.primary_param == "Leg Day"
    assert cmd.values("to") == ("Thurs",)


def test_multi_word_parameter_is_whitespace_normalised():
    cmd = parse("  workout   /assign  barbell    squat /to  leg   day ")
    assert cmd.primary_param == "barbell squat"
    assert cmd.text("to") == "leg day"


def test_empty_line_has_no_command():
    cmd = parse("   ")
    assert cmd.command == ""
    assert cmd.action == ""
    assert dict(cmd.flags) == {}


def test_bare_command_has_no_action_parameter_or_flags():
    cmd = parse("help")
    assert cmd.command == "help"
    assert cmd.action == ""
    assert cmd.primary_param == ""
    assert dict(cmd.flags) == {}


def test_text_before_first_flag_is_kept_as_preamble():
    cmd = parse("program foo bar /list")
    assert cmd.preamble == "foo bar"
    assert cmd.action == "list"


def test_flag_without_values_is_present_but_empty():
    cmd = parse("program /log benchpress /weight /sets 5 /reps 5")
    assert cmd.has_flag("weight")
    assert cmd.values("weight") == ()


def test_repeated_flag_keeps_first_position_and_last_values():
    cmd = parse("program /log benchpress /weight 50 /sets 1 /weight 60 /reps 5")
    assert list(cmd.flags) == ["weight", "sets", "reps"]
    assert cmd.values("weight") == ("60",)


def test_glued_flags_form_one_token():
    cmd = parse("program /assign/to thurs")
    assert cmd.action == "assign/to"
    assert cmd.primary_param == "thurs"


def test_parsed_command_is_immutable():
    cmd = parse("program /list /x 1")
    with pytest.raises(TypeError):
        cmd.flags["x"] = ("2",)
    assert cmd.values("x") == ("1",)
