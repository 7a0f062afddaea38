"""
Per-action flag grammar for Liftbook commands.

Every (command, action) pair is described once in `GRAMMAR`; `validate` is the
only function that walks it. Value converters (`to_weight`, `to_count`,
`to_day`, `to_date`) are shared with the handlers so that the checks and the
conversions can never disagree.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from liftbook.core.errors import (
    ArityMismatch,
    InvalidDate,
    InvalidInput,
    InvalidValue,
    MissingAction,
    MissingFlag,
    MissingParameter,
)
from liftbook.core.parser import FLAG_SENTINEL, ParsedCommand
from liftbook.core.weekdays import WeekDay

_WEIGHT_RE = re.compile(r"^\d+(\.\d+)?$")
_COUNT_RE = re.compile(r"^\d+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Kind(Enum):
    TEXT = "text"
    WEIGHT = "weight"
    COUNT = "count"
    DAY = "day"
    DATE = "date"


class Arity(Enum):
    ONE = "one"    # exactly one token
    MANY = "many"  # one or more tokens, each checked
    TEXT = "text"  # one or more tokens, read back as a single phrase


class Presence(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    FORBIDDEN = "forbidden"


# --- Value converters -------------------------------------------------------
def to_weight(token: str) -> float:
    if not _WEIGHT_RE.match(token):
        raise InvalidValue(f"Weight '{token}' must be a non-negative number, e.g. 60 or 62.5.")
    value = float(token)
    if not math.isfinite(value):
        raise InvalidValue(f"Weight '{token}' is too large.")
    return value


def to_count(token: str) -> int:
    if not _COUNT_RE.match(token) or int(token) < 1:
        raise InvalidValue(f"'{token}' must be a whole number of at least 1.")
    return int(token)


def to_day(token: str) -> WeekDay:
    return WeekDay.resolve(token)


def to_date(token: str) -> date:
    if not _DATE_RE.match(token):
        raise InvalidDate(f"Date '{token}' must be written as YYYY-MM-DD.")
    try:
        return date.fromisoformat(token)
    except ValueError:
        raise InvalidDate(f"'{token}' is not a real calendar date.") from None


_CONVERTERS: Dict[Kind, Callable[[str], object]] = {
    Kind.TEXT: str,
    Kind.WEIGHT: to_weight,
    Kind.COUNT: to_count,
    Kind.DAY: to_day,
    Kind.DATE: to_date,
}


# --- Grammar table ----------------------------------------------------------
@dataclass(frozen=True)
class ParamRule:
    presence: Presence = Presence.FORBIDDEN
    kind: Kind = Kind.TEXT
    label: str = "name"


@dataclass(frozen=True)
class FlagRule:
    name: str
    kind: Kind = Kind.TEXT
    arity: Arity = Arity.TEXT
    required: bool = True


@dataclass(frozen=True)
class ActionGrammar:
    usage: str
    parameter: ParamRule = ParamRule()
    flags: Tuple[FlagRule, ...] = ()
    checks: Tuple[Callable[[ParsedCommand], None], ...] = ()


def _check_log_counts(cmd: ParsedCommand) -> None:
    """Weights, reps and the declared set count must all agree."""
    set_count = to_count(cmd.values("sets")[0])
    weights = len(cmd.values("weight"))
    reps = len(cmd.values("reps"))
    if weights != reps:
        raise ArityMismatch(f"Got {weights} weight(s) but {reps} rep count(s); give one of each per set.")
    if weights != set_count:
        raise ArityMismatch(f"Declared {set_count} set(s) but got {weights} weight/rep pair(s).")


def _required(label: str, kind: Kind = Kind.TEXT) -> ParamRule:
    return ParamRule(Presence.REQUIRED, kind, label)


def _optional(label: str, kind: Kind) -> ParamRule:
    return ParamRule(Presence.OPTIONAL, kind, label)


GRAMMAR: Dict[Tuple[str, str], ActionGrammar] = {
    # exercise catalog
    ("exercise", "add"): ActionGrammar("exercise /add EXERCISE_NAME", _required("exercise name")),
    ("exercise", "delete"): ActionGrammar("exercise /delete EXERCISE_NAME", _required("exercise name")),
    ("exercise", "edit"): ActionGrammar(
        "exercise /edit OLD_NAME /to NEW_NAME", _required("exercise name"), (FlagRule("to"),)
    ),
    ("exercise", "list"): ActionGrammar("exercise /list"),
    ("exercise", "search"): ActionGrammar("exercise /search TERM", _required("search term")),
    # workout catalog
    ("workout", "create"): ActionGrammar("workout /create WORKOUT_NAME", _required("workout name")),
    ("workout", "delete"): ActionGrammar("workout /delete WORKOUT_NAME", _required("workout name")),
    ("workout", "edit"): ActionGrammar(
        "workout /edit OLD_NAME /to NEW_NAME", _required("workout name"), (FlagRule("to"),)
    ),
    ("workout", "assign"): ActionGrammar(
        "workout /assign EXERCISE_NAME /to WORKOUT_NAME", _required("exercise name"), (FlagRule("to"),)
    ),
    ("workout", "unassign"): ActionGrammar(
        "workout /unassign EXERCISE_NAME /from WORKOUT_NAME", _required("exercise name"), (FlagRule("from"),)
    ),
    ("workout", "info"): ActionGrammar("workout /info WORKOUT_NAME", _required("workout name")),
    ("workout", "list"): ActionGrammar("workout /list"),
    ("workout", "search"): ActionGrammar("workout /search TERM", _required("search term")),
    # weekly program
    ("program", "assign"): ActionGrammar(
        "program /assign WORKOUT_NAME /to DAY",
        _required("workout name"),
        (FlagRule("to", Kind.DAY, Arity.ONE),),
    ),
    ("program", "clear"): ActionGrammar("program /clear [DAY]", _optional("day", Kind.DAY)),
    ("program", "log"): ActionGrammar(
        "program /log EXERCISE_NAME /weight W1 W2 ... /sets N /reps R1 R2 ... [/date YYYY-MM-DD]",
        _required("exercise name"),
        (
            FlagRule("weight", Kind.WEIGHT, Arity.MANY),
            FlagRule("sets", Kind.COUNT, Arity.ONE),
            FlagRule("reps", Kind.COUNT, Arity.MANY),
            FlagRule("date", Kind.DATE, Arity.ONE, required=False),
        ),
        (_check_log_counts,),
    ),
    ("program", "today"): ActionGrammar("program /today"),
    ("program", "history"): ActionGrammar("program /history [YYYY-MM-DD]", _optional("date", Kind.DATE)),
    ("program", "list"): ActionGrammar("program /list"),
    # help
    ("help", "exercise"): ActionGrammar("help /exercise [NUMBER]", _optional("entry number", Kind.COUNT)),
    ("help", "workout"): ActionGrammar("help /workout [NUMBER]", _optional("entry number", Kind.COUNT)),
    ("help", "program"): ActionGrammar("help /program [NUMBER]", _optional("entry number", Kind.COUNT)),
    # session
    ("exit", ""): ActionGrammar("exit"),
}

COMMANDS = tuple(dict.fromkeys(command for command, _ in GRAMMAR))


def grammar_for(cmd: ParsedCommand) -> ActionGrammar:
    """Look up the grammar entry, distinguishing unknown commands from unknown actions."""
    if not cmd.command:
        raise InvalidInput("Please enter a command. Type 'help' to see what is available.")
    if cmd.command not in COMMANDS:
        raise InvalidInput(f"Unknown command '{cmd.command}'. Try one of: {', '.join(COMMANDS)}.")
    grammar = GRAMMAR.get((cmd.command, cmd.action))
    if grammar is not None:
        return grammar
    if not cmd.action:
        if cmd.command == "help":
            raise MissingAction("No help topic given.")
        raise MissingAction(f"'{cmd.command}' needs an action, e.g. '{cmd.command} {FLAG_SENTINEL}list'.")
    actions = [action for command, action in GRAMMAR if command == cmd.command]
    raise InvalidInput(
        f"Unknown action '{FLAG_SENTINEL}{cmd.action}' for '{cmd.command}'. "
        f"Valid actions: {', '.join(FLAG_SENTINEL + a for a in actions)}."
    )


def _check_parameter(cmd: ParsedCommand, grammar: ActionGrammar) -> None:
    rule = grammar.parameter
    if rule.presence is Presence.FORBIDDEN:
        if cmd.primary_param:
            raise InvalidInput(f"'{grammar.usage}' does not take '{cmd.primary_param}'.")
        return
    if not cmd.primary_param:
        if rule.presence is Presence.REQUIRED:
            raise MissingParameter(f"Missing {rule.label}. Usage: {grammar.usage}")
        return
    if rule.kind is not Kind.TEXT:
        _CONVERTERS[rule.kind](cmd.primary_param)


def _check_flags(cmd: ParsedCommand, grammar: ActionGrammar) -> None:
    known = {rule.name: rule for rule in grammar.flags}
    for rule in grammar.flags:
        if rule.required and not cmd.values(rule.name):
            raise MissingFlag(f"Missing value for {FLAG_SENTINEL}{rule.name}. Usage: {grammar.usage}")
    for name, values in cmd.flags.items():
        rule: Optional[FlagRule] = known.get(name)
        if rule is None:
            raise InvalidInput(f"'{FLAG_SENTINEL}{name}' is not valid here. Usage: {grammar.usage}")
        if not values:
            raise MissingFlag(f"{FLAG_SENTINEL}{name} needs a value. Usage: {grammar.usage}")
        if rule.arity is Arity.ONE and len(values) != 1:
            raise ArityMismatch(f"{FLAG_SENTINEL}{name} takes exactly one value, got {len(values)}.")
    for name, values in cmd.flags.items():
        rule = known[name]
        if rule.arity is Arity.TEXT:
            continue
        for token in values:
            _CONVERTERS[rule.kind](token)


def validate(cmd: ParsedCommand) -> ParsedCommand:
    """
    Check a parsed command against its grammar entry.

    Raises the most specific InvalidInput subclass for the first rule broken,
    in this order: command/action, preamble, primary parameter, flag presence,
    flag arity, value types, then cross-field checks. Returns the command
    unchanged when it is well formed.
    """
    grammar = grammar_for(cmd)
    if cmd.preamble:
        raise InvalidInput(
            f"Unexpected '{cmd.preamble}' before the first flag. Usage: {grammar.usage}"
        )
    _check_parameter(cmd, grammar)
    _check_flags(cmd, grammar)
    for check in grammar.checks:
        check(cmd)
    return cmd
