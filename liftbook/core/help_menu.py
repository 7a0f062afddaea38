"""Help menus for the exercise, workout and program commands."""

from typing import Dict, List, Optional, Tuple

from liftbook.core.errors import InvalidInput

HELP_GUIDANCE = (
    "To see what a command can do, type 'help /exercise', 'help /workout' or 'help /program'.\n"
    "Each menu is numbered; add the number to see the exact format, e.g. 'help /program 3'."
)

# command -> [(what it does, how to type it)]
HELP_MENUS: Dict[str, List[Tuple[str, str]]] = {
    "exercise": [
        ("Add an exercise", "exercise /add EXERCISE_NAME"),
        ("Delete an exercise", "exercise /delete EXERCISE_NAME"),
        ("Rename an exercise", "exercise /edit OLD_NAME /to NEW_NAME"),
        ("List all exercises", "exercise /list"),
        ("Search exercises by name", "exercise /search TERM"),
    ],
    "workout": [
        ("Create a workout", "workout /create WORKOUT_NAME"),
        ("Delete a workout", "workout /delete WORKOUT_NAME"),
        ("Rename a workout", "workout /edit OLD_NAME /to NEW_NAME"),
        ("Add an exercise to a workout", "workout /assign EXERCISE_NAME /to WORKOUT_NAME"),
        ("Remove an exercise from a workout", "workout /unassign EXERCISE_NAME /from WORKOUT_NAME"),
        ("Show the exercises in a workout", "workout /info WORKOUT_NAME"),
        ("List all workouts", "workout /list"),
        ("Search workouts by name", "workout /search TERM"),
    ],
    "program": [
        ("Assign a workout to a day", "program /assign WORKOUT_NAME /to DAY"),
        ("Clear one day, or the whole week", "program /clear [DAY]"),
        (
            "Log the sets you did",
            "program /log EXERCISE_NAME /weight W1 W2 ... /sets N /reps R1 R2 ... [/date YYYY-MM-DD]",
        ),
        ("Show what you logged today", "program /today"),
        ("List logged dates, or one date's exercises", "program /history [YYYY-MM-DD]"),
        ("Show the weekly program", "program /list"),
    ],
}


def menu(command: str) -> str:
    entries = HELP_MENUS[command]
    lines = [f"Help menu for '{command}':"]
    lines += [f"{number}. {description}" for number, (description, _) in enumerate(entries, start=1)]
    return "\n".join(lines)


def entry_format(command: str, number: int) -> str:
    entries = HELP_MENUS[command]
    if not 1 <= number <= len(entries):
        raise InvalidInput(f"'help /{command}' has entries 1 to {len(entries)}.")
    return entries[number - 1][1]


def render(command: Optional[str], number: Optional[int] = None) -> str:
    """Guidance with no topic, the topic's menu, or one entry's format."""
    if command is None:
        return HELP_GUIDANCE
    if number is None:
        return menu(command)
    return entry_format(command, number)
