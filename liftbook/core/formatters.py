"""
Text rendering for engine results.

Handlers return these strings; only the CLI prints them.
"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

from liftbook.core.activities import Workout
from liftbook.core.lift_log import LogEntry
from liftbook.core.weekdays import WeekDay

REST_DAY = "Rest day"


def format_weight(weight: float) -> str:
    """60.0 -> '60kg', 62.5 -> '62.5kg'."""
    return f"{weight:g}kg"


def log_confirmation(entry: LogEntry) -> str:
    weights = ",".join(format_weight(s.weight) for s in entry.sets)
    reps = ",".join(str(s.reps) for s in entry.sets)
    return (
        f"Successfully logged {entry.exercise_name} with weights of {weights} and {reps} reps "
        f"across {len(entry.sets)} sets on {entry.log_date.isoformat()}"
    )


def format_entries(log_date: date, entries: Sequence[LogEntry]) -> str:
    if not entries:
        return f"You have not logged any exercises on {log_date.isoformat()}."
    lines = [f"Listing Exercises on {log_date.isoformat()}:"]
    for number, entry in enumerate(entries, start=1):
        lines.append(f"{number}. {entry.exercise_name}")
        for set_number, record in enumerate(entry.sets, start=1):
            lines.append(f"   Set {set_number}: {format_weight(record.weight)}, {record.reps} reps")
    return "\n".join(lines)


def format_history(dates: Sequence[date]) -> str:
    if not dates:
        return "You have not logged any workouts yet."
    lines = ["Listing Workout Logs:"]
    lines += [f"{number}. {day.isoformat()}" for number, day in enumerate(dates, start=1)]
    return "\n".join(lines)


def format_schedule(slots: Sequence[Tuple[WeekDay, Optional[str]]]) -> str:
    lines = ["Your workouts for the week:"]
    lines += [f"\t{day.name}: {workout or REST_DAY}" for day, workout in slots]
    return "\n".join(lines)


def format_name_list(title: str, names: List[str], empty: str) -> str:
    if not names:
        return empty
    lines = [title]
    lines += [f"{number}. {name}" for number, name in enumerate(names, start=1)]
    return "\n".join(lines)


def format_workout(workout: Workout) -> str:
    return format_name_list(
        f"Exercises in {workout.name}:",
        workout.exercises,
        f"{workout.name} has no exercises yet.",
    )
