"""Weekly schedule and workout log engine."""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from liftbook.core import formatters
from liftbook.core.activities import ExerciseCatalog, WorkoutCatalog
from liftbook.core.errors import ActivityExists
from liftbook.core.lift_log import LogEntry, LogHistory
from liftbook.core.weekdays import WeekDay
from liftbook.infra import log_utils


class WeeklyProgram:
    """
    Seven day slots, each empty (a rest day) or naming one workout, plus the
    session's log of performed sets.

    Slots hold workout names only; the workout catalog owns the workouts.
    `clock` is read each time a date is needed, never cached.
    """

    def __init__(
        self,
        exercises: ExerciseCatalog,
        workouts: WorkoutCatalog,
        history: LogHistory,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._exercises = exercises
        self._workouts = workouts
        self._history = history
        self._clock = clock
        self._slots: Dict[WeekDay, Optional[str]] = {day: None for day in WeekDay}

    # --- Schedule -----------------------------------------------------------
    def assign(self, workout_name: str, day: WeekDay, force: bool = False) -> str:
        """
        Put a workout on a day.

        Raises ActivityDoesNotExist for an unknown workout and ActivityExists
        when the day is taken. `force` overwrites, for loaders only.
        """
        workout = self._workouts.retrieve(workout_name)
        current = self._slots[day]
        if current is not None and not force:
            raise ActivityExists(
                f"{day.name} already has '{current}'. Clear it first with 'program /clear {day.name.lower()}'."
            )
        self._slots[day] = workout.name
        log_utils.log_message(f"[program] Assigned '{workout.name}' to {day.name}")
        return f"Workout {workout.name} assigned to {day.name.lower()}"

    def clear(self, day: Optional[WeekDay] = None) -> str:
        if day is None:
            for each in WeekDay:
                self._slots[each] = None
            log_utils.log_message("[program] Cleared the whole week")
            return "Your weekly program has been cleared"
        self._slots[day] = None
        log_utils.log_message(f"[program] Cleared {day.name}")
        return f"{day.name} is now a rest day"

    def workout_for(self, day: WeekDay) -> Optional[str]:
        return self._slots[day]

    def list_schedule(self) -> List[Tuple[WeekDay, Optional[str]]]:
        return [(day, self._slots[day]) for day in WeekDay]

    def rename_workout(self, old_name: str, new_name: str) -> None:
        for day, name in self._slots.items():
            if name == old_name:
                self._slots[day] = new_name

    def drop_workout(self, workout_name: str) -> List[WeekDay]:
        """Reset every slot that names the workout; returns the days cleared."""
        cleared = [day for day, name in self._slots.items() if name == workout_name]
        for day in cleared:
            self._slots[day] = None
        return cleared

    def is_clean(self) -> bool:
        return all(name is None for name in self._slots.values())

    def export(self) -> Dict[str, str]:
        return {day.name: (self._slots[day] or "") for day in WeekDay}

    # --- Log ----------------------------------------------------------------
    def log(
        self,
        exercise_name: str,
        weights: Sequence[float],
        reps: Sequence[int],
        set_count: int,
        log_date: Optional[date] = None,
    ) -> str:
        """Record one exercise's sets; the date defaults to the clock's today."""
        self._exercises.retrieve(exercise_name)
        entry = LogEntry.from_sequences(
            log_date or self._clock(), exercise_name, weights, reps, set_count
        )
        self._history.append(entry)
        log_utils.log_message(
            f"[program] Logged {len(entry.sets)} set(s) of '{exercise_name}' on {entry.log_date.isoformat()}"
        )
        return formatters.log_confirmation(entry)

    def today(self) -> List[LogEntry]:
        return self._history.entries_for(self._clock())

    def entries_on(self, log_date: date) -> List[LogEntry]:
        return self._history.entries_for(log_date)

    def history(self) -> List[date]:
        return self._history.dates()

    def current_date(self) -> date:
        return self._clock()
