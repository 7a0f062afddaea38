"""Per-session state passed to every command handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from liftbook.core.activities import Exercise, ExerciseCatalog, Workout, WorkoutCatalog
from liftbook.core.errors import LiftbookError, StorageError
from liftbook.core.lift_log import LogHistory
from liftbook.core.program import WeeklyProgram
from liftbook.core.weekdays import WeekDay
from liftbook.data_access.snapshot import StoredSnapshot, StoredWorkout


@dataclass
class Session:
    exercises: ExerciseCatalog
    workouts: WorkoutCatalog
    history: LogHistory
    program: WeeklyProgram
    clock: Callable[[], date] = field(default=date.today)

    @classmethod
    def create(cls, clock: Callable[[], date] = date.today) -> "Session":
        exercises = ExerciseCatalog()
        workouts = WorkoutCatalog(exercises)
        history = LogHistory()
        program = WeeklyProgram(exercises, workouts, history, clock)
        return cls(exercises, workouts, history, program, clock)

    def is_clean(self) -> bool:
        return not self.exercises and not self.workouts and self.program.is_clean()

    def to_snapshot(self) -> StoredSnapshot:
        return StoredSnapshot(
            exercises=self.exercises.names(),
            workouts=[
                StoredWorkout(name=name, exercises=list(self.workouts.retrieve(name).exercises))
                for name in self.workouts.names()
            ],
            weekly_program=self.program.export(),
        )

    def restore(self, snapshot: StoredSnapshot) -> None:
        """
        Populate a clean session from a snapshot.

        Exercises first, then workouts (which reference them), then the
        schedule (which references workouts). Any inconsistency in the
        snapshot surfaces as StorageError.
        """
        if not self.is_clean():
            raise StorageError("Can only load saved data into an empty session.")
        try:
            for name in snapshot.exercises:
                self.exercises.add(Exercise(name))
            for stored in snapshot.workouts:
                self.workouts.add(Workout(stored.name))
                for exercise_name in stored.exercises:
                    self.workouts.assign_exercise(exercise_name, stored.name)
            for day_name, workout_name in snapshot.weekly_program.items():
                if workout_name.strip():
                    self.program.assign(workout_name, WeekDay[day_name], force=True)
        except LiftbookError as e:
            raise StorageError(f"Saved data is inconsistent: {e}") from e

    @classmethod
    def from_snapshot(
        cls, snapshot: StoredSnapshot, clock: Callable[[], date] = date.today
    ) -> "Session":
        """Build a fresh session; nothing is returned unless every step succeeds."""
        session = cls.create(clock)
        session.restore(snapshot)
        return session
