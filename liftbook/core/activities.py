"""Name-keyed catalogs of exercises and workouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar

from liftbook.core.errors import ActivityDoesNotExist, ActivityExists, ErrorAddingActivity
from liftbook.core.parser import FLAG_SENTINEL


@dataclass
class Exercise:
    name: str


@dataclass
class Workout:
    name: str
    exercises: List[str] = field(default_factory=list)


T = TypeVar("T", Exercise, Workout)


class ActivityCatalog(Generic[T]):
    """
    Insertion-ordered store of activities keyed by their exact name.

    Lookups are case-sensitive; only `search` ignores case.
    """

    kind = "activity"

    def __init__(self) -> None:
        self._items: Dict[str, T] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)

    def _check_new_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ErrorAddingActivity(f"A {self.kind} needs a name.")
        if FLAG_SENTINEL in name:
            raise ErrorAddingActivity(f"{self.kind.capitalize()} names cannot contain '{FLAG_SENTINEL}'.")
        if name in self._items:
            raise ErrorAddingActivity(f"A {self.kind} named '{name}' already exists.")

    def add(self, item: T) -> T:
        self._check_new_name(item.name)
        self._items[item.name] = item
        return item

    def retrieve(self, name: str) -> T:
        try:
            return self._items[name]
        except KeyError:
            raise ActivityDoesNotExist(f"The {self.kind} '{name}' does not exist.") from None

    def delete(self, name: str) -> T:
        item = self.retrieve(name)
        del self._items[name]
        return item

    def rename(self, old_name: str, new_name: str) -> T:
        item = self.retrieve(old_name)
        self._check_new_name(new_name)
        # Rebuild to keep the renamed item in its original position.
        self._items = {
            (new_name if key == old_name else key): value for key, value in self._items.items()
        }
        item.name = new_name
        return item

    def names(self) -> List[str]:
        return list(self._items)

    def search(self, term: str) -> List[str]:
        needle = term.lower()
        return [name for name in self._items if needle in name.lower()]


class ExerciseCatalog(ActivityCatalog[Exercise]):
    kind = "exercise"


class WorkoutCatalog(ActivityCatalog[Workout]):
    kind = "workout"

    def __init__(self, exercises: ExerciseCatalog) -> None:
        super().__init__()
        self._exercises = exercises

    def assign_exercise(self, exercise_name: str, workout_name: str) -> Workout:
        self._exercises.retrieve(exercise_name)
        workout = self.retrieve(workout_name)
        if exercise_name in workout.exercises:
            raise ActivityExists(f"'{exercise_name}' is already part of '{workout_name}'.")
        workout.exercises.append(exercise_name)
        return workout

    def unassign_exercise(self, exercise_name: str, workout_name: str) -> Workout:
        workout = self.retrieve(workout_name)
        if exercise_name not in workout.exercises:
            raise ActivityDoesNotExist(f"'{exercise_name}' is not part of '{workout_name}'.")
        workout.exercises.remove(exercise_name)
        return workout

    def drop_exercise(self, exercise_name: str) -> List[str]:
        """Remove an exercise from every workout; returns the workouts touched."""
        touched = []
        for workout in self._items.values():
            if exercise_name in workout.exercises:
                workout.exercises.remove(exercise_name)
                touched.append(workout.name)
        return touched

    def rename_exercise(self, old_name: str, new_name: str) -> None:
        for workout in self._items.values():
            workout.exercises = [new_name if name == old_name else name for name in workout.exercises]
