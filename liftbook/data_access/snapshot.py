"""Shape of the saved state: exercises, workouts and the weekly schedule."""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from liftbook.core.weekdays import WeekDay


class StoredWorkout(BaseModel):
    name: str
    exercises: List[str] = Field(default_factory=list)


class StoredSnapshot(BaseModel):
    """
    Everything that survives between sessions.

    The workout log is deliberately absent: it only lives for one session.
    """

    exercises: List[str] = Field(default_factory=list)
    workouts: List[StoredWorkout] = Field(default_factory=list)
    weekly_program: Dict[str, str] = Field(
        default_factory=lambda: {day.name: "" for day in WeekDay}
    )

    @field_validator("weekly_program")
    @classmethod
    def _seven_days(cls, value: Dict[str, str]) -> Dict[str, str]:
        expected = {day.name for day in WeekDay}
        if set(value) != expected:
            missing = sorted(expected - set(value))
            extra = sorted(set(value) - expected)
            raise ValueError(f"weekly_program must name each day once (missing={missing}, unexpected={extra})")
        return value
