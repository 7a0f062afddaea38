import pytest

from liftbook.core.activities import Exercise
from liftbook.core.errors import StorageError
from liftbook.core.session import Session
from liftbook.core.weekdays import WeekDay
from liftbook.data_access.snapshot import StoredSnapshot, StoredWorkout


def week(**assigned):
    return {day.name: assigned.get(day.name, "") for day in WeekDay}


def test_restore_rebuilds_catalogs_and_schedule():
    snapshot = StoredSnapshot(
        exercises=["benchpress", "deadlift"],
        workouts=[StoredWorkout(name="full day", exercises=["benchpress", "deadlift"])],
        weekly_program=week(MONDAY="full day", FRIDAY="full day"),
    )
    session = Session.from_snapshot(snapshot)
    assert session.workouts.retrieve("full day").exercises == ["benchpress", "deadlift"]
    assert [name for _, name in session.program.list_schedule()] == [
        "full day", None, None, None, "full day", None, None,
    ]
    assert session.to_snapshot() == snapshot


def test_restore_requires_a_clean_session(session):
    session.exercises.add(Exercise("benchpress"))
    with pytest.raises(StorageError):
        session.restore(StoredSnapshot())


@pytest.mark.parametrize(
    "snapshot",
    [
        StoredSnapshot(exercises=["benchpress", "benchpress"]),
        StoredSnapshot(workouts=[StoredWorkout(name="leg day", exercises=["squat"])]),
        StoredSnapshot(weekly_program=week(TUESDAY="ghost day")),
    ],
)
def test_inconsistent_snapshots_raise_storage_error(snapshot):
    with pytest.raises(StorageError):
        Session.from_snapshot(snapshot)


def test_new_session_is_clean(session):
    assert session.is_clean()
    assert session.to_snapshot() == StoredSnapshot()
