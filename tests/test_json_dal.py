import json

import pytest

from liftbook.config import settings
from liftbook.core.errors import StorageError
from liftbook.core.session import Session
from liftbook.core.weekdays import WeekDay
from liftbook.data_access.json_dal import JsonDal


def test_json_dal_roundtrip(tmp_path, monkeypatch, orchestrator):
    # Redirect settings paths to the temp directory
    monkeypatch.setattr(settings, "PROJECT_ROOT", tmp_path)
    dal = JsonDal()

    orchestrator.execute("workout /assign barbell squat /to leg day")
    orchestrator.execute("program /assign leg day /to thurs")
    orchestrator.execute("program /log benchpress /weight 50 /sets 1 /reps 5")
    dal.save_snapshot(orchestrator.session.to_snapshot())

    raw = json.loads((tmp_path / "data/liftbook.json").read_text(encoding="utf-8"))
    assert raw["exercises"] == ["benchpress", "deadlift", "barbell squat"]
    assert raw["workouts"] == [
        {"name": "leg day", "exercises": ["barbell squat"]},
        {"name": "full day", "exercises": []},
    ]
    assert raw["weekly_program"]["THURSDAY"] == "leg day"
    assert set(raw["weekly_program"]) == {day.name for day in WeekDay}
    # the workout log is session-only
    assert "log" not in json.dumps(raw)

    restored = Session.from_snapshot(dal.load_snapshot())
    assert restored.exercises.names() == ["benchpress", "deadlift", "barbell squat"]
    assert restored.workouts.retrieve("leg day").exercises == ["barbell squat"]
    assert restored.program.workout_for(WeekDay.THURSDAY) == "leg day"
    assert restored.program.history() == []


def test_missing_file_means_fresh_start(tmp_path):
    assert JsonDal(tmp_path / "nothing.json").load_snapshot() is None


def test_corrupt_file_raises_storage_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonDal(path).load_snapshot()


def test_schedule_must_have_seven_days(tmp_path):
    path = tmp_path / "six_days.json"
    days = {day.name: "" for day in WeekDay if day is not WeekDay.SUNDAY}
    path.write_text(json.dumps({"exercises": [], "workouts": [], "weekly_program": days}), encoding="utf-8")
    with pytest.raises(StorageError):
        JsonDal(path).load_snapshot()
