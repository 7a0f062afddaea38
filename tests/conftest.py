from datetime import date

import pytest

from liftbook.config import settings
from liftbook.core.orchestrator import Orchestrator
from liftbook.core.session import Session


class FixedClock:
    """Stands in for date.today; tests move it by setting `today`."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    # Keep the session log and data file out of the working tree
    monkeypatch.setattr(settings, "PROJECT_ROOT", tmp_path)
    return tmp_path


@pytest.fixture
def clock():
    return FixedClock(date(2024, 4, 4))  # a Thursday


@pytest.fixture
def session(clock):
    return Session.create(clock)


@pytest.fixture
def orchestrator(session):
    orch = Orchestrator(session)
    for line in [
        "exercise /add benchpress",
        "exercise /add deadlift",
        "exercise /add barbell squat",
        "workout /create leg day",
        "workout /create full day",
    ]:
        orch.execute(line)
    return orch
