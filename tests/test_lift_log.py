from datetime import date

import pytest

from liftbook.core.errors import ArityMismatch
from liftbook.core.lift_log import LogEntry, LogHistory, SetRecord


def test_from_sequences_pairs_weights_and_reps_positionally():
    entry = LogEntry.from_sequences(date(2024, 4, 4), "benchpress", [60, 70, 80], [5, 8, 10], 3)
    assert entry.sets == (SetRecord(60.0, 5), SetRecord(70.0, 8), SetRecord(80.0, 10))


@pytest.mark.parametrize(
    "weights, reps, set_count",
    [
        ([60, 70], [5], 2),
        ([60], [5, 8], 1),
        ([60, 70], [5, 8], 3),
        ([], [], 0),
    ],
)
def test_from_sequences_rejects_mismatches(weights, reps, set_count):
    with pytest.raises(ArityMismatch):
        LogEntry.from_sequences(date(2024, 4, 4), "benchpress", weights, reps, set_count)


def test_entry_needs_a_set():
    with pytest.raises(ArityMismatch):
        LogEntry(date(2024, 4, 4), "benchpress", ())


def test_history_keeps_first_insertion_order_of_dates():
    history = LogHistory()
    later, earlier = date(2024, 4, 4), date(2024, 3, 25)
    history.append(LogEntry.from_sequences(later, "benchpress", [50], [5], 1))
    history.append(LogEntry.from_sequences(earlier, "deadlift", [100], [3], 1))
    history.append(LogEntry.from_sequences(later, "deadlift", [110], [3], 1))

    assert history.dates() == [later, earlier]
    assert [e.exercise_name for e in history.entries_for(later)] == ["benchpress", "deadlift"]
    assert history.entries_for(date(2000, 1, 1)) == []
    assert len(history) == 3


def test_entries_for_returns_a_copy():
    history = LogHistory()
    day = date(2024, 4, 4)
    history.append(LogEntry.from_sequences(day, "benchpress", [50], [5], 1))
    history.entries_for(day).clear()
    assert len(history.entries_for(day)) == 1
