"""Logged sets, grouped by the date they were performed.

The log lives only as long as the session; it is never written to storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence, Tuple

from liftbook.core.errors import ArityMismatch


@dataclass(frozen=True)
class SetRecord:
    weight: float
    reps: int


@dataclass(frozen=True)
class LogEntry:
    log_date: date
    exercise_name: str
    sets: Tuple[SetRecord, ...]

    def __post_init__(self):
        if not self.sets:
            raise ArityMismatch("A log entry needs at least one set.")

    @classmethod
    def from_sequences(
        cls,
        log_date: date,
        exercise_name: str,
        weights: Sequence[float],
        reps: Sequence[int],
        set_count: int,
    ) -> "LogEntry":
        """Pair weights and reps positionally, one pair per declared set."""
        if len(weights) != len(reps):
            raise ArityMismatch(
                f"Got {len(weights)} weight(s) but {len(reps)} rep count(s); give one of each per set."
            )
        if set_count < 1 or len(weights) != set_count:
            raise ArityMismatch(f"Declared {set_count} set(s) but got {len(weights)} weight/rep pair(s).")
        return cls(
            log_date=log_date,
            exercise_name=exercise_name,
            sets=tuple(SetRecord(float(w), int(r)) for w, r in zip(weights, reps)),
        )


class LogHistory:
    """Append-only log; dates keep the order in which they were first logged."""

    def __init__(self) -> None:
        self._by_date: Dict[date, List[LogEntry]] = {}

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._by_date.values())

    def append(self, entry: LogEntry) -> None:
        self._by_date.setdefault(entry.log_date, []).append(entry)

    def entries_for(self, log_date: date) -> List[LogEntry]:
        return list(self._by_date.get(log_date, []))

    def dates(self) -> List[date]:
        return list(self._by_date)
