"""Days of the week and the aliases accepted for them on the command line."""

from datetime import date
from enum import Enum

from liftbook.core.errors import UnknownDay


class WeekDay(Enum):
    MONDAY = ("mon",)
    TUESDAY = ("tue", "tues")
    WEDNESDAY = ("wed", "weds")
    THURSDAY = ("thu", "thur", "thurs")
    FRIDAY = ("fri",)
    SATURDAY = ("sat",)
    SUNDAY = ("sun",)

    @property
    def aliases(self) -> tuple:
        return self.value

    @classmethod
    def resolve(cls, token: str) -> "WeekDay":
        """
        Map a user token to its day, ignoring case.

        Accepts the full day name or one of its aliases ("THURS", "thursday").
        Raises UnknownDay for anything else, including ISO dates.
        """
        key = token.strip().lower()
        for day in cls:
            if key == day.name.lower() or key in day.aliases:
                return day
        raise UnknownDay(f"'{token}' is not a day of the week. Try e.g. monday, tues or thurs.")

    @classmethod
    def for_date(cls, when: date) -> "WeekDay":
        return list(cls)[when.weekday()]
