"""Error kinds raised by the command engine and the activity catalogs."""


class LiftbookError(Exception):
    """Base class for every error reported back to the user."""


class InvalidInput(LiftbookError):
    """Malformed command."""


class MissingAction(InvalidInput):
    """A command that needs a sub-action flag was given none."""


class MissingParameter(InvalidInput):
    """The text after the action flag is required but empty."""


class MissingFlag(InvalidInput):
    """A required flag is absent or carries no values."""


class ArityMismatch(InvalidInput):
    """Flag value counts disagree with each other or with the flag's rule."""


class InvalidValue(InvalidInput):
    """A flag value has the wrong type (e.g. a non-numeric weight)."""


class UnknownDay(InvalidInput):
    """A token does not name a day of the week."""


class InvalidDate(InvalidInput):
    """A token is not a real YYYY-MM-DD calendar date."""


class ActivityDoesNotExist(LiftbookError):
    """The named exercise or workout is not in the catalog."""


class ActivityExists(LiftbookError):
    """The target already holds the activity (occupied day, duplicate member)."""


class ErrorAddingActivity(LiftbookError):
    """The catalog refused to store an activity, e.g. a duplicate name."""


class StorageError(LiftbookError):
    """The saved snapshot could not be read, validated or written."""
