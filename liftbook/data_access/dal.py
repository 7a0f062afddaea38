from abc import ABC, abstractmethod
from typing import Optional

from liftbook.data_access.snapshot import StoredSnapshot


class DataAccessLayer(ABC):
    """
    Abstract Base Class for a Data Access Layer.
    Defines the contract for saving and restoring a session, ensuring that
    the command engine can work with any storage backend (JSON, DB, etc.)
    through a consistent interface.
    """

    @abstractmethod
    def load_snapshot(self) -> Optional[StoredSnapshot]:
        """
        Loads the saved exercises, workouts and weekly program.

        Returns:
            The validated snapshot, or None when nothing has been saved yet.

        Raises:
            StorageError: the stored data is unreadable or malformed.
        """
        pass

    @abstractmethod
    def save_snapshot(self, snapshot: StoredSnapshot) -> None:
        """Replaces whatever was saved before with the given snapshot."""
        pass

    def close(self) -> None:
        """Releases any connections held by the backend."""
        pass
