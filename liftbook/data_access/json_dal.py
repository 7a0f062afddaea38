"""JSON file-based implementation of the Data Access Layer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from liftbook.config import settings
from liftbook.core.errors import StorageError
from liftbook.infra import log_utils
from .dal import DataAccessLayer
from .snapshot import StoredSnapshot


class JsonDal(DataAccessLayer):
    """Data Access Layer that persists the session snapshot to one JSON file."""

    def __init__(self, path: Optional[Path] = None):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or settings.data_path

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _write_json(self, path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def load_snapshot(self) -> Optional[StoredSnapshot]:
        try:
            raw = self._read_json(self.path)
        except (json.JSONDecodeError, OSError) as e:
            log_utils.log_message(f"[JsonDal] Could not read {self.path}: {e}", "ERROR")
            raise StorageError(f"Could not read saved data from {self.path}") from e
        if raw is None:
            log_utils.log_message(f"[JsonDal] No data file at {self.path}, starting fresh")
            return None
        try:
            return StoredSnapshot.model_validate(raw)
        except ValidationError as e:
            log_utils.log_message(f"[JsonDal] Invalid data in {self.path}: {e}", "ERROR")
            raise StorageError(f"Saved data in {self.path} is malformed") from e

    def save_snapshot(self, snapshot: StoredSnapshot) -> None:
        try:
            self._write_json(self.path, snapshot.model_dump())
        except OSError as e:
            log_utils.log_message(f"[JsonDal] Could not write {self.path}: {e}", "ERROR")
            raise StorageError(f"Could not save data to {self.path}") from e
        log_utils.log_message(f"[JsonDal] Saved snapshot to {self.path}")
