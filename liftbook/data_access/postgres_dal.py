from typing import Optional

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool
from pydantic import ValidationError

from liftbook.config import settings
from liftbook.core.errors import StorageError
from liftbook.data_access.dal import DataAccessLayer
from liftbook.data_access.snapshot import StoredSnapshot
from liftbook.infra import log_utils

SCHEMA = """
CREATE TABLE IF NOT EXISTS liftbook_snapshot (
    id SMALLINT PRIMARY KEY,
    snapshot JSONB NOT NULL,
    saved_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
"""

# A single row holds the whole session, mirroring the one-file JSON backend.
SNAPSHOT_ROW_ID = 1


class PostgresDal(DataAccessLayer):
    """
    A Data Access Layer implementation that uses a PostgreSQL database as the backend.
    This class fulfills the contract defined by the DataAccessLayer ABC.
    """

    def __init__(self, conninfo: Optional[str] = None):
        conninfo = conninfo or settings.DATABASE_URL
        if not conninfo:
            raise StorageError("No DATABASE_URL configured for the Postgres backend.")
        # The session is single-threaded, so a tiny pool is plenty.
        self.pool = ConnectionPool(
            conninfo=conninfo,
            min_size=1,
            max_size=2,
            kwargs={"row_factory": dict_row},
            open=True,
        )
        try:
            with self.pool.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(SCHEMA)
        except psycopg.Error as e:
            self.pool.close()
            log_utils.log_message(f"[PostgresDal] Schema setup failed: {e}", "ERROR")
            raise StorageError("Could not prepare the database schema") from e

    def close(self) -> None:
        self.pool.close()

    def load_snapshot(self) -> Optional[StoredSnapshot]:
        log_utils.log_message("[PostgresDal] Loading snapshot")
        try:
            with self.pool.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT snapshot FROM liftbook_snapshot WHERE id = %s;", (SNAPSHOT_ROW_ID,))
                    row = cur.fetchone()
        except psycopg.Error as e:
            log_utils.log_message(f"[PostgresDal] Load failed: {e}", "ERROR")
            raise StorageError("Could not read saved data from the database") from e
        if row is None:
            log_utils.log_message("[PostgresDal] No snapshot stored yet, starting fresh")
            return None
        try:
            return StoredSnapshot.model_validate(row["snapshot"])
        except ValidationError as e:
            log_utils.log_message(f"[PostgresDal] Invalid snapshot: {e}", "ERROR")
            raise StorageError("Saved data in the database is malformed") from e

    def save_snapshot(self, snapshot: StoredSnapshot) -> None:
        log_utils.log_message("[PostgresDal] Saving snapshot")
        try:
            with self.pool.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO liftbook_snapshot (id, snapshot, saved_at)
                        VALUES (%s, %s, now())
                        ON CONFLICT (id) DO UPDATE SET
                            snapshot = EXCLUDED.snapshot,
                            saved_at = EXCLUDED.saved_at;
                        """,
                        (SNAPSHOT_ROW_ID, Jsonb(snapshot.model_dump())),
                    )
        except psycopg.Error as e:
            log_utils.log_message(f"[PostgresDal] Save failed: {e}", "ERROR")
            raise StorageError("Could not save data to the database") from e
