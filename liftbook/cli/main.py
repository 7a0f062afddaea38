"""
Interactive command-line entry point for Liftbook.

Loads the saved exercises, workouts and weekly program, then reads one
command per line until `exit` (or end of input) and saves on the way out.
Workout logs are kept for the session only.
"""
import argparse
from pathlib import Path
from typing import Callable, Iterable, Optional

from liftbook.config import settings
from liftbook.core.errors import LiftbookError, StorageError
from liftbook.core.orchestrator import Orchestrator
from liftbook.core.session import Session
from liftbook.data_access.dal import DataAccessLayer
from liftbook.data_access.json_dal import JsonDal
from liftbook.infra import log_utils

DIVIDER = "-" * 49


def print_message(message: str, out: Callable[[str], None] = print) -> None:
    out(f"{settings.PROMPT_PREFIX}{message}")
    out(DIVIDER)


def build_dal(backend: str, data_file: Optional[Path] = None) -> DataAccessLayer:
    """Pick the storage backend, falling back to JSON if Postgres is unavailable."""
    if backend == "postgres" and settings.DATABASE_URL:
        try:
            from liftbook.data_access.postgres_dal import PostgresDal

            return PostgresDal()
        except Exception as e:
            log_utils.log_message(
                f"Postgres DAL init failed: {e}. Falling back to JSON.", "WARN"
            )
    elif backend == "postgres":
        log_utils.log_message("STORAGE_BACKEND is postgres but no DATABASE_URL is set; using JSON.", "WARN")
    return JsonDal(data_file)


def load_session(dal: DataAccessLayer, out: Callable[[str], None] = print) -> Session:
    """Restore the saved session, or start an empty one if loading fails."""
    try:
        snapshot = dal.load_snapshot()
        if snapshot is None:
            print_message("Looks like you're starting fresh!", out)
            return Session.create()
        session = Session.from_snapshot(snapshot)
    except StorageError as e:
        log_utils.log_message(f"Load aborted: {e}", "ERROR")
        print_message(f"{e}. Starting with an empty session.", out)
        return Session.create()
    print_message("Data loaded successfully!", out)
    return session


def save_session(session: Session, dal: DataAccessLayer, out: Callable[[str], None] = print) -> bool:
    try:
        dal.save_snapshot(session.to_snapshot())
    except StorageError as e:
        log_utils.log_message(f"Save aborted: {e}", "ERROR")
        print_message(f"{e}.", out)
        return False
    print_message("All your workouts and exercises have been saved.", out)
    return True


def run_session(
    orchestrator: Orchestrator,
    lines: Iterable[str],
    out: Callable[[str], None] = print,
) -> None:
    """Execute lines until the orchestrator finishes or the input runs out."""
    for line in lines:
        if not line.strip():
            continue
        try:
            reply = orchestrator.execute(line)
        except LiftbookError as e:
            print_message(str(e), out)
            continue
        print_message(reply, out)
        if orchestrator.finished:
            break


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input()
        except (EOFError, KeyboardInterrupt):
            return


def main(argv: Optional[list] = None) -> None:
    """Parses CLI arguments and starts an interactive session."""
    parser = argparse.ArgumentParser(description="Track exercises, workouts and your weekly program.")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help=f"JSON file to load from and save to (default: {settings.DATA_FILE}).",
    )
    parser.add_argument(
        "--backend",
        choices=["json", "postgres"],
        default=settings.STORAGE_BACKEND,
        help="Where to keep exercises, workouts and the weekly program.",
    )
    args = parser.parse_args(argv)

    log_utils.log_message(f"Liftbook CLI started with '{args.backend}' storage.", "INFO")

    dal = build_dal(args.backend, args.data_file)
    session = load_session(dal)
    orchestrator = Orchestrator(session)

    print_message("Welcome to Liftbook! Type 'help' to get started.")
    run_session(orchestrator, _stdin_lines())
    try:
        save_session(session, dal)
    finally:
        dal.close()


if __name__ == "__main__":
    main()
