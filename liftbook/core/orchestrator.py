"""
Command dispatch for an interactive Liftbook session.

The orchestrator owns no state of its own beyond the `finished` flag: it
parses a line, validates it against the grammar table and hands it to the
handler registered for its (command, action) pair. Handlers convert flag
values with the grammar's converters and return printable text.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from liftbook.core import formatters, help_menu
from liftbook.core.activities import Exercise, Workout
from liftbook.core.errors import LiftbookError, MissingAction
from liftbook.core.grammar import to_count, to_date, to_day, to_weight, validate
from liftbook.core.parser import ParsedCommand, parse
from liftbook.core.session import Session
from liftbook.infra import log_utils

Handler = Callable[[ParsedCommand], str]


class Orchestrator:
    def __init__(self, session: Session):
        self.session = session
        self.finished = False
        self._handlers: Dict[Tuple[str, str], Handler] = {
            ("exercise", "add"): self._exercise_add,
            ("exercise", "delete"): self._exercise_delete,
            ("exercise", "edit"): self._exercise_edit,
            ("exercise", "list"): self._exercise_list,
            ("exercise", "search"): self._exercise_search,
            ("workout", "create"): self._workout_create,
            ("workout", "delete"): self._workout_delete,
            ("workout", "edit"): self._workout_edit,
            ("workout", "assign"): self._workout_assign,
            ("workout", "unassign"): self._workout_unassign,
            ("workout", "info"): self._workout_info,
            ("workout", "list"): self._workout_list,
            ("workout", "search"): self._workout_search,
            ("program", "assign"): self._program_assign,
            ("program", "clear"): self._program_clear,
            ("program", "log"): self._program_log,
            ("program", "today"): self._program_today,
            ("program", "history"): self._program_history,
            ("program", "list"): self._program_list,
            ("help", "exercise"): self._help,
            ("help", "workout"): self._help,
            ("help", "program"): self._help,
            ("exit", ""): self._exit,
        }

    def execute(self, line: str) -> str:
        """Run one command line and return the reply; errors propagate to the caller."""
        cmd = parse(line)
        try:
            validate(cmd)
        except LiftbookError as e:
            if isinstance(e, MissingAction) and cmd.command == "help" and not cmd.preamble:
                return help_menu.render(None)
            log_utils.log_message(f"[orchestrator] Rejected '{line.strip()}': {e}", "WARN")
            raise
        return self._handlers[(cmd.command, cmd.action)](cmd)

    # --- exercise -----------------------------------------------------------
    def _exercise_add(self, cmd: ParsedCommand) -> str:
        exercise = self.session.exercises.add(Exercise(cmd.primary_param))
        return f"Added exercise: {exercise.name}"

    def _exercise_delete(self, cmd: ParsedCommand) -> str:
        exercise = self.session.exercises.delete(cmd.primary_param)
        touched = self.session.workouts.drop_exercise(exercise.name)
        reply = f"Deleted exercise: {exercise.name}"
        if touched:
            reply += f" (also removed from: {', '.join(touched)})"
        return reply

    def _exercise_edit(self, cmd: ParsedCommand) -> str:
        new_name = cmd.text("to")
        self.session.exercises.rename(cmd.primary_param, new_name)
        self.session.workouts.rename_exercise(cmd.primary_param, new_name)
        return f"Renamed exercise {cmd.primary_param} to {new_name}"

    def _exercise_list(self, cmd: ParsedCommand) -> str:
        return formatters.format_name_list(
            "Listing exercises:", self.session.exercises.names(), "You have no exercises yet."
        )

    def _exercise_search(self, cmd: ParsedCommand) -> str:
        return formatters.format_name_list(
            f"Exercises matching '{cmd.primary_param}':",
            self.session.exercises.search(cmd.primary_param),
            f"No exercises match '{cmd.primary_param}'.",
        )

    # --- workout ------------------------------------------------------------
    def _workout_create(self, cmd: ParsedCommand) -> str:
        workout = self.session.workouts.add(Workout(cmd.primary_param))
        return f"Created workout: {workout.name}"

    def _workout_delete(self, cmd: ParsedCommand) -> str:
        workout = self.session.workouts.delete(cmd.primary_param)
        cleared = self.session.program.drop_workout(workout.name)
        reply = f"Deleted workout: {workout.name}"
        if cleared:
            reply += f" (cleared from: {', '.join(day.name for day in cleared)})"
        return reply

    def _workout_edit(self, cmd: ParsedCommand) -> str:
        new_name = cmd.text("to")
        self.session.workouts.rename(cmd.primary_param, new_name)
        self.session.program.rename_workout(cmd.primary_param, new_name)
        return f"Renamed workout {cmd.primary_param} to {new_name}"

    def _workout_assign(self, cmd: ParsedCommand) -> str:
        workout = self.session.workouts.assign_exercise(cmd.primary_param, cmd.text("to"))
        return f"Added {cmd.primary_param} to workout {workout.name}"

    def _workout_unassign(self, cmd: ParsedCommand) -> str:
        workout = self.session.workouts.unassign_exercise(cmd.primary_param, cmd.text("from"))
        return f"Removed {cmd.primary_param} from workout {workout.name}"

    def _workout_info(self, cmd: ParsedCommand) -> str:
        return formatters.format_workout(self.session.workouts.retrieve(cmd.primary_param))

    def _workout_list(self, cmd: ParsedCommand) -> str:
        return formatters.format_name_list(
            "Listing workouts:", self.session.workouts.names(), "You have no workouts yet."
        )

    def _workout_search(self, cmd: ParsedCommand) -> str:
        return formatters.format_name_list(
            f"Workouts matching '{cmd.primary_param}':",
            self.session.workouts.search(cmd.primary_param),
            f"No workouts match '{cmd.primary_param}'.",
        )

    # --- program ------------------------------------------------------------
    def _program_assign(self, cmd: ParsedCommand) -> str:
        return self.session.program.assign(cmd.primary_param, to_day(cmd.values("to")[0]))

    def _program_clear(self, cmd: ParsedCommand) -> str:
        day = to_day(cmd.primary_param) if cmd.primary_param else None
        return self.session.program.clear(day)

    def _program_log(self, cmd: ParsedCommand) -> str:
        log_date = to_date(cmd.values("date")[0]) if cmd.has_flag("date") else None
        return self.session.program.log(
            cmd.primary_param,
            [to_weight(w) for w in cmd.values("weight")],
            [to_count(r) for r in cmd.values("reps")],
            to_count(cmd.values("sets")[0]),
            log_date,
        )

    def _program_today(self, cmd: ParsedCommand) -> str:
        program = self.session.program
        return formatters.format_entries(program.current_date(), program.today())

    def _program_history(self, cmd: ParsedCommand) -> str:
        program = self.session.program
        if cmd.primary_param:
            log_date = to_date(cmd.primary_param)
            return formatters.format_entries(log_date, program.entries_on(log_date))
        return formatters.format_history(program.history())

    def _program_list(self, cmd: ParsedCommand) -> str:
        return formatters.format_schedule(self.session.program.list_schedule())

    # --- help / exit --------------------------------------------------------
    def _help(self, cmd: ParsedCommand) -> str:
        number = to_count(cmd.primary_param) if cmd.primary_param else None
        return help_menu.render(cmd.action, number)

    def _exit(self, cmd: ParsedCommand) -> str:
        self.finished = True
        return "Goodbye! Your exercises, workouts and weekly program will be saved."
