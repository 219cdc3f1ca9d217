# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from ..tasks.task_api import (
    CommandResult,
    add_task,
    delete_task,
    list_tasks,
    mark_task_status,
    update_task,
)
from ..tasks.task_codec import is_integer_literal
from ..tasks.task_models import MAX_TASK_ID, MIN_TASK_ID, Task, TaskStatus
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

PROG = "task-cli"


@dataclass(slots=True)
class CommandContext:
    """Everything a command needs: the store and the list loaded from it."""

    store: TaskStore
    tasks: list[Task] = field(default_factory=list)


CommandHandler = Callable[[CommandContext, list[str]], CommandResult]


class InvalidTaskIdError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str
    min_args: int
    max_args: int


def parse_task_id(raw: str) -> int:
    """Plain ASCII decimal only: no '+', '_' separators or non-ASCII digits."""
    text = raw.strip()
    if not is_integer_literal(text):
        raise InvalidTaskIdError(
            "Error: Invalid number format provided for task ID. Please use an integer."
        )
    value = int(text)
    if not MIN_TASK_ID <= value <= MAX_TASK_ID:
        raise InvalidTaskIdError("Error: Provided task ID is too large or too small.")
    return value


class CommandRegistry:
    """Table of CLI commands (add, list, mark-done, ...) with fixed arity."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        *,
        nargs: int | tuple[int, int] = 0,
    ) -> None:
        lo, hi = (nargs, nargs) if isinstance(nargs, int) else nargs
        self._commands[name] = _Command(handler, usage, help_text, lo, hi)

    def names(self) -> list[str]:
        return list(self._commands)

    def build_help(self) -> str:
        width = max((len(c.usage) for c in self._commands.values()), default=0) + 2
        lines = [f"Usage: {PROG} <command> [options]", "", "Commands:"]
        for cmd in self._commands.values():
            lines.append(f"  {cmd.usage.ljust(width)}{cmd.help_text}")
        lines.append(f"  {'help'.ljust(width)}Show this help message")
        lines += [
            "",
            "Example:",
            f'  {PROG} add "Submit project report"',
            f"  {PROG} list todo",
            f"  {PROG} mark-in-progress 1",
            "",
            "Note: Task descriptions containing spaces must be enclosed in double quotes.",
        ]
        return "\n".join(lines)

    def _arity_error(self, name: str, cmd: _Command) -> str:
        if cmd.min_args == cmd.max_args:
            count = "exactly one argument" if cmd.min_args == 1 else f"{cmd.min_args} arguments"
            return f"Error: '{name}' command requires {count}: {cmd.usage}"
        if cmd.min_args == 0:
            return f"Error: '{name}' command takes at most {cmd.max_args} argument(s): {cmd.usage}"
        return f"Error: '{name}' command takes {cmd.min_args} to {cmd.max_args} arguments: {cmd.usage}"

    def handle(self, ctx: CommandContext, name: str, args: list[str]) -> int:
        """Run one command and print its outcome. Returns the process exit code."""
        cmd = self._commands.get(name)
        if cmd is None:
            print(f"Error: Unknown command '{name}'.", file=sys.stderr)
            print(self.build_help(), file=sys.stderr)
            return 1

        if not cmd.min_args <= len(args) <= cmd.max_args:
            print(self._arity_error(name, cmd), file=sys.stderr)
            print(self.build_help(), file=sys.stderr)
            return 1

        logger.debug("Running command %s args=%s", name, args)
        try:
            result = cmd.handler(ctx, args)
        except InvalidTaskIdError as e:
            print(str(e), file=sys.stderr)
            return 1

        if result.ok:
            print(result.message)
            return 0
        print(result.message, file=sys.stderr)
        return 1


registry = CommandRegistry()


def cmd_add(ctx: CommandContext, args: list[str]) -> CommandResult:
    return add_task(ctx.store, ctx.tasks, args[0])


def cmd_update(ctx: CommandContext, args: list[str]) -> CommandResult:
    return update_task(ctx.store, ctx.tasks, parse_task_id(args[0]), args[1])


def cmd_delete(ctx: CommandContext, args: list[str]) -> CommandResult:
    return delete_task(ctx.store, ctx.tasks, parse_task_id(args[0]))


def _cmd_mark(status: TaskStatus) -> CommandHandler:
    def handler(ctx: CommandContext, args: list[str]) -> CommandResult:
        return mark_task_status(ctx.store, ctx.tasks, parse_task_id(args[0]), status)

    return handler


def cmd_list(ctx: CommandContext, args: list[str]) -> CommandResult:
    return list_tasks(ctx.tasks, args[0] if args else "all")


registry.register(
    "add",
    cmd_add,
    'add "<description>"',
    "Add a new task (use quotes for descriptions with spaces)",
    nargs=1,
)
registry.register(
    "update",
    cmd_update,
    'update <id> "<description>"',
    "Update task description (use quotes)",
    nargs=2,
)
registry.register("delete", cmd_delete, "delete <id>", "Delete a task by ID", nargs=1)
registry.register(
    "mark-in-progress",
    _cmd_mark(TaskStatus.IN_PROGRESS),
    "mark-in-progress <id>",
    "Mark task as 'in-progress'",
    nargs=1,
)
registry.register(
    "mark-done", _cmd_mark(TaskStatus.DONE), "mark-done <id>", "Mark task as 'done'", nargs=1
)
registry.register(
    "mark-todo", _cmd_mark(TaskStatus.TODO), "mark-todo <id>", "Mark task as 'todo'", nargs=1
)
registry.register(
    "list",
    cmd_list,
    "list [all|todo|in-progress|done|not-done]",
    "List tasks (default: all)",
    nargs=(0, 1),
)
