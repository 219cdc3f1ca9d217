# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Loads settings, configures logging, loads the task list once, then runs a
single command against it. Exit code: 0 on success, 1 on any reported error.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import CommandContext, registry

logger = logging.getLogger(__name__)

HELP_COMMANDS = ("help", "--help", "-h")


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in HELP_COMMANDS:
        print(registry.build_help())
        # Missing command is an error; asking for help is not.
        return 1 if not args else 0

    if settings is None:
        settings = get_settings()
    setup_logging(console_level=settings.console_level, log_file=settings.log_file)

    store = TaskStore(settings.tasks_file)
    ctx = CommandContext(store=store, tasks=store.load())

    command, rest = args[0], args[1:]
    try:
        return registry.handle(ctx, command, rest)
    except Exception as e:
        logger.exception("Unexpected error while running '%s'.", command)
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
