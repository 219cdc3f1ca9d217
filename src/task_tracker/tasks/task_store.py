# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_codec import decode_tasks, encode_tasks
from .task_models import MAX_TASK_ID, Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"
FILE_ERRORS = "surrogateescape"


class TaskIdOverflowError(RuntimeError):
    """No id left: the highest existing id is already MAX_TASK_ID."""


class TaskStore:
    """
    JSON file task store.

    The whole collection is read by load() and written back by save();
    there are no incremental writes.

    Concurrency:
    - no locking; two processes doing load/modify/save race and the last writer wins
    - save() replaces the file atomically, so a reader never sees a half-written file
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self._path = Path(path)
        self.last_problems: list[str] = []

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read all tasks from the backing file.

        Missing file -> []. Malformed content is reported through logging and
        whatever could be decoded is returned.
        """
        self.last_problems = []
        if not self._path.exists():
            logger.debug("Tasks file %s does not exist yet; starting empty.", self._path)
            return []

        try:
            # Bytes that are not UTF-8 are carried as surrogates and written back unchanged.
            with open(self._path, encoding="utf-8", errors=FILE_ERRORS, newline="") as f:
                text = f.read()
        except OSError:
            logger.exception("Could not read %s; starting with no tasks.", self._path)
            return []

        decoded = decode_tasks(text, source=str(self._path))
        self.last_problems = list(decoded.problems)
        logger.debug(
            "Loaded %d tasks from %s (problems=%d)",
            len(decoded.tasks),
            self._path,
            len(decoded.problems),
        )
        return decoded.tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        """
        Overwrite the backing file with `tasks`.

        Returns False (after logging) when the file cannot be written.
        """
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", errors=FILE_ERRORS, newline="") as f:
                f.write(encode_tasks(tasks))
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Could not open %s for writing.", self._path)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Failed to remove temp file %s", tmp, exc_info=True)
            return False

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True

    @staticmethod
    def next_id(tasks: Sequence[Task]) -> int:
        """
        1 for an empty collection, else one more than the highest id present.

        Ids are not tracked after deletion, so removing the highest task lets
        its id be issued again.
        """
        if not tasks:
            return 1
        max_id = max(task.id for task in tasks)
        if max_id >= MAX_TASK_ID:
            raise TaskIdOverflowError(
                "Cannot generate new task ID, maximum integer value reached."
            )
        return max(max_id, 0) + 1
