# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

logger = logging.getLogger(__name__)

# Ids are stored as 32-bit signed integers in existing files.
MAX_TASK_ID = 2**31 - 1
MIN_TASK_ID = -(2**31)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class TaskStatus(StrEnum):
    """Task lifecycle status. Only these three values are ever persisted."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str

    @classmethod
    def create(cls, task_id: int, description: str) -> Task:
        """New task: status todo, created_at == updated_at."""
        ts = now_timestamp()
        return cls(
            id=task_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=ts,
            updated_at=ts,
        )

    def _touch(self) -> None:
        self.updated_at = now_timestamp()

    def set_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def set_status(self, status: str) -> bool:
        """
        Move the task to `status` and refresh updated_at.

        An unknown status leaves the task untouched and returns False.
        """
        parsed = TaskStatus.parse(status)
        if parsed is None:
            logger.warning(
                "Invalid status '%s' for task %s. Status must be 'todo', 'in-progress', "
                "or 'done'. Status not changed.",
                status,
                self.id,
            )
            return False
        self.status = parsed
        self._touch()
        return True


@dataclass(slots=True)
class TaskBuild:
    """Result of building a Task from raw fields: a task, or the reasons it was skipped."""

    task: Task | None
    reasons: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.task is not None


def build_task(
    id_raw: str,
    description: str,
    status: str,
    created_at: str,
    updated_at: str,
) -> TaskBuild:
    """
    Validate the five raw fields extracted from one stored object.

    Every offending field adds a reason; any reason means the task is skipped.
    """
    reasons: list[str] = []
    task_id: int | None = None

    if not id_raw:
        reasons.append("Skipping task due to missing or invalid ID.")
    else:
        try:
            task_id = int(id_raw)
        except ValueError:
            reasons.append(f"Error parsing ID field as integer: '{id_raw}'. Skipping task fragment.")
        else:
            if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
                reasons.append(
                    f"Error parsing ID field (out of range): '{id_raw}'. Skipping task fragment."
                )
                task_id = None

    label = task_id if task_id is not None else "?"

    if not description:
        reasons.append(f"Skipping task ID {label} due to missing description.")

    parsed_status = TaskStatus.parse(status)
    if parsed_status is None:
        reasons.append(f"Skipping task ID {label} due to missing or invalid status: '{status}'")

    if not created_at:
        reasons.append(f"Skipping task ID {label} due to missing createdAt.")
    if not updated_at:
        reasons.append(f"Skipping task ID {label} due to missing updatedAt.")

    if reasons or task_id is None or parsed_status is None:
        return TaskBuild(task=None, reasons=reasons)

    return TaskBuild(
        task=Task(
            id=task_id,
            description=description,
            status=parsed_status,
            created_at=created_at,
            updated_at=updated_at,
        )
    )
