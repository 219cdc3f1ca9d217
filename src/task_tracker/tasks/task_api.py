# src/task_tracker/tasks/task_api.py

"""
Command operations over the in-memory task list.

Each mutating operation works on the list produced by one TaskStore.load(),
and on success calls TaskStore.save() exactly once. Failures never save.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .task_models import Task, TaskStatus
from .task_store import TaskIdOverflowError, TaskStore

logger = logging.getLogger(__name__)

LIST_FILTERS = ("all", "todo", "in-progress", "done", "not-done")


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str


def _fail(message: str) -> CommandResult:
    return CommandResult(ok=False, message=message)


def _find(tasks: list[Task], task_id: int) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def _save(store: TaskStore, tasks: list[Task], success: str) -> CommandResult:
    if not store.save(tasks):
        return _fail(f"Error: Could not save tasks to {store.path}.")
    return CommandResult(ok=True, message=success)


def add_task(store: TaskStore, tasks: list[Task], description: str) -> CommandResult:
    if not description:
        return _fail("Error: Task description cannot be empty.")

    try:
        new_id = store.next_id(tasks)
    except TaskIdOverflowError as e:
        logger.error("Task id space exhausted: %s", e)
        return _fail(f"Error adding task: {e}")

    tasks.append(Task.create(new_id, description))
    logger.debug("Task added id=%s", new_id)
    return _save(store, tasks, f"Task added successfully (ID: {new_id})")


def update_task(
    store: TaskStore, tasks: list[Task], task_id: int, description: str
) -> CommandResult:
    if not description:
        return _fail("Error: New task description cannot be empty.")

    task = _find(tasks, task_id)
    if task is None:
        return _fail(f"Error: Task with ID {task_id} not found for update.")

    task.set_description(description)
    return _save(store, tasks, f"Task {task_id} updated successfully.")


def delete_task(store: TaskStore, tasks: list[Task], task_id: int) -> CommandResult:
    kept = [t for t in tasks if t.id != task_id]
    if len(kept) == len(tasks):
        return _fail(f"Error: Task with ID {task_id} not found for deletion.")

    # In place, so callers holding the list see the removal.
    tasks[:] = kept
    return _save(store, tasks, f"Task {task_id} deleted successfully.")


def mark_task_status(
    store: TaskStore, tasks: list[Task], task_id: int, status: str
) -> CommandResult:
    if TaskStatus.parse(status) is None:
        return _fail(f"Error: Invalid status '{status}'. Use 'todo', 'in-progress', or 'done'.")

    task = _find(tasks, task_id)
    if task is None:
        return _fail(f"Error: Task with ID {task_id} not found to mark status.")

    task.set_status(status)
    return _save(store, tasks, f"Task {task_id} status updated.")


def _matches(task: Task, status_filter: str) -> bool:
    if status_filter == "all":
        return True
    if status_filter == "not-done":
        return task.status != TaskStatus.DONE
    return task.status == status_filter


def list_tasks(tasks: list[Task], status_filter: str = "all") -> CommandResult:
    """
    Render tasks matching `status_filter`, in collection order.

    Filters: all, todo, in-progress, done, not-done. Read-only.
    """
    if status_filter not in LIST_FILTERS:
        return _fail(
            f"Error: Invalid filter '{status_filter}'. "
            "Use 'all', 'todo', 'in-progress', 'done', or 'not-done'."
        )

    header = "--- Tasks ---" if status_filter == "all" else f"--- Tasks (Status: {status_filter}) ---"
    lines = [header]

    shown = [t for t in tasks if _matches(t, status_filter)]
    for task in shown:
        lines.append(f"ID: {task.id}")
        lines.append(f"  Description: {task.description}")
        lines.append(f"  Status: {task.status}")
        lines.append(f"  Created: {task.created_at}")
        lines.append(f"  Updated: {task.updated_at}")
        lines.append("-------------")

    if not shown:
        if status_filter == "all":
            lines.append("No tasks found.")
        else:
            lines.append(f"No tasks found with status '{status_filter}'.")
        lines.append("-------------")

    return CommandResult(ok=True, message="\n".join(lines))
