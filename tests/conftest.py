# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_models import Task, TaskStatus
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def settings(tasks_path: Path) -> Settings:
    """Settings pointing at a per-test tasks file; no log file."""
    return Settings(tasks_file=tasks_path, log_level="WARNING", log_file=None)


def make_task(
    task_id: int,
    description: str = "Buy milk",
    status: TaskStatus = TaskStatus.TODO,
    created_at: str = "2024-05-01 09:00:00",
    updated_at: str = "2024-05-01 09:00:00",
) -> Task:
    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=created_at,
        updated_at=updated_at,
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        make_task(1, "Buy milk"),
        make_task(2, 'Read "Dune"', TaskStatus.IN_PROGRESS, updated_at="2024-05-02 10:30:00"),
        make_task(3, r"Fix C:\temp path", TaskStatus.DONE, updated_at="2024-05-03 18:15:42"),
    ]
