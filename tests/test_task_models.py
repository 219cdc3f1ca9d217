# tests/test_task_models.py

from __future__ import annotations

import logging

from task_tracker.tasks import task_models
from task_tracker.tasks.task_models import Task, TaskStatus, build_task


def test_create_sets_defaults() -> None:
    task = Task.create(1, "Buy milk")
    assert task.id == 1
    assert task.status is TaskStatus.TODO
    assert task.created_at == task.updated_at


def test_mutations_refresh_updated_at_only(monkeypatch) -> None:
    stamps = iter(["2024-01-01 00:00:00", "2024-01-02 00:00:00", "2024-01-03 00:00:00"])
    monkeypatch.setattr(task_models, "now_timestamp", lambda: next(stamps))

    task = Task.create(1, "a")
    task.set_description("b")
    assert (task.description, task.created_at, task.updated_at) == (
        "b",
        "2024-01-01 00:00:00",
        "2024-01-02 00:00:00",
    )

    assert task.set_status("done") is True
    assert task.status is TaskStatus.DONE
    assert task.updated_at == "2024-01-03 00:00:00"
    assert task.created_at == "2024-01-01 00:00:00"


def test_set_status_rejects_unknown_value(caplog) -> None:
    task = Task.create(7, "a")
    before = task.updated_at
    with caplog.at_level(logging.WARNING):
        assert task.set_status("finished") is False
    assert task.status is TaskStatus.TODO
    assert task.updated_at == before
    assert "Invalid status 'finished' for task 7" in caplog.text


def test_status_parse() -> None:
    assert TaskStatus.parse("in-progress") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("in_progress") is None
    assert TaskStatus.parse("") is None
    assert TaskStatus.parse(None) is None


def test_build_task_valid() -> None:
    built = build_task("4", "desc", "done", "c", "u")
    assert built.ok
    assert built.task == Task(id=4, description="desc", status=TaskStatus.DONE, created_at="c", updated_at="u")
    assert built.reasons == []


def test_build_task_collects_all_reasons() -> None:
    built = build_task("", "", "nope", "", "")
    assert not built.ok
    assert built.task is None
    assert len(built.reasons) == 5


def test_build_task_out_of_range_id() -> None:
    built = build_task(str(2**31), "d", "todo", "c", "u")
    assert not built.ok
    assert "out of range" in built.reasons[0]
