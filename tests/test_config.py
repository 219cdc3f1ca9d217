# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("TASK_CLI_TASKS_FILE", "TASK_CLI_LOG_LEVEL", "TASK_CLI_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.tasks_file == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.console_level == logging.WARNING
    assert s.log_file is None


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_FILE", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_CLI_LOG_FILE", str(tmp_path / "task-cli.log"))
    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "mine.json"
    assert s.console_level == logging.DEBUG
    assert s.log_file == tmp_path / "task-cli.log"


def test_unknown_log_level_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "chatty")
    assert Settings.from_env().console_level == logging.WARNING


def test_blank_tasks_file_uses_default(monkeypatch) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_FILE", "  ")
    assert Settings.from_env().tasks_file == Path("tasks.json")
