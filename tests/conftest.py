# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.cli.bootstrap import create_initial_state
from todolist.core.state import AppState
from todolist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todolist",
        log_level="INFO",
        data_dir=tmp_path / "data",
        categories=["Work", "Personal", "Urgent"],
        default_category="Work",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)
