# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

from todolist.cli.bootstrap import create_initial_state
from todolist.logging_setup import setup_logging


def test_initial_state_is_empty_with_default_selection(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.task_store.count_tasks() == 0
    assert state.selected_category == "Work"
    assert state.selected_tab == "Work"
    assert state.categories == ["Work", "Personal", "Urgent"]


def test_default_category_and_first_tab_are_independent(settings: SimpleNamespace) -> None:
    settings.default_category = "Urgent"
    state = create_initial_state(settings=settings)

    assert state.selected_category == "Urgent"
    assert state.selected_tab == "Work"


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("todolist.tests").info("hello from test")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "todolist.log"
        assert "hello from test" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
