# tests/test_console_connector.py

from __future__ import annotations

import builtins

import pytest

from todolist.connectors.console_connector import run_console_loop
from todolist.core.state import AppState
from todolist.tasks.task_models import Task

from .fakes import scripted_input


def _run(state: AppState, monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    monkeypatch.setattr(builtins, "input", scripted_input(lines))
    run_console_loop(state)


def test_plain_line_adds_task_in_selected_category(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(state, monkeypatch, ["Call bob", "", "/cat Urgent", "Fix prod"])

    assert state.task_store.list_tasks() == [
        Task(id=0, title="Call bob", category="Work"),
        Task(id=1, title="Fix prod", category="Urgent"),
    ]
    out = capsys.readouterr().out
    assert "Added #0 to Work: Call bob" in out
    assert "[ ] #0 Call bob  (Category: Work)" in out


def test_plain_line_is_added_verbatim(
    state: AppState, monkeypatch: pytest.MonkeyPatch
) -> None:
    _run(state, monkeypatch, ["  Call   bob ", "   ", " /exit "])

    assert [t.title for t in state.task_store.list_tasks()] == ["  Call   bob ", "   "]


def test_exit_stops_before_remaining_input(
    state: AppState, monkeypatch: pytest.MonkeyPatch
) -> None:
    _run(state, monkeypatch, ["a", "/exit", "b"])
    assert [t.title for t in state.task_store.list_tasks()] == ["a"]


def test_rerenders_only_after_changes(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(state, monkeypatch, ["/help", "/done 0", "a", "/done 0"])

    out = capsys.readouterr().out
    # Initial render + one after the add + one after the toggle.
    assert out.count("[Work] | Personal | Urgent") == 3
    assert "[x] #0 a  (Category: Work)" in out


def test_listener_removed_when_loop_ends(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(state, monkeypatch, [])
    capsys.readouterr()

    state.task_store.add_task("later", "Work")
    assert capsys.readouterr().out == ""


def test_handler_crash_is_reported_and_loop_continues(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def broken_get_task(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "get_task", broken_get_task)
    _run(state, monkeypatch, ["/del 0", "still alive"])

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert [t.title for t in state.task_store.list_tasks()] == ["still alive"]


def test_keyboard_interrupt_exits(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def _interrupt(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", _interrupt)
    run_console_loop(state)
    assert state.task_store.count_tasks() == 0
