# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_task_list
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    """
    Interactive REPL over the task store.

    A plain line is added as a task title in the selected category;
    slash commands do everything else. The current tab is re-rendered
    after every command that changed the store.
    """
    logger.info("Console connector started (tab=%s).", state.selected_tab)
    _print_ts("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_task_list(state))

    changed = False

    def _on_change(_tasks: list) -> None:
        nonlocal changed
        changed = True

    unsubscribe = state.task_store.subscribe(_on_change)
    try:
        while True:
            try:
                # Not stripped: a bare line becomes the task title verbatim.
                user_input = input(f"[{state.selected_category}] > ")
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.strip().lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            line = user_input if user_input.startswith("/") else f"/add {user_input}"

            changed = False
            try:
                cmd_response = command_registry.handle(state, line)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is not None:
                _print_ts(cmd_response)

            if changed:
                print(render_task_list(state))
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
