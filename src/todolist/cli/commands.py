# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.state import AppState

# (state, args split on whitespace, raw text after the command name)
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get both the split args and the raw text after the first
        space following the command name, untouched (titles keep their spacing).
        """
        if not line.startswith("/"):
            return None

        name, _, raw = line[1:].partition(" ")
        if not name.strip():
            return "Empty command. Use /help to list available commands."

        name = name.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, raw.split(), raw)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering helpers (shared with connectors) ----


def format_task(task: Any) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} {task.title}  (Category: {task.category})"


def render_task_list(state: AppState) -> str:
    tabs = " | ".join(f"[{c}]" if c == state.selected_tab else c for c in state.categories)
    tasks = state.visible_tasks()
    lines = [tabs]
    if not tasks:
        lines.append(f"  (no tasks in {state.selected_tab})")
    for t in tasks:
        lines.append(f"  {format_task(t)}")
    return "\n".join(lines)


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _match_category(state: AppState, raw: str) -> str | None:
    """Case-insensitive lookup among configured categories (canonical value returned)."""
    needle = raw.strip().lower()
    for c in state.categories:
        if c.lower() == needle:
            return c
    return None


# ---- commands ----


def cmd_help(state: AppState, args: list[str], raw: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], raw: str) -> str:
    tasks = state.task_store.list_tasks()
    done = sum(1 for t in tasks if t.completed)
    per_cat = ", ".join(
        f"{c}: {len(state.task_store.list_tasks(c))}" for c in state.categories
    )
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} completed)\n"
        f"  Per category: {per_cat}\n"
        f"  New tasks go to: {state.selected_category}\n"
        f"  Showing tab: {state.selected_tab}"
    )


def cmd_add(state: AppState, args: list[str], raw: str) -> str:
    """
    /add <title...>  -> add a task in the selected category

    The title is taken verbatim. An empty title is ignored by the store
    (no task, no error).
    """
    task = state.task_store.add_task(raw, state.selected_category)
    if task is None:
        return "Nothing added (empty title)."
    return f"Added #{task.id} to {task.category}: {task.title}"


def cmd_cat(state: AppState, args: list[str], raw: str) -> str:
    """
    /cat          -> show category used for new tasks
    /cat <name>   -> pick another one
    """
    if not args:
        return (
            f"New tasks go to {state.selected_category}. "
            f"Choose one of: {', '.join(state.categories)}."
        )

    cat = _match_category(state, " ".join(args))
    if cat is None:
        return f"Unknown category. Choose one of: {', '.join(state.categories)}."

    state.selected_category = cat
    logger.debug("Selected category for new tasks: %s", cat)
    return f"New tasks go to {cat}."


def cmd_tab(state: AppState, args: list[str], raw: str) -> str:
    """
    /tab                -> show tabs
    /tab <name|number>  -> switch tab (numbers start at 1)
    """
    if not args:
        return render_task_list(state)

    wanted = " ".join(args)
    cat = _match_category(state, wanted)
    if cat is None:
        idx = _parse_id(wanted)
        if idx is not None and 1 <= idx <= len(state.categories):
            cat = state.categories[idx - 1]

    if cat is None:
        return f"Unknown tab. Choose one of: {', '.join(state.categories)}."

    state.selected_tab = cat
    logger.debug("Selected tab: %s", cat)
    return render_task_list(state)


def cmd_list(state: AppState, args: list[str], raw: str) -> str:
    """
    /list      -> tasks of the current tab
    /list all  -> every task, in insertion order
    """
    if args and args[0].lower() == "all":
        tasks = state.task_store.list_tasks()
        if not tasks:
            return "No tasks."
        return "\n".join(format_task(t) for t in tasks)
    return render_task_list(state)


def cmd_done(state: AppState, args: list[str], raw: str) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /done <id>"

    state.task_store.toggle_task_completion(task_id)
    task = state.task_store.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return f"#{task_id} marked {'done' if task.completed else 'open'}."


def cmd_edit(state: AppState, args: list[str], raw: str) -> str:
    """
    /edit <id> <new title...>

    Everything after the first space following the id is the new title,
    verbatim. Omitting it clears the title; edits are not validated.
    """
    id_part, _, new_title = raw.lstrip().partition(" ")
    task_id = _parse_id(id_part) if id_part else None
    if task_id is None:
        return "Usage: /edit <id> <new title>"

    if state.task_store.get_task(task_id) is None:
        return f"No task #{task_id}."

    state.task_store.edit_task(task_id, new_title)
    return f"#{task_id} renamed to: {new_title}"


def cmd_del(state: AppState, args: list[str], raw: str) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /del <id>"

    if state.task_store.get_task(task_id) is None:
        return f"No task #{task_id}."

    state.task_store.delete_task(task_id)
    return f"Deleted #{task_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and current selection.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", aliases=["a"])
registry.register("cat", cmd_cat, help_text="Category for new tasks: /cat <name>.")
registry.register("tab", cmd_tab, help_text="Switch tab: /tab <name|number>.")
registry.register("list", cmd_list, help_text="List tasks: /list | /list all.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <id> <title>.")
registry.register("del", cmd_del, help_text="Delete a task: /del <id>.", aliases=["rm"])
