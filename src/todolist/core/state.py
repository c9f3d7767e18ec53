# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so commands/connectors don't read config globals.
    settings: object

    task_store: TaskRepo

    # Screen state: category picked for new tasks, and the tab being shown.
    selected_category: str
    selected_tab: str

    @property
    def categories(self) -> list[str]:
        return list(self.settings.categories)  # type: ignore[attr-defined]

    def visible_tasks(self) -> list:
        return self.task_store.list_tasks(self.selected_tab)
