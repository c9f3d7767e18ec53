# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-end.

Commands and connectors depend on this Protocol instead of the concrete store,
so a different backing store can be wired in bootstrap without touching them.
"""

from collections.abc import Callable
from typing import Any, Protocol

from ..tasks.task_models import TaskListener


class TaskRepo(Protocol):
    # Mutations
    def add_task(self, title: str, category: str) -> Any | None: ...
    def delete_task(self, task_id: int) -> None: ...
    def toggle_task_completion(self, task_id: int) -> None: ...
    def edit_task(self, task_id: int, new_title: str) -> None: ...

    # Queries
    def list_tasks(self, category: str | None = None) -> list[Any]: ...
    def get_task(self, task_id: int) -> Any | None: ...
    def count_tasks(self) -> int: ...

    # Change notifications
    def subscribe(self, listener: TaskListener) -> Callable[[], None]: ...
    def unsubscribe(self, listener: TaskListener) -> None: ...
