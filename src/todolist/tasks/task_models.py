# src/todolist/tasks/task_models.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
    """
    Categories offered by the front-end (tab row + picker).

    Notes:
    - the store itself accepts any string; this set only drives the UI.
    """

    WORK = "Work"
    PERSONAL = "Personal"
    URGENT = "Urgent"


# Tab order.
DEFAULT_CATEGORIES: tuple[str, ...] = tuple(c.value for c in Category)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    category: str
    completed: bool = False


# Called with a snapshot of all tasks after each effective store mutation.
TaskListener = Callable[[list[Task]], None]
