# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .task_models import Task, TaskListener

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    - tasks are kept in insertion order (= display order)
    - ids come from a monotonic counter that is never reset or reused
    - every mutation rebuilds the list (copy-on-write), so snapshots handed out
      by list_tasks() are never modified afterwards

    Listeners registered with subscribe() are called synchronously after each
    mutation that actually changed something. No-ops (empty title on add,
    unknown id) stay silent.

    Single owner, no locking.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 0
        self._listeners: list[TaskListener] = []
        logger.info("TaskStore ready (in-memory)")

    # ---- listeners ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: TaskListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return

    def _set_tasks(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        snapshot = list(tasks)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener failed: %r", listener)

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- public API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def add_task(self, title: str, category: str) -> Task | None:
        # Exact empty check: whitespace-only titles are accepted.
        if title == "":
            logger.debug("add_task ignored: empty title (category=%s)", category)
            return None

        task = Task(id=self._next_id, title=title, category=category)
        self._next_id += 1
        logger.debug("Task added id=%s category=%s", task.id, category)
        self._set_tasks([*self._tasks, task])
        return task

    def delete_task(self, task_id: int) -> None:
        if self._index_of(task_id) is None:
            logger.debug("delete_task ignored: unknown id=%s", task_id)
            return
        logger.debug("Task deleted id=%s", task_id)
        self._set_tasks([t for t in self._tasks if t.id != task_id])

    def toggle_task_completion(self, task_id: int) -> None:
        if self._index_of(task_id) is None:
            logger.debug("toggle_task_completion ignored: unknown id=%s", task_id)
            return
        self._set_tasks(
            [replace(t, completed=not t.completed) if t.id == task_id else t for t in self._tasks]
        )
        logger.debug("Task toggled id=%s", task_id)

    def edit_task(self, task_id: int, new_title: str) -> None:
        """
        Replace the title of a task.

        Unlike add_task(), an empty title is stored as-is.
        """
        if self._index_of(task_id) is None:
            logger.debug("edit_task ignored: unknown id=%s", task_id)
            return
        self._set_tasks(
            [replace(t, title=new_title) if t.id == task_id else t for t in self._tasks]
        )
        logger.debug("Task edited id=%s", task_id)

    def list_tasks(self, category: str | None = None) -> list[Task]:
        """
        Current tasks in insertion order.

        With `category`, only tasks whose category matches exactly
        (case-sensitive, no normalization).
        """
        if category is None:
            return list(self._tasks)
        return [t for t in self._tasks if t.category == category]
