# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the task store into AppState with the initial screen selection.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    categories = list(settings.categories)
    default_category = settings.default_category

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        selected_category=default_category,
        # First tab is shown on start.
        selected_tab=categories[0] if categories else default_category,
    )
    logger.debug("State created categories=%s default=%s", categories, default_category)
    return state
