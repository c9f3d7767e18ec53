"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Category)
- task_store.py: in-memory storage + mutation/query helpers with change listeners
"""

from .task_models import DEFAULT_CATEGORIES, Category, Task, TaskListener
from .task_store import TaskStore

__all__ = ["DEFAULT_CATEGORIES", "Category", "Task", "TaskListener", "TaskStore"]
