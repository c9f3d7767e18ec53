# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every variable has a default.
- Tasks are never persisted; data_dir only holds logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .tasks.task_models import DEFAULT_CATEGORIES

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts or list(default)


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Front-end ----
    categories: list[str]
    default_category: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todolist").strip() or "todolist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todolist"))

        # Keep order, drop duplicates.
        categories = list(dict.fromkeys(_env_list(_k("CATEGORIES"), list(DEFAULT_CATEGORIES))))

        default_category = _env(_k("DEFAULT_CATEGORY"), "").strip()
        if default_category not in categories:
            default_category = categories[0]

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            categories=categories,
            default_category=default_category,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """
    Process-wide settings.

    On first use a .env found from the working directory upwards is loaded;
    variables already set in the environment win.
    """
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
