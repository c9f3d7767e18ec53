"""Single-screen to-do list: an in-memory task store with a console front-end."""

__version__ = "0.1.0"
