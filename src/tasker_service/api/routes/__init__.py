"""Route modules."""

from . import projects, tasks, users

__all__ = ["projects", "tasks", "users"]
