"""Domain enumerations."""
from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


class AccessMode(str, Enum):
    """Which project predicate an operation requires."""

    OWNER = "owner"
    MEMBER = "member"
