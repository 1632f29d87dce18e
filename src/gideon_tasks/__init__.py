"""Gideon Tasks — client-side task lifecycle rules and fee calculation."""

from gideon_tasks.actions import ActionDispatcher, TaskService, derive_role
from gideon_tasks.fees import calculate_fees, format_cents
from gideon_tasks.schemas import FeeBreakdown, TaskSnapshot
from gideon_tasks.task_status import (
    ActionSeverity,
    Role,
    TaskAction,
    TaskStatus,
    allowed_transitions,
    available_actions,
    can_transition,
    is_terminal,
)

__version__ = "0.1.0"

__all__ = [
    "ActionDispatcher",
    "ActionSeverity",
    "FeeBreakdown",
    "Role",
    "TaskAction",
    "TaskService",
    "TaskSnapshot",
    "TaskStatus",
    "allowed_transitions",
    "available_actions",
    "calculate_fees",
    "can_transition",
    "derive_role",
    "format_cents",
    "is_terminal",
]
