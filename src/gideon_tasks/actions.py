"""Role derivation and routing of UI actions to task-service writes.

The dispatcher only checks that an action is on offer for the snapshot it was
given. The task service decides whether the transition actually happens, and
the caller refetches the task afterwards rather than trusting the local copy.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from gideon_tasks.exceptions import ActionNotAvailableError
from gideon_tasks.logging import get_logger
from gideon_tasks.task_status import Role, TaskStatus, available_actions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gideon_tasks.schemas import TaskSnapshot
    from gideon_tasks.task_status import TaskAction


class TaskService(Protocol):
    """Write operations of the remote task service. Each returns the updated task."""

    async def publish_task(self, task_id: str) -> dict[str, Any]: ...

    async def cancel_task(self, task_id: str) -> dict[str, Any]: ...

    async def start_task(self, task_id: str) -> dict[str, Any]: ...

    async def submit_task(self, task_id: str) -> dict[str, Any]: ...

    async def approve_task(self, task_id: str) -> dict[str, Any]: ...

    async def dispute_task(self, task_id: str) -> dict[str, Any]: ...

    async def approve_moderation(self, task_id: str) -> dict[str, Any]: ...

    async def reject_moderation(self, task_id: str) -> dict[str, Any]: ...

    async def resolve_dispute(self, task_id: str, resolution: str) -> dict[str, Any]: ...


# Target status -> TaskService method that requests it.
SERVICE_OPERATIONS: Mapping[TaskStatus, str] = MappingProxyType(
    {
        TaskStatus.PENDING_REVIEW: "publish_task",
        TaskStatus.PUBLISHED: "approve_moderation",
        TaskStatus.REJECTED: "reject_moderation",
        TaskStatus.CANCELLED: "cancel_task",
        TaskStatus.IN_PROGRESS: "start_task",
        TaskStatus.SUBMITTED: "submit_task",
        TaskStatus.COMPLETED: "approve_task",
        TaskStatus.DISPUTED: "dispute_task",
        TaskStatus.RESOLVED: "resolve_dispute",
    }
)


def derive_role(task: TaskSnapshot, viewer_id: str | None, is_admin: bool = False) -> Role:
    """
    Classify the viewer against a task.

    Admin wins over ownership. Anyone who is neither admin nor requester is
    treated as a doer, whether or not they are the assigned one.
    """
    if is_admin:
        return Role.ADMIN
    if viewer_id is not None and task.requester_id == viewer_id:
        return Role.REQUESTER
    return Role.DOER


class ActionDispatcher:
    """Sends the write request behind a chosen action to the task service."""

    def __init__(self, service: TaskService) -> None:
        self._service = service
        self._logger = get_logger(__name__)

    def actions_for(self, task: TaskSnapshot, role: Role | str) -> tuple[TaskAction, ...]:
        """Actions to render for this task and role."""
        return available_actions(task.status, role)

    async def perform(
        self,
        task: TaskSnapshot,
        role: Role | str,
        target_status: TaskStatus | str,
        *,
        resolution: str | None = None,
    ) -> dict[str, Any]:
        """
        Request the transition behind an offered action.

        Raises:
            ActionNotAvailableError: If the action is not offered for this
                status and role, or a dispute resolution has no text.
        """
        offered = {action.target_status for action in self.actions_for(task, role)}
        log_extra = {"task_id": task.id, "role": str(role), "target_status": str(target_status)}

        if target_status not in offered:
            self._logger.warning("Action not available", extra=log_extra)
            raise ActionNotAvailableError(
                f"No action to {target_status!r} for role {role!r} on a {task.status!r} task",
                {**log_extra, "status": task.status},
            )

        target = TaskStatus(target_status)
        operation = getattr(self._service, SERVICE_OPERATIONS[target])

        if target is TaskStatus.RESOLVED:
            if not resolution or not resolution.strip():
                self._logger.warning("Dispute resolution missing", extra=log_extra)
                raise ActionNotAvailableError(
                    "Resolving a dispute requires a resolution", log_extra
                )
            self._logger.info("Dispatching task action", extra=log_extra)
            return await operation(task.id, resolution)

        self._logger.info("Dispatching task action", extra=log_extra)
        return await operation(task.id)
