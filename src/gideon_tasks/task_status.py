"""Task lifecycle state machine and role-gated action table.

The transition graph mirrors the task service's own state machine. Everything
here is advisory: the client uses it to decide which actions to offer, and the
task service re-checks every transition when the write request arrives. Do not
treat a True from can_transition() as permission to skip that round trip.

All query functions are total. A status or role outside the known set yields
no transitions, not terminal, and no actions instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from gideon_tasks.exceptions import InvalidTransitionError

if TYPE_CHECKING:
    from collections.abc import Mapping


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    COMPLETED = "completed"
    DISPUTED = "disputed"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    REJECTED = "rejected"


class Role(StrEnum):
    """Viewer's relationship to a task."""

    REQUESTER = "requester"
    DOER = "doer"
    ADMIN = "admin"


class ActionSeverity(StrEnum):
    """How careful the UI should make the user before firing an action."""

    NORMAL = "normal"
    CAUTION = "caution"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class TaskAction:
    """One button's worth of metadata: what to show and which status it requests."""

    label: str
    target_status: TaskStatus
    severity: ActionSeverity


_S = TaskStatus

# Legal transitions: current status -> set of allowed next statuses
TRANSITIONS: Mapping[TaskStatus, frozenset[TaskStatus]] = MappingProxyType(
    {
        _S.DRAFT: frozenset({_S.PENDING_REVIEW}),
        _S.PENDING_REVIEW: frozenset({_S.PUBLISHED, _S.REJECTED}),
        _S.PUBLISHED: frozenset({_S.ASSIGNED, _S.CANCELLED, _S.EXPIRED}),
        _S.ASSIGNED: frozenset({_S.IN_PROGRESS, _S.CANCELLED}),
        _S.IN_PROGRESS: frozenset({_S.SUBMITTED}),
        _S.SUBMITTED: frozenset({_S.COMPLETED, _S.DISPUTED}),
        _S.DISPUTED: frozenset({_S.RESOLVED}),
        _S.COMPLETED: frozenset(),
        _S.RESOLVED: frozenset(),
        _S.CANCELLED: frozenset(),
        _S.EXPIRED: frozenset(),
        _S.REJECTED: frozenset(),
    }
)

INITIAL_STATUS = TaskStatus.DRAFT
ALL_STATUSES: frozenset[TaskStatus] = frozenset(TaskStatus)
TERMINAL_STATUSES: frozenset[TaskStatus] = frozenset(
    {_S.COMPLETED, _S.RESOLVED, _S.CANCELLED, _S.EXPIRED, _S.REJECTED}
)

_NORMAL = ActionSeverity.NORMAL
_CAUTION = ActionSeverity.CAUTION
_DESTRUCTIVE = ActionSeverity.DESTRUCTIVE

# (status, role) -> ordered actions. Pairs not listed offer nothing.
ACTION_POLICY: Mapping[tuple[TaskStatus, Role], tuple[TaskAction, ...]] = MappingProxyType(
    {
        (_S.DRAFT, Role.REQUESTER): (TaskAction("Publish", _S.PENDING_REVIEW, _NORMAL),),
        (_S.PENDING_REVIEW, Role.ADMIN): (
            TaskAction("Approve", _S.PUBLISHED, _NORMAL),
            TaskAction("Reject", _S.REJECTED, _DESTRUCTIVE),
        ),
        (_S.PUBLISHED, Role.REQUESTER): (TaskAction("Cancel", _S.CANCELLED, _DESTRUCTIVE),),
        (_S.ASSIGNED, Role.DOER): (TaskAction("Start Work", _S.IN_PROGRESS, _NORMAL),),
        (_S.ASSIGNED, Role.REQUESTER): (TaskAction("Cancel", _S.CANCELLED, _DESTRUCTIVE),),
        (_S.IN_PROGRESS, Role.DOER): (TaskAction("Submit", _S.SUBMITTED, _NORMAL),),
        (_S.SUBMITTED, Role.REQUESTER): (
            TaskAction("Approve", _S.COMPLETED, _NORMAL),
            TaskAction("Dispute", _S.DISPUTED, _CAUTION),
        ),
        (_S.DISPUTED, Role.ADMIN): (TaskAction("Resolve", _S.RESOLVED, _NORMAL),),
    }
)


def parse_status(value: object) -> TaskStatus | None:
    """Return the TaskStatus for *value*, or None if it is not one of the 12 statuses."""
    if not isinstance(value, str):
        return None
    try:
        return TaskStatus(value)
    except ValueError:
        return None


def parse_role(value: object) -> Role | None:
    """Return the Role for *value*, or None if it is not a known role."""
    if not isinstance(value, str):
        return None
    try:
        return Role(value)
    except ValueError:
        return None


def allowed_transitions(status: object) -> frozenset[TaskStatus]:
    """Return the statuses reachable in one step from *status*."""
    parsed = parse_status(status)
    if parsed is None:
        return frozenset()
    return TRANSITIONS[parsed]


def can_transition(current: object, target: object) -> bool:
    """Return True if *current -> target* is a legal transition."""
    parsed_target = parse_status(target)
    if parsed_target is None:
        return False
    return parsed_target in allowed_transitions(current)


def is_terminal(status: object) -> bool:
    """Return True if *status* is one of the five terminal statuses."""
    parsed = parse_status(status)
    return parsed is not None and parsed in TERMINAL_STATUSES


def assert_transition(current: object, target: object) -> TaskStatus:
    """Return the target status, or raise InvalidTransitionError if the move is illegal."""
    if not can_transition(current, target):
        allowed = sorted(allowed_transitions(current))
        raise InvalidTransitionError(
            f"Cannot transition from {current!r} to {target!r}. "
            f"Allowed from {current!r}: {allowed}",
            {"from": str(current), "to": str(target), "allowed": [str(s) for s in allowed]},
        )
    return TaskStatus(target)  # type: ignore[arg-type]


def available_actions(status: object, role: object) -> tuple[TaskAction, ...]:
    """Return the actions *role* may take on a task currently in *status*."""
    parsed_status = parse_status(status)
    parsed_role = parse_role(role)
    if parsed_status is None or parsed_role is None:
        return ()
    return ACTION_POLICY.get((parsed_status, parsed_role), ())


def reachable_from(status: object) -> frozenset[TaskStatus]:
    """Return every status reachable from *status* in one or more steps."""
    seen: set[TaskStatus] = set()
    frontier = list(allowed_transitions(status))
    while frontier:
        current = frontier.pop()
        if current in seen:
            continue
        seen.add(current)
        frontier.extend(TRANSITIONS[current])
    return frozenset(seen)


def status_label(status: object) -> str:
    """Human-readable status: ``pending_review`` -> ``Pending Review``."""
    return " ".join(word[:1].upper() + word[1:] for word in str(status).split("_"))
