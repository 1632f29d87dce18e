"""Trust-level limits, hard-coded to match the backend."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from gideon_tasks.fees import MIN_TASK_PRICE_CENTS, format_cents

if TYPE_CHECKING:
    from collections.abc import Mapping

MAX_TASK_VALUE_CENTS: Mapping[int, int] = MappingProxyType(
    {0: 10_000, 1: 50_000, 2: 200_000, 3: 500_000}
)

MAX_CONCURRENT_DOER: Mapping[int, int] = MappingProxyType({0: 2, 1: 5, 2: 10, 3: 20})

# Level 0 cannot post at all.
MAX_ACTIVE_POSTED: Mapping[int, int | None] = MappingProxyType({0: None, 1: 2, 2: 10, 3: 25})

TRUST_LEVEL_NAMES: Mapping[int, str] = MappingProxyType(
    {0: "Verified", 1: "Established", 2: "Trusted", 3: "Pillar"}
)


def can_post_tasks(level: int) -> bool:
    return level >= 1


def can_apply_for_tasks(level: int) -> bool:
    return level >= 0


def max_task_value_cents(level: int) -> int:
    return MAX_TASK_VALUE_CENTS.get(level, 0)


def max_concurrent_doer(level: int) -> int:
    return MAX_CONCURRENT_DOER.get(level, 0)


def max_active_posted(level: int) -> int | None:
    return MAX_ACTIVE_POSTED.get(level)


def trust_level_name(level: int) -> str:
    return TRUST_LEVEL_NAMES.get(level, "Unknown")


def check_task_price(price_cents: object, trust_level: int | None = None) -> list[str]:
    """
    Return the reasons a price cannot be submitted; empty means it can.

    The trust-level ceiling is only checked when *trust_level* is given.
    """
    if not isinstance(price_cents, int) or isinstance(price_cents, bool):
        return ["Task price must be a whole number of cents"]

    problems: list[str] = []
    if price_cents < MIN_TASK_PRICE_CENTS:
        problems.append(f"Minimum task price is {format_cents(MIN_TASK_PRICE_CENTS)}")

    if trust_level is not None:
        ceiling = max_task_value_cents(trust_level)
        if price_cents > ceiling:
            problems.append(
                f"Maximum task price for trust level {trust_level} "
                f"({trust_level_name(trust_level)}) is {format_cents(ceiling)}"
            )
    return problems
