"""Pydantic models shared by the fee, trust and action modules."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeeBreakdown(BaseModel):
    """Fee split for one task price, all amounts in cents."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    task_price_cents: int
    gideon_fee_cents: int
    doer_payout_cents: int
    stripe_fee_cents: int
    total_charged_cents: int

    @property
    def subtotal_cents(self) -> int:
        """What the requester owes before payment processing."""
        return self.task_price_cents + self.gideon_fee_cents


class TaskSnapshot(BaseModel):
    """
    The fields of a fetched task that role and action logic reads.

    ``status`` stays a plain string so a status the client does not know yet
    still parses; the engine treats it as offering nothing.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
    id: str
    requester_id: str
    assigned_doer_id: str | None = None
    status: str
    price_cents: int
