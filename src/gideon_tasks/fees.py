"""Fee calculation using integer arithmetic only.

Two separate fees, never conflated:

- Gideon fee: exactly 1% of the task price, rounded down.
- Stripe fee: 2.9% + 30 cents, solved in reverse so that after Stripe takes
  its cut the platform still holds ``task_price + gideon_fee``.

The requester pays ``task_price + gideon_fee + stripe_fee``.
The doer receives ``task_price - gideon_fee``.

These numbers are for display. The task service computes the real charge
when payment is taken.
"""

from __future__ import annotations

from gideon_tasks.schemas import FeeBreakdown

BPS_DENOMINATOR = 10_000
GIDEON_FEE_BPS = 100  # 1%
STRIPE_RATE_BPS = 290  # 2.9%
STRIPE_FIXED_CENTS = 30
MIN_TASK_PRICE_CENTS = 500

# Share of a charge left after Stripe's percentage, in basis points (9710).
_STRIPE_NET_BPS = BPS_DENOMINATOR - STRIPE_RATE_BPS


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def calculate_fees(task_price_cents: int) -> FeeBreakdown:
    """
    Calculate the full fee breakdown for a task price.

    gideon_fee_cents    = task_price_cents * 100 // 10000
    doer_payout_cents   = task_price_cents - gideon_fee_cents
    subtotal            = task_price_cents + gideon_fee_cents
    total_charged_cents = ceil((subtotal + 30) * 10000 / 9710)
    stripe_fee_cents    = total_charged_cents - subtotal

    Defined for non-negative integers. Other input is not validated here;
    use trust.check_task_price() before showing a breakdown.
    """
    price = task_price_cents

    gideon_fee = price * GIDEON_FEE_BPS // BPS_DENOMINATOR
    doer_payout = price - gideon_fee
    subtotal = price + gideon_fee

    total_charged = _ceil_div((subtotal + STRIPE_FIXED_CENTS) * BPS_DENOMINATOR, _STRIPE_NET_BPS)
    stripe_fee = total_charged - subtotal

    return FeeBreakdown(
        task_price_cents=price,
        gideon_fee_cents=gideon_fee,
        doer_payout_cents=doer_payout,
        stripe_fee_cents=stripe_fee,
        total_charged_cents=total_charged,
    )


def format_cents(cents: int) -> str:
    """Format cents as a dollar string: 10000 -> "$100.00"."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}${dollars}.{remainder:02d}"
