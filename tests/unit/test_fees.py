"""Unit tests for fee calculation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gideon_tasks.fees import MIN_TASK_PRICE_CENTS, calculate_fees, format_cents
from gideon_tasks.schemas import FeeBreakdown


@pytest.mark.unit
class TestCalculateFees:
    """Known price points."""

    def test_minimum_price_5_dollars(self) -> None:
        b = calculate_fees(500)
        assert b.task_price_cents == 500
        assert b.gideon_fee_cents == 5
        assert b.doer_payout_cents == 495
        assert b.subtotal_cents == 505
        assert b.total_charged_cents == 551
        assert b.stripe_fee_cents == 46

    def test_100_dollar_task(self) -> None:
        b = calculate_fees(10_000)
        assert b.gideon_fee_cents == 100
        assert b.doer_payout_cents == 9_900
        assert b.subtotal_cents == 10_100
        assert b.total_charged_cents == 10_433
        assert b.stripe_fee_cents == 333

    def test_zero_price(self) -> None:
        b = calculate_fees(0)
        assert b.task_price_cents == 0
        assert b.gideon_fee_cents == 0
        assert b.doer_payout_cents == 0
        # ceil(30 * 10000 / 9710) = ceil(30.89...) = 31
        assert b.total_charged_cents == 31
        assert b.stripe_fee_cents == 31

    def test_gideon_fee_rounds_down(self) -> None:
        assert calculate_fees(777).gideon_fee_cents == 7
        assert calculate_fees(199).gideon_fee_cents == 1
        assert calculate_fees(9_999).gideon_fee_cents == 99
        assert calculate_fees(99).gideon_fee_cents == 0

    def test_total_rounds_up(self) -> None:
        # (505 + 30) * 10000 / 9710 = 550.97...
        assert calculate_fees(500).total_charged_cents == 551

    def test_minimum_constant(self) -> None:
        assert MIN_TASK_PRICE_CENTS == 500

    def test_large_price_stays_exact(self) -> None:
        price = 10**15 + 7
        b = calculate_fees(price)
        assert b.gideon_fee_cents == price // 100
        assert b.total_charged_cents - b.stripe_fee_cents - b.gideon_fee_cents == price


@pytest.mark.unit
class TestFeeInvariants:
    """Reconciliation holds over a wide price range."""

    def test_invariants_across_price_range(self) -> None:
        for price in range(0, 500_001, 97):
            b = calculate_fees(price)
            assert b.gideon_fee_cents + b.doer_payout_cents == price, price
            assert b.total_charged_cents - b.stripe_fee_cents - b.gideon_fee_cents == price, price
            assert b.total_charged_cents >= b.subtotal_cents, price
            assert b.gideon_fee_cents == price // 100, price
            assert b.stripe_fee_cents >= 0, price

    def test_stripe_net_covers_subtotal(self) -> None:
        for price in (500, 501, 777, 1_234, 10_000, 123_457):
            b = calculate_fees(price)
            # Stripe keeps 2.9% + 30c of the total; the rest must cover the subtotal.
            net_bps = b.total_charged_cents * 9_710 - 30 * 10_000
            assert net_bps >= b.subtotal_cents * 10_000
            # One cent less would leave the platform short.
            short_bps = (b.total_charged_cents - 1) * 9_710 - 30 * 10_000
            assert short_bps < b.subtotal_cents * 10_000

    def test_idempotent(self) -> None:
        first = calculate_fees(4_321)
        second = calculate_fees(4_321)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.unit
class TestFeeBreakdownModel:
    def test_frozen(self) -> None:
        b = calculate_fees(500)
        with pytest.raises(ValidationError):
            b.gideon_fee_cents = 0  # type: ignore[misc]

    def test_dump_has_five_fields(self) -> None:
        assert calculate_fees(500).model_dump() == {
            "task_price_cents": 500,
            "gideon_fee_cents": 5,
            "doer_payout_cents": 495,
            "stripe_fee_cents": 46,
            "total_charged_cents": 551,
        }

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            FeeBreakdown(
                task_price_cents=1,
                gideon_fee_cents=0,
                doer_payout_cents=1,
                stripe_fee_cents=30,
                total_charged_cents=31,
                tip_cents=5,
            )


@pytest.mark.unit
class TestFormatCents:
    @pytest.mark.parametrize(
        ("cents", "expected"),
        [
            (10_000, "$100.00"),
            (551, "$5.51"),
            (5, "$0.05"),
            (0, "$0.00"),
            (123_456_789, "$1234567.89"),
            (-150, "-$1.50"),
        ],
    )
    def test_format(self, cents: int, expected: str) -> None:
        assert format_cents(cents) == expected
