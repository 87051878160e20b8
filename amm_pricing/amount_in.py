"""Exact-output pricing: input amount required for a desired output.

Constant product:  in = 1 + R_in * out * 10000 / ((R_out - out) * (10000 - fee_bps))
Weighted (Bancor): in = 1 + R_in * out * 10000 / ((R_out - out) * (10000 - fee_bps) * W_in / W_out)

The leading 1 biases the result upward so that feeding it back into the
exact-input formula never under-delivers after truncation to token units.
The weighted variant is an approximation, not the exact inverse of the
weighted exact-input formula.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.constants import MAX_FEE_BPS
from amm_pricing.errors import AmountExceedsReserve, NumericDomainError
from amm_pricing.numeric import (
    BPS,
    ONE,
    Number,
    calculation,
    checked,
    divide,
    fee_multiplier,
    validate_amount,
    validate_fee,
    validate_reserve,
    validate_weight,
)

logger = structlog.get_logger()


def _check_available(amount_out: Decimal, reserve_out: Decimal) -> None:
    """Require amount_out < reserve_out.

    Raises:
        AmountExceedsReserve: If the output reserve cannot cover amount_out
    """
    if amount_out >= reserve_out:
        logger.warning(
            "amount_exceeds_reserve",
            amount_out=str(amount_out),
            reserve_out=str(reserve_out),
        )
        raise AmountExceedsReserve(
            f"amount_out {amount_out} must be less than reserve_out {reserve_out}"
        )


def _check_fee_leaves_input(fee_bps: int) -> None:
    if fee_bps == MAX_FEE_BPS:
        raise NumericDomainError("fee_bps of 10000 leaves no input to reach the pool")


class AmountInCalculator:
    """Required input amount for a desired output amount, per pool model.

    Attributes:
        config: Numeric configuration (precision, overflow bound)
    """

    def __init__(self, config: PricingConfig | None = None):
        self.config = config or DEFAULT_PRICING_CONFIG

    def constant_product(
        self,
        amount_out: Number,
        reserve_in: Number,
        reserve_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Calculate required input using the constant product formula.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Fee in basis points (30 = 0.3%)

        Returns:
            Required input amount (including the +1 bias)

        Raises:
            InvalidInput: On a negative amount, non-positive reserve or bad fee
            AmountExceedsReserve: If amount_out >= reserve_out
            NumericDomainError: If fee_bps is 10000
            NumericOverflow: If an intermediate exceeds the configured bound
        """
        amount_out = validate_amount(amount_out, "amount_out")
        reserve_in = validate_reserve(reserve_in, "reserve_in")
        reserve_out = validate_reserve(reserve_out, "reserve_out")
        fee_bps = validate_fee(fee_bps)
        _check_available(amount_out, reserve_out)
        _check_fee_leaves_input(fee_bps)

        with calculation(self.config):
            numerator = checked(reserve_in * amount_out * BPS, self.config, "numerator")
            denominator = checked(
                (reserve_out - amount_out) * fee_multiplier(fee_bps), self.config, "denominator"
            )
            amount_in = ONE + divide(numerator, denominator, "amount_in")
            return checked(amount_in, self.config, "amount_in")

    def weighted_bancor(
        self,
        amount_out: Number,
        reserve_in: Number,
        weight_in: Number,
        reserve_out: Number,
        weight_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Calculate required input using the weighted (Bancor) approximation.

        Round-trip accuracy against AmountOutCalculator.weighted_bancor is
        empirical; for unequal weights expect a small relative deviation.

        Raises:
            InvalidInput: On a negative amount, non-positive reserve/weight or bad fee
            AmountExceedsReserve: If amount_out >= reserve_out
            NumericDomainError: If fee_bps is 10000
            NumericOverflow: If an intermediate exceeds the configured bound
        """
        amount_out = validate_amount(amount_out, "amount_out")
        reserve_in = validate_reserve(reserve_in, "reserve_in")
        weight_in = validate_weight(weight_in, "weight_in")
        reserve_out = validate_reserve(reserve_out, "reserve_out")
        weight_out = validate_weight(weight_out, "weight_out")
        fee_bps = validate_fee(fee_bps)
        _check_available(amount_out, reserve_out)
        _check_fee_leaves_input(fee_bps)

        with calculation(self.config):
            weight_ratio = weight_in / weight_out
            numerator = checked(reserve_in * amount_out * BPS, self.config, "numerator")
            denominator = checked(
                (reserve_out - amount_out) * fee_multiplier(fee_bps) * weight_ratio,
                self.config,
                "denominator",
            )
            amount_in = ONE + divide(numerator, denominator, "amount_in")
            return checked(amount_in, self.config, "amount_in")


# Singleton instance
amount_in_calculator = AmountInCalculator()
