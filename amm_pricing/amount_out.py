"""Exact-input pricing: output amount obtainable for a given input.

Constant product:  out = in_net * R_out / (R_in * 10000 + in_net)
Weighted (Bancor): out = R_out * (1 - (R_in * 10000 / (R_in * 10000 + in_net)) ^ (W_in / W_out))

where in_net = in * (10000 - fee_bps).
"""

from __future__ import annotations

from decimal import Decimal

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.numeric import (
    BPS,
    ONE,
    Number,
    below_reserve,
    calculation,
    checked,
    fee_multiplier,
    power,
    validate_amount,
    validate_fee,
    validate_reserve,
    validate_weight,
)


class AmountOutCalculator:
    """Output amount for a given input amount, per pool model.

    Attributes:
        config: Numeric configuration (precision, overflow bound)
    """

    def __init__(self, config: PricingConfig | None = None):
        self.config = config or DEFAULT_PRICING_CONFIG

    def constant_product(
        self,
        amount_in: Number,
        reserve_in: Number,
        reserve_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Calculate output amount using the constant product formula.

        Args:
            amount_in: Input token amount (zero allowed)
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Fee in basis points (30 = 0.3%)

        Returns:
            Output amount, always strictly below reserve_out; 0 for zero input

        Raises:
            InvalidInput: On a negative amount, non-positive reserve or bad fee
            NumericOverflow: If an intermediate exceeds the configured bound
            NumericDomainError: If the result is too close to reserve_out to represent
        """
        amount_in = validate_amount(amount_in, "amount_in")
        reserve_in = validate_reserve(reserve_in, "reserve_in")
        reserve_out = validate_reserve(reserve_out, "reserve_out")
        fee_bps = validate_fee(fee_bps)

        with calculation(self.config):
            amount_in_net = checked(
                amount_in * fee_multiplier(fee_bps), self.config, "amount_in_net"
            )
            numerator = checked(amount_in_net * reserve_out, self.config, "numerator")
            denominator = checked(reserve_in * BPS + amount_in_net, self.config, "denominator")
            return below_reserve(numerator / denominator, reserve_out, "amount_out")

    def weighted_bancor(
        self,
        amount_in: Number,
        reserve_in: Number,
        weight_in: Number,
        reserve_out: Number,
        weight_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Calculate output amount using the weighted (Bancor) formula.

        With weight_in == weight_out this is numerically the constant
        product result.

        Args:
            amount_in: Input token amount (zero allowed)
            reserve_in: Reserve of input token in pool
            weight_in: Weight of input reserve
            reserve_out: Reserve of output token in pool
            weight_out: Weight of output reserve
            fee_bps: Fee in basis points

        Returns:
            Output amount in [0, reserve_out)

        Raises:
            InvalidInput: On a negative amount, non-positive reserve/weight or bad fee
            NumericOverflow: If an intermediate exceeds the configured bound
            NumericDomainError: If the power base is not positive, or the result
                is too close to reserve_out to represent
        """
        amount_in = validate_amount(amount_in, "amount_in")
        reserve_in = validate_reserve(reserve_in, "reserve_in")
        weight_in = validate_weight(weight_in, "weight_in")
        reserve_out = validate_reserve(reserve_out, "reserve_out")
        weight_out = validate_weight(weight_out, "weight_out")
        fee_bps = validate_fee(fee_bps)

        with calculation(self.config):
            weight_ratio = weight_in / weight_out
            amount_in_net = checked(
                amount_in * fee_multiplier(fee_bps), self.config, "amount_in_net"
            )
            scaled_reserve = checked(reserve_in * BPS, self.config, "scaled_reserve_in")
            denominator = checked(scaled_reserve + amount_in_net, self.config, "denominator")

            # ratio is in (0, 1]
            ratio = scaled_reserve / denominator
            result = reserve_out * (ONE - power(ratio, weight_ratio))
            return below_reserve(result, reserve_out, "amount_out")


# Singleton instance
amount_out_calculator = AmountOutCalculator()
