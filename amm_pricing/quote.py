"""Fee-free, impact-free quotes at the current spot ratio.

Quotes are for display and estimation, not execution.
"""

from __future__ import annotations

from decimal import Decimal

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.numeric import (
    BPS,
    Number,
    calculation,
    checked,
    validate_amount,
    validate_reserve,
    validate_weight,
)


class QuoteCalculator:
    """Equivalent amount of the other asset at the spot ratio."""

    def __init__(self, config: PricingConfig | None = None):
        self.config = config or DEFAULT_PRICING_CONFIG

    def constant_product(
        self,
        amount_a: Number,
        reserve_a: Number,
        reserve_b: Number,
    ) -> Decimal:
        """amount_a * reserve_b / reserve_a."""
        amount_a = validate_amount(amount_a, "amount_a")
        reserve_a = validate_reserve(reserve_a, "reserve_a")
        reserve_b = validate_reserve(reserve_b, "reserve_b")

        with calculation(self.config):
            numerator = checked(amount_a * reserve_b, self.config, "numerator")
            return numerator / reserve_a

    def weighted_bancor(
        self,
        amount_a: Number,
        reserve_a: Number,
        weight_a: Number,
        reserve_b: Number,
        weight_b: Number,
    ) -> Decimal:
        """Weighted spot quote.

        Formula: amount_a * (reserve_b * 10000 / weight_b) / (reserve_a * 10000 / weight_a)

        Evaluated as one division of two products, so equal reserves and
        weights return amount_a exactly.
        """
        amount_a = validate_amount(amount_a, "amount_a")
        reserve_a = validate_reserve(reserve_a, "reserve_a")
        weight_a = validate_weight(weight_a, "weight_a")
        reserve_b = validate_reserve(reserve_b, "reserve_b")
        weight_b = validate_weight(weight_b, "weight_b")

        with calculation(self.config):
            numerator = checked(amount_a * reserve_b * BPS * weight_a, self.config, "numerator")
            denominator = checked(reserve_a * BPS * weight_b, self.config, "denominator")
            return numerator / denominator


# Singleton instance
quote_calculator = QuoteCalculator()
