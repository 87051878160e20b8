"""Pool-model dispatch over the pricing calculators.

Callers holding a PoolModel use PoolPricer instead of choosing a
calculator variant at each call site.

Usage:
    from amm_pricing import ConstantProduct, WeightedBancor, pool_pricer

    out = pool_pricer.get_amount_out(ConstantProduct(), 10_000, 10**8, 4 * 10**8, fee_bps=30)
    out = pool_pricer.get_amount_out(
        WeightedBancor(400_000, 600_000), 10_000, 10**8, 4 * 10**8, fee_bps=30
    )
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from amm_pricing.amount_in import AmountInCalculator
from amm_pricing.amount_out import AmountOutCalculator
from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.errors import InvalidInput
from amm_pricing.models import ConstantProduct, PoolModel, TradeRequest, TradeResult, WeightedBancor
from amm_pricing.numeric import ONE, ZERO, Number, calculation
from amm_pricing.quote import QuoteCalculator

logger = structlog.get_logger()


def _unknown_model(pool: object) -> InvalidInput:
    return InvalidInput(f"Unsupported pool model: {type(pool).__name__}")


class PoolPricer:
    """Prices trades for any PoolModel.

    Attributes:
        config: Numeric configuration shared by the underlying calculators
    """

    def __init__(self, config: PricingConfig | None = None):
        self.config = config or DEFAULT_PRICING_CONFIG
        self._amount_out = AmountOutCalculator(self.config)
        self._amount_in = AmountInCalculator(self.config)
        self._quote = QuoteCalculator(self.config)

    def get_amount_out(
        self,
        pool: PoolModel,
        amount_in: Number,
        reserve_in: Number,
        reserve_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Output amount for amount_in under the pool's model."""
        if isinstance(pool, ConstantProduct):
            return self._amount_out.constant_product(amount_in, reserve_in, reserve_out, fee_bps)
        if isinstance(pool, WeightedBancor):
            return self._amount_out.weighted_bancor(
                amount_in, reserve_in, pool.weight_in, reserve_out, pool.weight_out, fee_bps
            )
        raise _unknown_model(pool)

    def get_amount_in(
        self,
        pool: PoolModel,
        amount_out: Number,
        reserve_in: Number,
        reserve_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Input amount required for amount_out under the pool's model."""
        if isinstance(pool, ConstantProduct):
            return self._amount_in.constant_product(amount_out, reserve_in, reserve_out, fee_bps)
        if isinstance(pool, WeightedBancor):
            return self._amount_in.weighted_bancor(
                amount_out, reserve_in, pool.weight_in, reserve_out, pool.weight_out, fee_bps
            )
        raise _unknown_model(pool)

    def quote(
        self,
        pool: PoolModel,
        amount_a: Number,
        reserve_a: Number,
        reserve_b: Number,
    ) -> Decimal:
        """Fee-free equivalent of amount_a; side a is the pool's input side."""
        if isinstance(pool, ConstantProduct):
            return self._quote.constant_product(amount_a, reserve_a, reserve_b)
        if isinstance(pool, WeightedBancor):
            return self._quote.weighted_bancor(
                amount_a, reserve_a, pool.weight_in, reserve_b, pool.weight_out
            )
        raise _unknown_model(pool)

    def spot_price(self, pool: PoolModel, reserve_in: Number, reserve_out: Number) -> Decimal:
        """Units of output per unit of input at the current reserves."""
        return self.quote(pool, ONE, reserve_in, reserve_out)

    def price_impact(
        self,
        pool: PoolModel,
        amount_in: Number,
        reserve_in: Number,
        reserve_out: Number,
        fee_bps: int,
    ) -> Decimal:
        """Relative shortfall of the executable output against the spot quote.

        Includes the fee. Returns a value in [0, 1]; 0 for a zero input.
        """
        amount_out = self.get_amount_out(pool, amount_in, reserve_in, reserve_out, fee_bps)
        spot_amount = self.quote(pool, amount_in, reserve_in, reserve_out)
        if spot_amount == 0:
            return ZERO
        with calculation(self.config):
            return max(ZERO, ONE - amount_out / spot_amount)

    def evaluate(self, request: TradeRequest) -> TradeResult:
        """Price the fixed side of request and report both sides."""
        pool = request.pool
        if request.amount_in is not None:
            amount_in = request.amount_in
            amount_out = self.get_amount_out(
                pool, amount_in, request.reserve_in, request.reserve_out, request.fee_bps
            )
        else:
            amount_out = request.amount_out
            amount_in = self.get_amount_in(
                pool, amount_out, request.reserve_in, request.reserve_out, request.fee_bps
            )

        logger.debug(
            "trade_evaluated",
            model=pool.kind,
            exact_input=request.exact_input,
            amount_in=str(amount_in),
            amount_out=str(amount_out),
        )
        return TradeResult(
            amount_in=amount_in,
            amount_out=amount_out,
            model=pool.kind,
            exact_input=request.exact_input,
        )


# Singleton instance
pool_pricer = PoolPricer()
