#!/usr/bin/env python3
"""Print the reference pricing computations for both pool models.

Run with: python scripts/run_examples.py
"""

import sys
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from amm_pricing import (
    ConstantProduct,
    TradeRequest,
    WeightedBancor,
    pool_pricer,
    to_token_amount,
)

FEE_BPS = 30
RESERVE_IN = 100_000_000
RESERVE_OUT = 400_000_000


def main() -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ]
    )

    constant_product = ConstantProduct()
    weighted = WeightedBancor(400_000, 600_000)
    balanced = WeightedBancor(500_000, 500_000)

    print("Amount out for 10000 in:")
    for name, pool in (("uniswap", constant_product), ("bancor", weighted)):
        amount_out = pool_pricer.get_amount_out(pool, 10_000, RESERVE_IN, RESERVE_OUT, FEE_BPS)
        print(f"  {name}: {amount_out:.6f} ({to_token_amount(amount_out)} units)")

    print("\nAmount in for 39876 out:")
    for name, pool in (("uniswap", constant_product), ("bancor", balanced)):
        amount_in = pool_pricer.get_amount_in(pool, 39_876, RESERVE_IN, RESERVE_OUT, FEE_BPS)
        print(f"  {name}: {amount_in:.6f} ({to_token_amount(amount_in)} units)")

    print("\nQuote for 10000:")
    for name, pool in (("uniswap", constant_product), ("bancor", balanced)):
        amount_b = pool_pricer.quote(pool, 10_000, RESERVE_IN, RESERVE_OUT)
        print(f"  {name}: {amount_b}")

    print("\nWeighted round trip:")
    sold = pool_pricer.evaluate(
        TradeRequest(
            pool=weighted,
            reserve_in=RESERVE_IN,
            reserve_out=RESERVE_OUT,
            fee_bps=FEE_BPS,
            amount_in=10_000,
        )
    )
    bought = pool_pricer.evaluate(
        TradeRequest(
            pool=weighted,
            reserve_in=RESERVE_IN,
            reserve_out=RESERVE_OUT,
            fee_bps=FEE_BPS,
            amount_out=sold.amount_out,
        )
    )
    print(f"  10000 in -> {sold.amount_out:.6f} out -> {bought.amount_in:.6f} in")


if __name__ == "__main__":
    main()
