"""AMM pricing formulas for constant-product and weighted (Bancor) pools."""

from amm_pricing.amount_in import AmountInCalculator, amount_in_calculator
from amm_pricing.amount_out import AmountOutCalculator, amount_out_calculator
from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.constants import FEE_DENOMINATOR, MAX_FEE_BPS, MIN_FEE_BPS, UINT256_MAX
from amm_pricing.errors import (
    AmountExceedsReserve,
    InvalidFeeError,
    InvalidInput,
    NegativeAmountError,
    NumericDomainError,
    NumericError,
    NumericOverflow,
    PricingError,
    ZeroReserveError,
    ZeroWeightError,
)
from amm_pricing.models import (
    ConstantProduct,
    PoolModel,
    TradeRequest,
    TradeResult,
    WeightedBancor,
)
from amm_pricing.numeric import to_token_amount
from amm_pricing.pricing import PoolPricer, pool_pricer
from amm_pricing.quote import QuoteCalculator, quote_calculator

__version__ = "0.1.0"
__all__ = [
    # Calculators
    "AmountOutCalculator",
    "AmountInCalculator",
    "QuoteCalculator",
    "amount_out_calculator",
    "amount_in_calculator",
    "quote_calculator",
    # Pool models and dispatch
    "ConstantProduct",
    "WeightedBancor",
    "PoolModel",
    "TradeRequest",
    "TradeResult",
    "PoolPricer",
    "pool_pricer",
    # Rounding
    "to_token_amount",
    # Config
    "PricingConfig",
    "DEFAULT_PRICING_CONFIG",
    # Constants
    "FEE_DENOMINATOR",
    "MIN_FEE_BPS",
    "MAX_FEE_BPS",
    "UINT256_MAX",
    # Errors
    "PricingError",
    "InvalidInput",
    "ZeroReserveError",
    "ZeroWeightError",
    "InvalidFeeError",
    "NegativeAmountError",
    "AmountExceedsReserve",
    "NumericError",
    "NumericOverflow",
    "NumericDomainError",
    "__version__",
]
