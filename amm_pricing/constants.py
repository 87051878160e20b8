"""Pricing constants shared by every pool model.

Fees and weight scalings are expressed in basis points.
"""

# Basis-point denominator (10000 bps = 100%)
FEE_DENOMINATOR = 10_000

# Valid fee range in basis points, inclusive
MIN_FEE_BPS = 0
MAX_FEE_BPS = FEE_DENOMINATOR

# Maximum uint256 value, default bound for intermediates and results
UINT256_MAX = 2**256 - 1

# 78 digits of precision, enough for uint256 values (up to ~10^77)
DEFAULT_PRECISION = 78

# Environment variables read by PricingConfig.from_env()
ENV_PRECISION = "AMM_PRICING_PRECISION"
ENV_MAX_VALUE = "AMM_PRICING_MAX_VALUE"
