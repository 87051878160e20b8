"""Numeric configuration for the pricing calculators."""

from __future__ import annotations

import decimal
import os
from dataclasses import dataclass

from amm_pricing.constants import (
    DEFAULT_PRECISION,
    ENV_MAX_VALUE,
    ENV_PRECISION,
    UINT256_MAX,
)


@dataclass(frozen=True)
class PricingConfig:
    """Centralized configuration for pricing arithmetic.

    Attributes:
        precision: Significant decimal digits used for every calculation
        max_value: Largest magnitude allowed for intermediates and results
            (default: uint256 max). Exceeding it raises NumericOverflow.
        rounding: Decimal rounding mode for the calculation context
    """

    precision: int = DEFAULT_PRECISION
    max_value: int = UINT256_MAX
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.max_value <= 0:
            raise ValueError(f"max_value must be positive, got {self.max_value}")

    def context(self) -> decimal.Context:
        """Build a fresh decimal context for one calculation."""
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[decimal.Overflow, decimal.InvalidOperation, decimal.DivisionByZero],
        )

    @classmethod
    def from_env(cls) -> PricingConfig:
        """Create a config from environment variables with sensible defaults.

        - AMM_PRICING_PRECISION: significant digits (default: 78)
        - AMM_PRICING_MAX_VALUE: overflow bound (default: 2^256 - 1)

        Raises:
            ValueError: If a variable is set but not a positive integer
        """
        precision = _int_from_env(ENV_PRECISION, DEFAULT_PRECISION)
        max_value = _int_from_env(ENV_MAX_VALUE, UINT256_MAX)
        return cls(precision=precision, max_value=max_value)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
