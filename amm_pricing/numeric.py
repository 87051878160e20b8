"""Shared numeric helpers for the pricing calculators.

All formulas are evaluated in decimal.Decimal under a local context built
from PricingConfig, so the caller's thread-local context is never touched.

Usage pattern:
    from amm_pricing.numeric import calculation, validate_amount, validate_reserve

    def formula(amount, reserve, config):
        amount = validate_amount(amount, "amount")
        reserve = validate_reserve(reserve, "reserve")
        with calculation(config):
            return checked(amount / reserve, config, "result")
"""

from __future__ import annotations

import contextlib
import decimal
from collections.abc import Iterator
from decimal import ROUND_DOWN, Decimal, InvalidOperation

import structlog

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.constants import FEE_DENOMINATOR, MAX_FEE_BPS, MIN_FEE_BPS
from amm_pricing.errors import (
    InvalidFeeError,
    InvalidInput,
    NegativeAmountError,
    NumericDomainError,
    NumericOverflow,
    ZeroReserveError,
    ZeroWeightError,
)

logger = structlog.get_logger()

# Accepted numeric input types
Number = int | float | Decimal | str

ZERO = Decimal(0)
ONE = Decimal(1)
BPS = Decimal(FEE_DENOMINATOR)


def to_decimal(value: Number, name: str) -> Decimal:
    """Convert a numeric argument to Decimal.

    Floats go through str() so that 0.1 means one tenth rather than its
    binary expansion.

    Raises:
        InvalidInput: If value is not a number (bools are rejected too)
        NumericDomainError: If value is NaN or infinite
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as err:
            raise InvalidInput(f"{name} must be a decimal number, got '{value}'") from err
    else:
        raise InvalidInput(f"{name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise NumericDomainError(f"{name} must be finite, got {result}")
    return result


def validate_amount(value: Number, name: str = "amount") -> Decimal:
    """Validate a trade amount (zero allowed).

    Raises:
        NegativeAmountError: If value < 0
    """
    amount = to_decimal(value, name)
    if amount < 0:
        logger.debug("pricing_input_rejected", field=name, value=str(amount))
        raise NegativeAmountError(f"{name} must not be negative, got {amount}")
    return amount


def validate_reserve(value: Number, name: str = "reserve") -> Decimal:
    """Validate a pool reserve.

    Raises:
        ZeroReserveError: If value <= 0
    """
    reserve = to_decimal(value, name)
    if reserve <= 0:
        logger.debug("pricing_input_rejected", field=name, value=str(reserve))
        raise ZeroReserveError(f"{name} must be positive, got {reserve}")
    return reserve


def validate_weight(value: Number, name: str = "weight") -> Decimal:
    """Validate a reserve weight.

    Raises:
        ZeroWeightError: If value <= 0
    """
    weight = to_decimal(value, name)
    if weight <= 0:
        logger.debug("pricing_input_rejected", field=name, value=str(weight))
        raise ZeroWeightError(f"{name} must be positive, got {weight}")
    return weight


def validate_fee(fee_bps: int | Decimal) -> int:
    """Validate a fee in basis points and return it as int.

    Raises:
        InvalidFeeError: If fee is not integral or outside [0, 10000]
    """
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, (int, Decimal)):
        raise InvalidFeeError(f"fee_bps must be an integer, got {type(fee_bps).__name__}")
    if isinstance(fee_bps, Decimal):
        if not fee_bps.is_finite() or fee_bps != fee_bps.to_integral_value():
            raise InvalidFeeError(f"fee_bps must be an integer, got {fee_bps}")
        fee_bps = int(fee_bps)
    if not MIN_FEE_BPS <= fee_bps <= MAX_FEE_BPS:
        logger.debug("pricing_input_rejected", field="fee_bps", value=fee_bps)
        raise InvalidFeeError(
            f"fee_bps must be in [{MIN_FEE_BPS}, {MAX_FEE_BPS}], got {fee_bps}"
        )
    return fee_bps


def fee_multiplier(fee_bps: int) -> Decimal:
    """Share of the trade that reaches the curve, in bps (10000 - fee_bps).

    For 30 bps (0.3%), this returns 9970.
    """
    return BPS - fee_bps


@contextlib.contextmanager
def calculation(config: PricingConfig | None = None) -> Iterator[decimal.Context]:
    """Run a block under the configured decimal context.

    Decimal signals raised inside the block are translated into the
    pricing error taxonomy.

    Raises:
        NumericOverflow: On decimal overflow
        NumericDomainError: On invalid operation or division by zero
    """
    config = config or DEFAULT_PRICING_CONFIG
    try:
        with decimal.localcontext(config.context()) as ctx:
            yield ctx
    except decimal.Overflow as err:
        raise NumericOverflow(f"Decimal overflow: {err}") from err
    except (decimal.DivisionByZero, InvalidOperation) as err:
        raise NumericDomainError(f"Undefined decimal operation: {err}") from err


def checked(value: Decimal, config: PricingConfig | None, what: str) -> Decimal:
    """Return value if its magnitude fits the configured bound.

    Raises:
        NumericOverflow: If abs(value) > config.max_value
    """
    config = config or DEFAULT_PRICING_CONFIG
    if abs(value) > config.max_value:
        raise NumericOverflow(f"{what} exceeds {config.max_value}: {value}")
    return value


def below_reserve(value: Decimal, reserve: Decimal, what: str) -> Decimal:
    """Return an output amount if it is strictly below the reserve it draws on.

    An output that rounds up to the whole reserve means the result is finer
    than the context precision can express.

    Raises:
        NumericDomainError: If value >= reserve
    """
    if value >= reserve:
        logger.warning("output_reaches_reserve", what=what, reserve=str(reserve))
        raise NumericDomainError(
            f"{what} is not representable below reserve {reserve} at this precision"
        )
    return value


def divide(numerator: Decimal, denominator: Decimal, what: str) -> Decimal:
    """Divide, rejecting a zero denominator.

    Raises:
        NumericDomainError: If denominator is zero
    """
    if denominator == 0:
        raise NumericDomainError(f"{what}: division by zero")
    return numerator / denominator


def power(base: Decimal, exponent: Decimal) -> Decimal:
    """Real-valued base ** exponent for a positive base.

    Raises:
        NumericDomainError: If base <= 0
    """
    if base <= 0:
        raise NumericDomainError(f"Power base must be positive, got {base}")
    if base == 1 or exponent == 0:
        return ONE
    return base**exponent


def to_token_amount(
    value: Decimal,
    rounding: str = ROUND_DOWN,
    config: PricingConfig | None = None,
) -> int:
    """Convert a real-valued result to integer token units.

    The default truncates toward zero, matching an unsigned on-chain cast.
    Applied to an amount-in result this keeps the +1 bias: floor(1 + x) >= x.

    Args:
        value: Non-negative calculator result
        rounding: Decimal rounding mode (ROUND_DOWN or ROUND_CEILING in practice)
        config: Bound for the integer result (default: uint256 max)

    Raises:
        NumericDomainError: If value is negative or not finite
        NumericOverflow: If the integer exceeds config.max_value
    """
    if not value.is_finite():
        raise NumericDomainError(f"Cannot convert {value} to token units")
    if value < 0:
        raise NumericDomainError(f"Token amount cannot be negative: {value}")
    amount = int(value.to_integral_value(rounding=rounding))
    config = config or DEFAULT_PRICING_CONFIG
    if amount > config.max_value:
        raise NumericOverflow(f"Token amount exceeds {config.max_value}: {amount}")
    return amount
