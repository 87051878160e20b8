"""Pricing error classes.

Every failure raised by a calculator derives from PricingError.
"""


class PricingError(Exception):
    """Base error for AMM pricing operations."""

    pass


class InvalidInput(PricingError, ValueError):
    """An argument is outside the domain of the pricing formulas."""

    pass


class ZeroReserveError(InvalidInput):
    """Reserve must be positive."""

    pass


class ZeroWeightError(InvalidInput):
    """Reserve weight must be positive."""

    pass


class InvalidFeeError(InvalidInput):
    """Fee must be an integer number of basis points in [0, 10000]."""

    pass


class NegativeAmountError(InvalidInput):
    """Trade amount must not be negative."""

    pass


class AmountExceedsReserve(PricingError):
    """Requested output is not strictly below the output reserve."""

    pass


class NumericError(PricingError, ArithmeticError):
    """Base error for failures of the numeric representation."""

    pass


class NumericOverflow(NumericError):
    """An intermediate or result exceeds the configured maximum value."""

    pass


class NumericDomainError(NumericError):
    """An operation is undefined for its operands (e.g. non-positive power base)."""

    pass
