"""Tests for shared numeric helpers."""

import decimal
from decimal import ROUND_CEILING, Decimal

import pytest

from amm_pricing import (
    InvalidFeeError,
    InvalidInput,
    NumericDomainError,
    NumericOverflow,
    PricingConfig,
    to_token_amount,
)
from amm_pricing.numeric import (
    below_reserve,
    calculation,
    checked,
    divide,
    fee_multiplier,
    power,
    to_decimal,
    validate_amount,
    validate_fee,
    validate_reserve,
    validate_weight,
)


class TestToDecimal:
    """Tests for numeric input conversion."""

    def test_int(self):
        """Ints convert exactly."""
        assert to_decimal(10**40, "x") == Decimal(10**40)

    def test_float_uses_shortest_repr(self):
        """0.1 means one tenth, not its binary expansion."""
        assert to_decimal(0.1, "x") == Decimal("0.1")

    def test_str(self):
        """Decimal strings are parsed."""
        assert to_decimal(" 12.5 ", "x") == Decimal("12.5")

    def test_decimal_passthrough(self):
        """Decimals are returned unchanged."""
        value = Decimal("3.14")
        assert to_decimal(value, "x") is value

    @pytest.mark.parametrize("value", [True, False, None, [1], "abc", object()])
    def test_rejects_non_numbers(self, value):
        """Bools, None and other types are InvalidInput."""
        with pytest.raises(InvalidInput):
            to_decimal(value, "x")

    @pytest.mark.parametrize("value", [float("inf"), float("nan"), Decimal("NaN"), "Infinity"])
    def test_rejects_non_finite(self, value):
        """NaN and infinities are outside the numeric domain."""
        with pytest.raises(NumericDomainError):
            to_decimal(value, "x")


class TestValidators:
    """Tests for reserve, weight, amount and fee validation."""

    def test_amount_zero_allowed(self):
        """Zero amounts are valid."""
        assert validate_amount(0) == 0

    def test_amount_negative_rejected(self):
        """Negative amounts are InvalidInput."""
        with pytest.raises(InvalidInput):
            validate_amount(-1)

    @pytest.mark.parametrize("validator", [validate_reserve, validate_weight])
    def test_positive_required(self, validator):
        """Reserves and weights must be strictly positive."""
        assert validator(Decimal("0.001")) == Decimal("0.001")
        with pytest.raises(InvalidInput):
            validator(0)

    def test_error_message_names_field(self):
        """Errors name the offending argument."""
        with pytest.raises(InvalidInput, match="reserve_out"):
            validate_reserve(0, "reserve_out")

    @pytest.mark.parametrize("fee_bps", [0, 30, 10_000, Decimal(25)])
    def test_fee_valid(self, fee_bps):
        """Integral fees in range are returned as int."""
        result = validate_fee(fee_bps)
        assert result == fee_bps
        assert isinstance(result, int)

    @pytest.mark.parametrize("fee_bps", [-1, 10_001, Decimal("30.5"), 30.0, True, None])
    def test_fee_invalid(self, fee_bps):
        """Fractional, out-of-range or non-integer fees are rejected."""
        with pytest.raises(InvalidFeeError):
            validate_fee(fee_bps)

    def test_fee_multiplier(self):
        """30 bps leaves 9970 of 10000."""
        assert fee_multiplier(30) == 9970


class TestCalculationContext:
    """Tests for the local decimal context."""

    def test_uses_configured_precision(self):
        """Division rounds to the configured number of digits."""
        with calculation(PricingConfig(precision=5)):
            assert Decimal(1) / Decimal(3) == Decimal("0.33333")

    def test_caller_context_untouched(self):
        """The caller's thread-local context keeps its precision."""
        before = decimal.getcontext().prec
        with calculation(PricingConfig(precision=7)):
            pass
        assert decimal.getcontext().prec == before

    def test_division_by_zero_translated(self):
        """Decimal division by zero becomes NumericDomainError."""
        with pytest.raises(NumericDomainError):
            with calculation():
                Decimal(1) / Decimal(0)

    def test_invalid_operation_translated(self):
        """0/0 becomes NumericDomainError."""
        with pytest.raises(NumericDomainError):
            with calculation():
                Decimal(0) / Decimal(0)

    def test_overflow_translated(self):
        """Decimal overflow becomes NumericOverflow."""
        with pytest.raises(NumericOverflow):
            with calculation():
                Decimal(10) ** 10_000_000


class TestGuards:
    """Tests for checked, below_reserve, divide and power."""

    def test_checked_passes_in_bound(self):
        """Values within max_value pass through."""
        assert checked(Decimal(100), PricingConfig(max_value=100), "x") == 100

    def test_checked_overflow(self):
        """Values above max_value raise NumericOverflow."""
        with pytest.raises(NumericOverflow, match="x exceeds"):
            checked(Decimal(101), PricingConfig(max_value=100), "x")

    def test_checked_default_uint256(self):
        """Default bound is uint256 max."""
        with pytest.raises(NumericOverflow):
            checked(Decimal(2**256), None, "x")

    def test_below_reserve_passes(self):
        """Outputs strictly below the reserve pass through."""
        assert below_reserve(Decimal("999.9"), Decimal(1_000), "x") == Decimal("999.9")

    @pytest.mark.parametrize("value", [Decimal(1_000), Decimal(1_001)])
    def test_below_reserve_rejects_whole_reserve(self, value):
        """An output equal to or above the reserve is a domain error."""
        with pytest.raises(NumericDomainError, match="not representable"):
            below_reserve(value, Decimal(1_000), "x")

    def test_divide_by_zero(self):
        """Zero denominator raises NumericDomainError."""
        with pytest.raises(NumericDomainError):
            divide(Decimal(1), Decimal(0), "x")

    @pytest.mark.parametrize("base", [Decimal(0), Decimal(-1)])
    def test_power_non_positive_base(self, base):
        """Power of a non-positive base is a domain error."""
        with pytest.raises(NumericDomainError):
            power(base, Decimal("0.5"))

    def test_power_fractional(self):
        """Fractional exponents are real-valued."""
        with calculation():
            assert power(Decimal(4), Decimal("0.5")) == pytest.approx(Decimal(2))

    def test_power_of_one(self):
        """A base of one short-circuits to one."""
        assert power(Decimal(1), Decimal("0.123")) == 1


class TestToTokenAmount:
    """Tests for the integer rounding policy."""

    def test_truncates_by_default(self):
        """Default policy truncates toward zero."""
        assert to_token_amount(Decimal("39876.999")) == 39876

    def test_ceiling(self):
        """ROUND_CEILING rounds up."""
        assert to_token_amount(Decimal("39876.001"), rounding=ROUND_CEILING) == 39877

    def test_integral_unchanged(self):
        """Integral values convert exactly."""
        assert to_token_amount(Decimal(40_000)) == 40_000
        assert to_token_amount(Decimal(2**200)) == 2**200

    def test_negative_rejected(self):
        """Negative values cannot be token amounts."""
        with pytest.raises(NumericDomainError):
            to_token_amount(Decimal("-0.5"))

    def test_nan_rejected(self):
        """NaN cannot be a token amount."""
        with pytest.raises(NumericDomainError):
            to_token_amount(Decimal("NaN"))

    def test_overflow(self):
        """Amounts above max_value raise NumericOverflow."""
        with pytest.raises(NumericOverflow):
            to_token_amount(Decimal(101), config=PricingConfig(max_value=100))
