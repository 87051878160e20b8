"""Pool models and trade value types.

PoolModel is a tagged variant: ConstantProduct or WeightedBancor. A
TradeRequest pairs one fixed side of a trade (amount_in or amount_out) with
the pool context needed to price it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, ClassVar, TypeAlias

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    InstanceOf,
    ValidationError,
    model_validator,
)

from amm_pricing.errors import InvalidInput
from amm_pricing.numeric import validate_fee, validate_weight


@dataclass(frozen=True)
class ConstantProduct:
    """Uniswap-style pool: reserve_in * reserve_out = k."""

    kind: ClassVar[str] = "constant_product"


@dataclass(frozen=True)
class WeightedBancor:
    """Bancor-style pool with a weight per reserve.

    Weights are relative; only weight_in / weight_out matters for trades.
    Equal weights price like ConstantProduct.
    """

    weight_in: Decimal
    weight_out: Decimal

    kind: ClassVar[str] = "weighted_bancor"

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight_in", validate_weight(self.weight_in, "weight_in"))
        object.__setattr__(self, "weight_out", validate_weight(self.weight_out, "weight_out"))

    def reversed(self) -> WeightedBancor:
        """Same pool seen from the other side of the trade."""
        return WeightedBancor(self.weight_out, self.weight_in)


# Union type for all pool models
PoolModel: TypeAlias = ConstantProduct | WeightedBancor

NonNegativeDecimal = Annotated[Decimal, Field(ge=0)]

# Same boundary as the calculators: an int (or integral Decimal) in [0, 10000]
FeeBps = Annotated[int, BeforeValidator(validate_fee)]


class TradeRequest(BaseModel):
    """A trade with exactly one fixed side and its pool context.

    Direct construction raises pydantic.ValidationError on bad data; use
    TradeRequest.parse() to get InvalidInput instead.
    """

    model_config = ConfigDict(frozen=True)

    pool: InstanceOf[ConstantProduct] | InstanceOf[WeightedBancor]
    reserve_in: Decimal = Field(gt=0)
    reserve_out: Decimal = Field(gt=0)
    fee_bps: FeeBps = 0
    amount_in: NonNegativeDecimal | None = None
    amount_out: NonNegativeDecimal | None = None

    @model_validator(mode="after")
    def check_exactly_one_side(self) -> TradeRequest:
        if (self.amount_in is None) == (self.amount_out is None):
            raise ValueError("exactly one of amount_in or amount_out must be set")
        return self

    @property
    def exact_input(self) -> bool:
        """True if the caller fixed the input amount (sell side)."""
        return self.amount_in is not None

    @classmethod
    def parse(cls, data: dict[str, object]) -> TradeRequest:
        """Validate a mapping into a TradeRequest.

        Raises:
            InvalidInput: If the data does not describe a valid trade
        """
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise InvalidInput(f"Invalid trade request: {err}") from err


@dataclass(frozen=True)
class TradeResult:
    """Both sides of a priced trade."""

    amount_in: Decimal
    amount_out: Decimal
    # Pool model kind ("constant_product" or "weighted_bancor")
    model: str
    # True if amount_in was fixed by the caller, False if amount_out was
    exact_input: bool
