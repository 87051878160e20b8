"""Test helpers module for shared test utilities."""

from tests.helpers.constants import (
    EQUAL_WEIGHT,
    FEE_BPS,
    FEE_LADDER,
    RESERVE_IN,
    RESERVE_OUT,
    TRADE_CASES,
    WEIGHT_IN,
    WEIGHT_OUT,
)

__all__ = [
    "RESERVE_IN",
    "RESERVE_OUT",
    "FEE_BPS",
    "WEIGHT_IN",
    "WEIGHT_OUT",
    "EQUAL_WEIGHT",
    "TRADE_CASES",
    "FEE_LADDER",
]
