"""Pytest configuration and fixtures."""

import pytest

from amm_pricing import (
    AmountInCalculator,
    AmountOutCalculator,
    ConstantProduct,
    PoolPricer,
    PricingConfig,
    QuoteCalculator,
    WeightedBancor,
)
from tests.helpers import EQUAL_WEIGHT, WEIGHT_IN, WEIGHT_OUT


@pytest.fixture
def amount_out() -> AmountOutCalculator:
    """Exact-input calculator with the default config."""
    return AmountOutCalculator()


@pytest.fixture
def amount_in() -> AmountInCalculator:
    """Exact-output calculator with the default config."""
    return AmountInCalculator()


@pytest.fixture
def quote() -> QuoteCalculator:
    """Spot quote calculator with the default config."""
    return QuoteCalculator()


@pytest.fixture
def pricer() -> PoolPricer:
    """Pool-model dispatcher with the default config."""
    return PoolPricer()


@pytest.fixture
def constant_product() -> ConstantProduct:
    return ConstantProduct()


@pytest.fixture
def weighted() -> WeightedBancor:
    """Weighted pool with 40/60 weights."""
    return WeightedBancor(WEIGHT_IN, WEIGHT_OUT)


@pytest.fixture
def balanced() -> WeightedBancor:
    """Weighted pool with equal weights."""
    return WeightedBancor(EQUAL_WEIGHT, EQUAL_WEIGHT)


@pytest.fixture
def tight_config() -> PricingConfig:
    """Config whose overflow bound is easy to exceed."""
    return PricingConfig(max_value=10**6)
