"""Pytest configuration and fixtures."""

import pytest

from amm_router.pools import FeeInToken, InMemoryRegistry
from tests.helpers import DAI, TOKEN_A, TOKEN_B, USDC, WETH, make_registry


@pytest.fixture
def empty_registry() -> InMemoryRegistry:
    """Registry with no pools."""
    return make_registry()


@pytest.fixture
def flat_registry() -> InMemoryRegistry:
    """Single fee-free pool with 10000/10000 reserves."""
    return make_registry([(TOKEN_A, TOKEN_B, 10_000, 10_000)])


@pytest.fixture
def mainnet_registry() -> InMemoryRegistry:
    """USDC/WETH and WETH/DAI pools with a 3% fee, no direct USDC/DAI pool."""
    return make_registry(
        [
            (WETH, USDC, 100 * 10**18, 250_000 * 10**6, FeeInToken(30)),
            (WETH, DAI, 200 * 10**18, 500_000 * 10**18, FeeInToken(30)),
        ]
    )
