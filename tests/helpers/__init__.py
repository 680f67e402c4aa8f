"""Test helpers module for shared test utilities.

- constants: Token and factory addresses
- factories: Registry factory functions
"""

from tests.helpers.constants import (
    DAI,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    UNISWAP_V2_FACTORY,
    UNISWAP_V2_INIT_CODE_HASH,
    USDC,
    USDC_WETH_PAIR,
    USDT,
    WETH,
    ZERO,
)
from tests.helpers.factories import make_registry

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "UNISWAP_V2_FACTORY",
    "UNISWAP_V2_INIT_CODE_HASH",
    "USDC_WETH_PAIR",
    "ZERO",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    # Factories
    "make_registry",
]
