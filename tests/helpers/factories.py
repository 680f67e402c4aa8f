"""Factory functions for creating test registries.

Usage:
    from tests.helpers import make_registry

    registry = make_registry([(WETH, USDC, 100 * 10**18, 250_000 * 10**6)])
"""

from amm_router.pools import InMemoryRegistry, PoolFee
from tests.helpers.constants import UNISWAP_V2_FACTORY, UNISWAP_V2_INIT_CODE_HASH

PoolSpec = tuple[str, str, int, int] | tuple[str, str, int, int, PoolFee]


def make_registry(pools: list[PoolSpec] | None = None) -> InMemoryRegistry:
    """Create a registry under the mainnet UniswapV2 factory.

    Args:
        pools: (token_a, token_b, reserve_a, reserve_b[, fee]) tuples

    Returns:
        InMemoryRegistry holding the given pools
    """
    registry = InMemoryRegistry(UNISWAP_V2_FACTORY, UNISWAP_V2_INIT_CODE_HASH)
    for spec in pools or []:
        token_a, token_b, reserve_a, reserve_b = spec[:4]
        fee = spec[4] if len(spec) == 5 else None
        registry.add_pool(token_a, token_b, reserve_a, reserve_b, fee)
    return registry
