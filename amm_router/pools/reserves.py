"""Reserve lookup in caller order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from amm_router.models.types import normalize_address
from amm_router.pools.address import pair_for, sort_tokens

if TYPE_CHECKING:
    from amm_router.pools.registry import PoolRegistry


def get_reserves(registry: PoolRegistry, token_a: str, token_b: str) -> tuple[int, int]:
    """Get the reserves of the (token_a, token_b) pool ordered as requested.

    Args:
        registry: Source of pool state
        token_a: Asset whose reserve is returned first
        token_b: Asset whose reserve is returned second

    Returns:
        (reserve_a, reserve_b)

    Raises:
        IdenticalAssets: If token_a == token_b
        ZeroAsset: If the pair contains the zero address
    """
    token0, _ = sort_tokens(token_a, token_b)
    reserve0, reserve1 = registry.get_reserves(pair_for(registry, token_a, token_b))
    if normalize_address(token_a) == token0:
        return reserve0, reserve1
    return reserve1, reserve0


__all__ = ["get_reserves"]
