"""Constant product AMM pricing and routing.

Pool address derivation, reserve lookup, fee-aware swap math and multi-hop
amount propagation over a read-only pool registry.
"""

from amm_router.amm import ConstantProduct, get_amount_in, get_amount_out, quote
from amm_router.errors import (
    IdenticalAssets,
    InsufficientAmount,
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    InvalidFeeRate,
    InvalidPath,
    RouterError,
    ZeroAsset,
)
from amm_router.pools import (
    FeeInToken,
    InMemoryRegistry,
    NoFee,
    PoolFee,
    PoolRegistry,
    get_reserves,
    pair_for,
    sort_tokens,
)
from amm_router.routing import get_amounts_in, get_amounts_out, quote_path
from amm_router.safe_int import ArithmeticOverflow

__all__ = [
    "sort_tokens",
    "pair_for",
    "get_reserves",
    "quote",
    "get_amount_out",
    "get_amount_in",
    "get_amounts_out",
    "get_amounts_in",
    "quote_path",
    "ConstantProduct",
    "NoFee",
    "FeeInToken",
    "PoolFee",
    "PoolRegistry",
    "InMemoryRegistry",
    "RouterError",
    "IdenticalAssets",
    "ZeroAsset",
    "InsufficientAmount",
    "InsufficientInputAmount",
    "InsufficientOutputAmount",
    "InsufficientLiquidity",
    "InvalidPath",
    "InvalidFeeRate",
    "ArithmeticOverflow",
]
