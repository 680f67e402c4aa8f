"""Pool identity, fee configuration and reserve reads."""

from .address import pair_for, pool_address, sort_tokens
from .fees import FeeInToken, NoFee, PoolFee, pool_fee
from .registry import InMemoryRegistry, PoolRegistry
from .reserves import get_reserves

__all__ = [
    "sort_tokens",
    "pool_address",
    "pair_for",
    "NoFee",
    "FeeInToken",
    "PoolFee",
    "pool_fee",
    "PoolRegistry",
    "InMemoryRegistry",
    "get_reserves",
]
