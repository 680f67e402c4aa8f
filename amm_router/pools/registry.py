"""Read-only registry capability and an in-memory implementation.

The pricing engine never holds pool state. Every operation receives a
PoolRegistry and reads the factory identity, fee overrides and reserves
through it. InMemoryRegistry backs tests and offline quoting.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from amm_router.models.types import normalize_address
from amm_router.pools.address import pair_for, sort_tokens
from amm_router.pools.fees import NoFee, PoolFee, pool_fee

logger = structlog.get_logger()


@runtime_checkable
class PoolRegistry(Protocol):
    """Protocol for the external factory/pool state the engine reads.

    Implementations must be side-effect free from the engine's point of view:
    the same handle read twice without external changes yields the same value.
    """

    @property
    def address(self) -> str:
        """Factory address, one input of pool address derivation."""
        ...

    def pool_code_fingerprint(self) -> bytes:
        """keccak256 of the pool creation code (constant per factory)."""
        ...

    def pool_config(self, pool: str) -> PoolFee:
        """Fee configuration of a pool, NoFee() if not configured.

        Registries backed by raw (fee_in_token, rate) storage convert it
        with pools.fees.pool_fee.
        """
        ...

    def get_reserves(self, pool: str) -> tuple[int, int]:
        """Current (reserve0, reserve1) of a pool in canonical token order."""
        ...


class InMemoryRegistry:
    """PoolRegistry over fixed, in-memory pool state.

    Pools are keyed by their derived address, so lookups go through exactly
    the same derivation the engine uses.
    """

    def __init__(self, address: str, pool_code_fingerprint: bytes) -> None:
        """Initialize an empty registry.

        Args:
            address: Factory address
            pool_code_fingerprint: 32-byte pool creation code hash
        """
        self._address = normalize_address(address, validate=True)
        self._fingerprint = bytes(pool_code_fingerprint)
        self._reserves: dict[str, tuple[int, int]] = {}
        self._fees: dict[str, PoolFee] = {}

    @property
    def address(self) -> str:
        return self._address

    def pool_code_fingerprint(self) -> bytes:
        return self._fingerprint

    def pool_config(self, pool: str) -> PoolFee:
        return self._fees.get(normalize_address(pool), NoFee())

    def get_reserves(self, pool: str) -> tuple[int, int]:
        pool_norm = normalize_address(pool)
        reserves = self._reserves.get(pool_norm)
        if reserves is None:
            logger.debug("pool_not_found", pool=pool_norm[-8:])
            return 0, 0
        return reserves

    def add_pool(
        self,
        token_a: str,
        token_b: str,
        reserve_a: int,
        reserve_b: int,
        fee: PoolFee | None = None,
    ) -> str:
        """Add or replace the pool for a pair.

        Args:
            token_a: First asset address (any case)
            token_b: Second asset address (any case)
            reserve_a: Balance of token_a held by the pool
            reserve_b: Balance of token_b held by the pool
            fee: Fee override (default: none)

        Returns:
            Derived pool address

        Raises:
            ValueError: If a reserve is negative
        """
        if reserve_a < 0 or reserve_b < 0:
            raise ValueError(f"Reserves must be non-negative: ({reserve_a}, {reserve_b})")

        pool = pair_for(self, token_a, token_b)
        token0, _ = sort_tokens(token_a, token_b)
        if normalize_address(token_a) == token0:
            reserves = (reserve_a, reserve_b)
        else:
            reserves = (reserve_b, reserve_a)

        if pool in self._reserves:
            logger.debug("pool_replaced", pool=pool[-8:])
        self._reserves[pool] = reserves
        self.set_fee(pool, fee if fee is not None else NoFee())
        logger.debug(
            "pool_added",
            pool=pool[-8:],
            reserve0=reserves[0],
            reserve1=reserves[1],
        )
        return pool

    def set_fee(self, pool: str, fee: PoolFee) -> None:
        """Set the fee override of a pool by address."""
        pool_norm = normalize_address(pool, validate=True)
        if isinstance(fee, NoFee):
            self._fees.pop(pool_norm, None)
        else:
            self._fees[pool_norm] = fee

    def set_pool_config(self, pool: str, fee_in_token: bool, rate: int) -> None:
        """Apply a raw (fee_in_token, rate) pair as stored by the factory.

        A rate stored with the flag cleared leaves the pool without a fee.

        Raises:
            InvalidFeeRate: If the flag is set and rate is outside [0, 1000)
        """
        self.set_fee(pool, pool_fee(fee_in_token, rate))

    @property
    def pool_count(self) -> int:
        return len(self._reserves)

    def __contains__(self, pool: object) -> bool:
        return isinstance(pool, str) and normalize_address(pool) in self._reserves


__all__ = ["PoolRegistry", "InMemoryRegistry"]
