"""Pydantic models for registry snapshots.

A snapshot is a JSON document describing a factory and the pools it has
deployed, used to build an InMemoryRegistry for offline quoting:

    {
      "factory": "0x5c69...",
      "poolCodeFingerprint": "0x96e8...",
      "pools": [
        {"tokenA": "0x...", "tokenB": "0x...",
         "reserveA": "1000", "reserveB": "2000",
         "fee": {"kind": "inToken", "rate": 3}}
      ]
    }
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from amm_router.models.types import Address, Bytes32, Uint256
from amm_router.pools.fees import FeeInToken, NoFee, PoolFee
from amm_router.pools.registry import InMemoryRegistry


class NoFeeConfig(BaseModel):
    """Pool without a fee override."""

    kind: Literal["none"] = "none"

    def to_pool_fee(self) -> PoolFee:
        return NoFee()


class FeeInTokenConfig(BaseModel):
    """Fee retained in the input token, in thousandths."""

    kind: Literal["inToken"] = "inToken"
    rate: int = Field(ge=0, lt=1000)

    def to_pool_fee(self) -> PoolFee:
        return FeeInToken(self.rate)


FeeConfig = Annotated[NoFeeConfig | FeeInTokenConfig, Field(discriminator="kind")]


class PoolSnapshot(BaseModel):
    """Reserves and fee of a single pool."""

    token_a: Address = Field(alias="tokenA")
    token_b: Address = Field(alias="tokenB")
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    fee: FeeConfig = Field(default_factory=NoFeeConfig)

    model_config = {"populate_by_name": True}


class RegistrySnapshot(BaseModel):
    """A factory and its pools at a point in time."""

    factory: Address
    pool_code_fingerprint: Bytes32 = Field(alias="poolCodeFingerprint")
    pools: list[PoolSnapshot] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def to_registry(self) -> InMemoryRegistry:
        """Build an InMemoryRegistry holding every pool of the snapshot.

        Raises:
            IdenticalAssets: If a pool lists the same token twice
            ZeroAsset: If a pool contains the zero address
        """
        registry = InMemoryRegistry(
            self.factory, bytes.fromhex(self.pool_code_fingerprint[2:])
        )
        for pool in self.pools:
            registry.add_pool(
                pool.token_a,
                pool.token_b,
                int(pool.reserve_a),
                int(pool.reserve_b),
                pool.fee.to_pool_fee(),
            )
        return registry


__all__ = [
    "NoFeeConfig",
    "FeeInTokenConfig",
    "PoolSnapshot",
    "RegistrySnapshot",
]
