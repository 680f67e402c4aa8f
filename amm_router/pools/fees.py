"""Per-pool fee configuration.

A pool either charges nothing or retains a fee in the input token. The two
cases are separate types so a rate can never be set while the fee is off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from amm_router.config import FEE_SCALE
from amm_router.errors import InvalidFeeRate


@dataclass(frozen=True)
class NoFee:
    """Pool without a fee override: the full input counts towards the swap."""

    def effective_rate(self) -> int:
        return FEE_SCALE


@dataclass(frozen=True)
class FeeInToken:
    """Fee retained from the input amount.

    Attributes:
        rate: Fee in thousandths of the input (30 = 3%)
    """

    rate: int

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, int):
            raise InvalidFeeRate(f"Fee rate must be an int, got {type(self.rate).__name__}")
        if not 0 <= self.rate < FEE_SCALE:
            raise InvalidFeeRate(f"Fee rate {self.rate} outside [0, {FEE_SCALE})")

    def effective_rate(self) -> int:
        """Thousandths of each input unit that reach the pool (1000 - rate)."""
        return FEE_SCALE - self.rate


PoolFee: TypeAlias = NoFee | FeeInToken


def pool_fee(fee_in_token: bool, rate: int) -> PoolFee:
    """Convert a raw (fee_in_token, rate) config read into a PoolFee.

    A stored rate with the flag cleared contributes nothing, matching how
    the registry's fee toggle is applied on-chain.
    """
    if not fee_in_token:
        return NoFee()
    return FeeInToken(rate)


__all__ = ["NoFee", "FeeInToken", "PoolFee", "pool_fee"]
