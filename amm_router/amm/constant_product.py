"""Constant product (x * y = k) pricing.

Formula: amount_out = (in * rate * res_out) / (res_in * 1000 + in * rate)

where rate is 1000 minus the pool's fee in thousandths. Fees are per pool
and read from the registry, so every registry-aware calculation is two
steps: derive the pool address, then read its fee configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from amm_router.amm.base import SwapResult
from amm_router.config import FEE_SCALE
from amm_router.errors import (
    InsufficientAmount,
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
)
from amm_router.models.types import normalize_address
from amm_router.pools.address import pair_for
from amm_router.pools.fees import NoFee, PoolFee
from amm_router.pools.reserves import get_reserves
from amm_router.safe_int import S

if TYPE_CHECKING:
    from amm_router.pools.registry import PoolRegistry

logger = structlog.get_logger()


def _check_exact_input(amount_in: int, reserve_in: int, reserve_out: int) -> None:
    if amount_in == 0:
        raise InsufficientInputAmount("Input amount must be positive")
    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidity(f"Empty reserves: ({reserve_in}, {reserve_out})")


def _check_exact_output(amount_out: int, reserve_in: int, reserve_out: int) -> None:
    if amount_out == 0:
        raise InsufficientOutputAmount("Output amount must be positive")
    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidity(f"Empty reserves: ({reserve_in}, {reserve_out})")
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(f"Output {amount_out} not below reserve {reserve_out}")


class ConstantProduct:
    """Constant product AMM math.

    All arithmetic goes through SafeInt, so results are exact integers and
    any intermediate value past uint256 raises ArithmeticOverflow.
    """

    def quote(self, amount_a: int, reserve_a: int, reserve_b: int) -> int:
        """Amount of B worth amount_a of A at the pool's current ratio.

        No fee is applied; this keeps the price ratio when adding or removing
        proportional liquidity and is not a swap quote.

        Raises:
            InsufficientAmount: If amount_a is zero
            InsufficientLiquidity: If either reserve is zero
        """
        if amount_a == 0:
            raise InsufficientAmount("Quote amount must be positive")
        if reserve_a == 0 or reserve_b == 0:
            raise InsufficientLiquidity(f"Empty reserves: ({reserve_a}, {reserve_b})")

        return ((S(amount_a) * S(reserve_b)) // S(reserve_a)).value

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee: PoolFee | None = None,
    ) -> int:
        """Calculate output amount for an exact input.

        The result is floored, so every trade rounds in favor of the pool.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee: Pool fee configuration (default: no fee)

        Returns:
            Output token amount

        Raises:
            InsufficientInputAmount: If amount_in is zero
            InsufficientLiquidity: If either reserve is zero
            ArithmeticOverflow: If an intermediate value exceeds uint256
        """
        _check_exact_input(amount_in, reserve_in, reserve_out)

        rate = (fee or NoFee()).effective_rate()
        amount_in_with_fee = S(amount_in) * S(rate)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(FEE_SCALE) + amount_in_with_fee

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee: PoolFee | None = None,
    ) -> int:
        """Calculate required input for an exact output.

        Formula: amount_in = (res_in * out * 1000) / ((res_out - out) * rate) + 1

        The +1 rounds the input up so the invariant holds after the swap; the
        result may exceed the true minimum by one unit.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee: Pool fee configuration (default: no fee)

        Returns:
            Required input token amount

        Raises:
            InsufficientOutputAmount: If amount_out is zero
            InsufficientLiquidity: If either reserve is zero or amount_out
                is not below reserve_out
            ArithmeticOverflow: If an intermediate value exceeds uint256
        """
        _check_exact_output(amount_out, reserve_in, reserve_out)

        rate = (fee or NoFee()).effective_rate()
        numerator = S(reserve_in) * S(amount_out) * S(FEE_SCALE)
        denominator = (S(reserve_out) - S(amount_out)) * S(rate)

        return ((numerator // denominator) + S(1)).value

    def simulate_swap(
        self,
        registry: PoolRegistry,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> SwapResult:
        """Simulate an exact-input swap against the registry's current state.

        Args:
            registry: Source of pool state
            token_in: Input token address
            token_out: Output token address
            amount_in: Amount to swap

        Returns:
            SwapResult with amounts and pool address
        """
        reserve_in, reserve_out = get_reserves(registry, token_in, token_out)
        pool = pair_for(registry, token_in, token_out)
        amount_out = self.get_amount_out(
            amount_in, reserve_in, reserve_out, registry.pool_config(pool)
        )

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_address=pool,
            token_in=normalize_address(token_in),
            token_out=normalize_address(token_out),
        )

    def simulate_swap_exact_output(
        self,
        registry: PoolRegistry,
        token_in: str,
        token_out: str,
        amount_out: int,
    ) -> SwapResult:
        """Simulate a swap to get an exact output amount.

        Returns:
            SwapResult with required input and actual forward-simulated output.
            Due to integer rounding, actual output may be >= requested amount_out.
        """
        reserve_in, reserve_out = get_reserves(registry, token_in, token_out)
        pool = pair_for(registry, token_in, token_out)
        fee = registry.pool_config(pool)
        amount_in = self.get_amount_in(amount_out, reserve_in, reserve_out, fee)

        # Forward verification: the rounded-up input can buy slightly more
        actual_output = self.get_amount_out(amount_in, reserve_in, reserve_out, fee)

        return SwapResult(
            amount_in=amount_in,
            amount_out=actual_output,
            pool_address=pool,
            token_in=normalize_address(token_in),
            token_out=normalize_address(token_out),
        )


# Singleton instance
constant_product = ConstantProduct()


def quote(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Fee-free proportional quote, see ConstantProduct.quote."""
    return constant_product.quote(amount_a, reserve_a, reserve_b)


def get_pool_fee(registry: PoolRegistry, token_in: str, token_out: str) -> PoolFee:
    """Read the fee of the (token_in, token_out) pool.

    The pool is located by address derivation first, then its configuration
    is read from the registry.
    """
    pool = pair_for(registry, token_in, token_out)
    fee = registry.pool_config(pool)
    logger.debug("pool_fee_read", pool=pool[-8:], fee=fee)
    return fee


def get_amount_out(
    registry: PoolRegistry,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    token_in: str,
    token_out: str,
) -> int:
    """Exact-input swap output using the pool fee configured in the registry.

    Amount and reserve checks run before the registry is consulted.
    """
    _check_exact_input(amount_in, reserve_in, reserve_out)
    fee = get_pool_fee(registry, token_in, token_out)
    return constant_product.get_amount_out(amount_in, reserve_in, reserve_out, fee)


def get_amount_in(
    registry: PoolRegistry,
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    token_in: str,
    token_out: str,
) -> int:
    """Exact-output swap input using the pool fee configured in the registry."""
    _check_exact_output(amount_out, reserve_in, reserve_out)
    fee = get_pool_fee(registry, token_in, token_out)
    return constant_product.get_amount_in(amount_out, reserve_in, reserve_out, fee)


__all__ = [
    "ConstantProduct",
    "constant_product",
    "quote",
    "get_pool_fee",
    "get_amount_out",
    "get_amount_in",
]
