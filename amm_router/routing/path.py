"""Multi-hop amount propagation along a token path."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from amm_router.amm.constant_product import get_amount_in, get_amount_out
from amm_router.errors import InvalidPath, RouterError
from amm_router.models.types import normalize_address
from amm_router.pools.address import pair_for
from amm_router.pools.reserves import get_reserves
from amm_router.routing.types import HopQuote, PathQuote, SwapKind

if TYPE_CHECKING:
    from amm_router.pools.registry import PoolRegistry

logger = structlog.get_logger()


def _check_path(path: Sequence[str]) -> None:
    if len(path) < 2:
        raise InvalidPath(f"Path needs at least 2 tokens, got {len(path)}")


def get_amounts_out(registry: PoolRegistry, amount_in: int, path: Sequence[str]) -> list[int]:
    """Compute the amounts along a path for an exact input.

    Args:
        registry: Source of pool state
        amount_in: Amount of path[0] sold
        path: Token addresses from input to output

    Returns:
        amounts[i] is the amount of path[i]; amounts[0] == amount_in

    Raises:
        InvalidPath: If the path has fewer than 2 tokens
        RouterError: From the first hop that cannot be priced
    """
    _check_path(path)
    amounts = [0] * len(path)
    amounts[0] = amount_in

    for i in range(len(path) - 1):
        try:
            reserve_in, reserve_out = get_reserves(registry, path[i], path[i + 1])
            amounts[i + 1] = get_amount_out(
                registry, amounts[i], reserve_in, reserve_out, path[i], path[i + 1]
            )
        except RouterError as e:
            logger.warning("route_aborted", kind="exact_input", hop=i, error=str(e))
            raise
        logger.debug("hop_priced", hop=i, amount_in=amounts[i], amount_out=amounts[i + 1])

    return amounts


def get_amounts_in(registry: PoolRegistry, amount_out: int, path: Sequence[str]) -> list[int]:
    """Compute the amounts along a path for an exact output.

    Works backwards from the last token: each hop's required input becomes
    the previous hop's output.

    Args:
        registry: Source of pool state
        amount_out: Amount of path[-1] bought
        path: Token addresses from input to output

    Returns:
        amounts[i] is the amount of path[i]; amounts[-1] == amount_out

    Raises:
        InvalidPath: If the path has fewer than 2 tokens
        RouterError: From the first hop that cannot be priced
    """
    _check_path(path)
    amounts = [0] * len(path)
    amounts[-1] = amount_out

    for i in range(len(path) - 1, 0, -1):
        try:
            reserve_in, reserve_out = get_reserves(registry, path[i - 1], path[i])
            amounts[i - 1] = get_amount_in(
                registry, amounts[i], reserve_in, reserve_out, path[i - 1], path[i]
            )
        except RouterError as e:
            logger.warning("route_aborted", kind="exact_output", hop=i - 1, error=str(e))
            raise
        logger.debug("hop_priced", hop=i - 1, amount_in=amounts[i - 1], amount_out=amounts[i])

    return amounts


def quote_path(
    registry: PoolRegistry,
    amount: int,
    path: Sequence[str],
    kind: SwapKind = SwapKind.EXACT_INPUT,
) -> PathQuote:
    """Price a path and report the pool and amounts of every hop.

    Args:
        registry: Source of pool state
        amount: Input amount for EXACT_INPUT, output amount for EXACT_OUTPUT
        path: Token addresses from input to output
        kind: Which end of the path is fixed

    Returns:
        PathQuote with the amount vector and per-hop breakdown
    """
    if kind == SwapKind.EXACT_INPUT:
        amounts = get_amounts_out(registry, amount, path)
    else:
        amounts = get_amounts_in(registry, amount, path)

    tokens = [normalize_address(token) for token in path]
    hops = [
        HopQuote(
            pool=pair_for(registry, tokens[i], tokens[i + 1]),
            token_in=tokens[i],
            token_out=tokens[i + 1],
            amount_in=amounts[i],
            amount_out=amounts[i + 1],
        )
        for i in range(len(tokens) - 1)
    ]
    return PathQuote(kind=kind, path=tokens, amounts=amounts, hops=hops)


__all__ = ["get_amounts_out", "get_amounts_in", "quote_path"]
