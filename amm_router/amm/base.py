"""Shared result types for AMM calculations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating a swap through a pool."""

    amount_in: int
    amount_out: int
    pool_address: str
    token_in: str
    token_out: str
