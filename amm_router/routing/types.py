"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SwapKind(str, Enum):
    """Which end of a path is fixed."""

    EXACT_INPUT = "exact_input"
    EXACT_OUTPUT = "exact_output"


@dataclass(frozen=True)
class HopQuote:
    """Amounts flowing through a single pool of a path."""

    pool: str
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class PathQuote:
    """Amounts along a full path."""

    kind: SwapKind
    path: list[str]
    amounts: list[int]
    hops: list[HopQuote]

    @property
    def amount_in(self) -> int:
        return self.amounts[0]

    @property
    def amount_out(self) -> int:
        return self.amounts[-1]

    @property
    def is_multihop(self) -> bool:
        """Check if this route crosses more than one pool."""
        return len(self.path) > 2


__all__ = ["SwapKind", "HopQuote", "PathQuote"]
