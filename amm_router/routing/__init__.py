"""Multi-hop routing along token paths."""

from amm_router.routing.path import get_amounts_in, get_amounts_out, quote_path
from amm_router.routing.types import HopQuote, PathQuote, SwapKind

__all__ = [
    "get_amounts_out",
    "get_amounts_in",
    "quote_path",
    "SwapKind",
    "HopQuote",
    "PathQuote",
]
