"""Constant product AMM math."""

from amm_router.amm.base import SwapResult
from amm_router.amm.constant_product import (
    ConstantProduct,
    constant_product,
    get_amount_in,
    get_amount_out,
    get_pool_fee,
    quote,
)

__all__ = [
    "SwapResult",
    "ConstantProduct",
    "constant_product",
    "quote",
    "get_pool_fee",
    "get_amount_out",
    "get_amount_in",
]
