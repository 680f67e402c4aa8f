"""Deterministic pool addresses.

A pool's address is the CREATE2 address its factory deploys it at:

    salt = keccak256(token0 ++ token1)
    address = keccak256(0xff ++ factory ++ salt ++ pool_code_fingerprint)[12:]

so any caller can locate the pool for a pair without asking the factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eth_abi.packed import encode_packed
from eth_utils import keccak

from amm_router.errors import IdenticalAssets, ZeroAsset
from amm_router.models.types import ZERO_ADDRESS, address_bytes, normalize_address

if TYPE_CHECKING:
    from amm_router.pools.registry import PoolRegistry

CREATE2_PREFIX = b"\xff"


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return the pair in canonical (token0, token1) order.

    Args:
        token_a: First asset address (any case)
        token_b: Second asset address (any case)

    Returns:
        Normalized addresses with token0 < token1

    Raises:
        ValueError: If either address is malformed
        IdenticalAssets: If both addresses are the same
        ZeroAsset: If token0 is the zero address
    """
    token_a_norm = normalize_address(token_a, validate=True)
    token_b_norm = normalize_address(token_b, validate=True)
    if token_a_norm == token_b_norm:
        raise IdenticalAssets(f"Identical assets: {token_a_norm}")

    if token_a_norm < token_b_norm:
        token0, token1 = token_a_norm, token_b_norm
    else:
        token0, token1 = token_b_norm, token_a_norm

    if token0 == ZERO_ADDRESS:
        raise ZeroAsset("Zero address cannot be a pool asset")
    return token0, token1


def pair_salt(token0: str, token1: str) -> bytes:
    """keccak256 of the packed canonical pair."""
    return keccak(
        encode_packed(["address", "address"], [address_bytes(token0), address_bytes(token1)])
    )


def pool_address(
    factory: str,
    token_a: str,
    token_b: str,
    pool_code_fingerprint: bytes,
) -> str:
    """Compute the address of the pool for a pair under a given factory.

    Args:
        factory: Factory (registry) address
        token_a: First asset address
        token_b: Second asset address
        pool_code_fingerprint: keccak256 of the pool creation code

    Returns:
        Lowercase 0x-prefixed pool address

    Raises:
        ValueError: If the fingerprint is not 32 bytes
    """
    if len(pool_code_fingerprint) != 32:
        raise ValueError(
            f"Pool code fingerprint must be 32 bytes, got {len(pool_code_fingerprint)}"
        )
    token0, token1 = sort_tokens(token_a, token_b)
    digest = keccak(
        CREATE2_PREFIX
        + address_bytes(factory)
        + pair_salt(token0, token1)
        + pool_code_fingerprint
    )
    return "0x" + digest[12:].hex()


def pair_for(registry: PoolRegistry, token_a: str, token_b: str) -> str:
    """Derive the handle of the pool servicing (token_a, token_b) in a registry.

    Only the registry's address and code fingerprint are read; no pool state
    is consulted.
    """
    return pool_address(
        registry.address,
        token_a,
        token_b,
        registry.pool_code_fingerprint(),
    )


__all__ = ["sort_tokens", "pair_salt", "pool_address", "pair_for"]
