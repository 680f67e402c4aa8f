"""Pydantic types and models for addresses, amounts and registry snapshots.

RegistrySnapshot lives in amm_router.models.snapshot.
"""

from amm_router.models.types import Address, Bytes32, Uint256, normalize_address

__all__ = [
    "Address",
    "Bytes32",
    "Uint256",
    "normalize_address",
]
