"""Shared type definitions for asset identifiers and amounts."""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

# Sentinel identifier that can never be a real asset
ZERO_ADDRESS = "0x" + "00" * 20

ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")
DECIMAL_PATTERN = re.compile(r"[0-9]+")


def validate_uint256(value: Any) -> str:
    """Validate that a value is a valid uint256 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint256 as decimal string

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    if isinstance(value, int) and not isinstance(value, bool):
        int_value = value
    elif isinstance(value, str):
        if DECIMAL_PATTERN.fullmatch(value) is None:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'")
        int_value = int(value)
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return str(int_value)


# Account/contract identifier (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# 256-bit unsigned integer as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]

# 32-byte hash as hex (pool code fingerprint)
Bytes32 = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{64}$")]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an address to lowercase with 0x prefix.

    Lowercase identifiers of equal width compare like their raw bytes, which
    is what canonical pair ordering relies on.

    Args:
        address: An address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a 0x-prefixed 20-byte hex address."""
    if not isinstance(address, str):
        return False
    return ADDRESS_PATTERN.fullmatch(address) is not None


def address_bytes(address: str) -> bytes:
    """Decode a validated address to its 20 raw bytes."""
    return bytes.fromhex(normalize_address(address, validate=True)[2:])
