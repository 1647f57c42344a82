"""
Hex String Utilities

This module provides utilities for moving between 0x-prefixed hex strings,
raw bytes and integers, as used by genesis files.
"""

from typing import Optional

from ..constants import WORD_SIZE


def normalize_hex(hex_str: str, expected_bytes: Optional[int] = None) -> str:
    """
    Normalize a hex string to ensure proper formatting.

    Args:
        hex_str: The hex string to normalize (should start with '0x')
        expected_bytes: Optional expected byte length for validation

    Returns:
        Normalized lower-case hex string with even length

    Raises:
        ValueError: If the hex string contains invalid characters or has
            the wrong length

    Examples:
        >>> normalize_hex("0x123")
        '0x0123'
        >>> normalize_hex("0xABCD")
        '0xabcd'
    """
    if not isinstance(hex_str, str) or not hex_str.startswith(("0x", "0X")):
        raise ValueError(f"Hex string must start with 0x: {hex_str!r}")

    hex_part = hex_str[2:]

    # Validate hex characters
    if not all(c in "0123456789abcdefABCDEF" for c in hex_part):
        raise ValueError(f"Invalid hex string: {hex_str}")

    # Pad to even length
    if len(hex_part) % 2 == 1:
        hex_part = "0" + hex_part

    if expected_bytes is not None:
        actual_bytes = len(hex_part) // 2
        if actual_bytes != expected_bytes:
            raise ValueError(f"Expected {expected_bytes} bytes, got {actual_bytes} bytes")

    return "0x" + hex_part.lower()


def hex_to_bytes(hex_str: str, expected_bytes: Optional[int] = None) -> bytes:
    """
    Convert a 0x-prefixed hex string to bytes.

    Examples:
        >>> hex_to_bytes("0x1234")
        b'\\x124'
    """
    return bytes.fromhex(normalize_hex(hex_str, expected_bytes)[2:])


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a hex string.

    Args:
        data: Bytes to convert
        prefix: Whether to include '0x' prefix

    Returns:
        Hex string representation

    Examples:
        >>> bytes_to_hex(b'\\x12\\x34')
        '0x1234'
        >>> bytes_to_hex(b'\\x12\\x34', prefix=False)
        '1234'
    """
    hex_str = data.hex()
    return f"0x{hex_str}" if prefix else hex_str


def parse_uint(value: str) -> int:
    """
    Parse an unsigned integer given either as 0x-hex or as decimal.

    Examples:
        >>> parse_uint("0x8AC7230489E80000")
        10000000000000000000
        >>> parse_uint("42")
        42
    """
    value = value.strip()
    if value.startswith(("0x", "0X")):
        return int(normalize_hex(value), 16)
    if not value.isdigit():
        raise ValueError(f"Invalid unsigned integer: {value!r}")
    return int(value)


def word_to_hex(word: bytes) -> str:
    """Render a storage word as a full-width 0x-prefixed hex string."""
    if len(word) != WORD_SIZE:
        raise ValueError(f"Expected {WORD_SIZE} bytes, got {len(word)}")
    return bytes_to_hex(word)
