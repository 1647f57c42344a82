"""
EVM Word Encoding Functions

This module implements the conversions between semantic values (integers,
addresses, raw byte strings) and 32-byte EVM storage words.

Unlike SSZ, the EVM storage model is big-endian: integers and addresses are
left-padded with zero bytes up to the word size.

References:
- Solidity ABI encoding: https://docs.soliditylang.org/en/latest/abi-spec.html
"""

from typing import Union

from .constants import WORD_SIZE, ETH_ADDRESS_SIZE, UINT256_MAX
from .errors import InvalidInput, SchemaViolation


def int_to_min_bytes(value: int) -> bytes:
    """
    Encode a non-negative integer as minimal-length big-endian bytes.

    Zero encodes to the empty byte string, matching big-integer byte export.

    Args:
        value: Non-negative integer of any size

    Returns:
        Big-endian bytes without leading zeros

    Raises:
        InvalidInput: If value is negative or not an integer

    Examples:
        >>> int_to_min_bytes(0)
        b''
        >>> int_to_min_bytes(256)
        b'\\x01\\x00'
    """
    check_unsigned(value, "value")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def pad_left(data: bytes, size: int = WORD_SIZE) -> bytes:
    """
    Left-pad a byte string with zeros up to ``size`` bytes.

    Args:
        data: Byte string no longer than ``size``
        size: Target width in bytes

    Returns:
        ``size``-byte string preserving the big-endian value of ``data``

    Raises:
        InvalidInput: If data is longer than ``size``
    """
    if len(data) > size:
        raise InvalidInput(f"Expected at most {size} bytes, got {len(data)}")
    return data.rjust(size, b"\x00")


def serialize_uint256(value: int) -> bytes:
    """
    Serialize a 256-bit unsigned integer to a storage word.

    Args:
        value: Integer value (0 <= value < 2^256)

    Returns:
        32-byte big-endian representation

    Raises:
        InvalidInput: If value is negative, not an integer or too large

    Examples:
        >>> serialize_uint256(1)
        b'\\x00' * 31 + b'\\x01'
    """
    check_unsigned(value, "uint256")
    if value > UINT256_MAX:
        raise InvalidInput("Value too large for uint256")

    return value.to_bytes(WORD_SIZE, "big")


def serialize_bool(value: bool) -> bytes:
    """Serialize a boolean to a storage word (0x..01 for True)."""
    return serialize_uint256(1 if value else 0)


def serialize_address(address: bytes) -> bytes:
    """
    Serialize a 20-byte address to a storage word.

    Args:
        address: 20-byte address

    Returns:
        Address left-padded to 32 bytes

    Raises:
        InvalidInput: If address is not exactly 20 bytes
    """
    check_address(address)
    return pad_left(address)


def check_address(address: bytes) -> bytes:
    """Validate a raw 20-byte address and return it unchanged."""
    if not isinstance(address, (bytes, bytearray)):
        raise InvalidInput(f"Address must be bytes, got {type(address).__name__}")
    if len(address) != ETH_ADDRESS_SIZE:
        raise InvalidInput(
            f"Expected {ETH_ADDRESS_SIZE} bytes for address, got {len(address)}"
        )
    return bytes(address)


def to_storage_key(index: Union[bytes, int]) -> bytes:
    """
    Turn an unpadded index into a 32-byte storage key.

    Offsets added to a hash may carry past 2^256; such an index has no place
    in the key space and is rejected instead of being truncated.

    Args:
        index: Big-endian bytes (possibly shorter than 32) or a non-negative int

    Returns:
        32-byte storage key

    Raises:
        SchemaViolation: If the index does not fit in 32 bytes
    """
    if isinstance(index, int):
        index = int_to_min_bytes(index)

    stripped = bytes(index).lstrip(b"\x00")
    if len(stripped) > WORD_SIZE:
        raise SchemaViolation(
            f"Storage index 0x{stripped.hex()} exceeds the 256-bit key space"
        )
    return pad_left(stripped)


def deserialize_uint256(data: bytes) -> int:
    """
    Deserialize a storage word into an integer.

    Raises:
        InvalidInput: If data is not exactly 32 bytes
    """
    if len(data) != WORD_SIZE:
        raise InvalidInput(f"Expected {WORD_SIZE} bytes for uint256, got {len(data)}")

    return int.from_bytes(data, "big")


def check_unsigned(value: int, name: str) -> int:
    """Validate a non-negative integer and return it unchanged."""
    # bool is an int subclass but never a valid slot or amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidInput(f"{name} values must be non-negative")
    return value
