"""
Storage Key Derivation

This module computes storage keys following the Solidity storage layout:

- value types live directly at their declared slot
- ``mapping(address => T)`` at slot ``p`` stores ``m[k]`` at
  ``keccak256(pad32(k) . pad32(p))``
- dynamic arrays at slot ``p`` store their length at ``p`` and element ``i``
  at ``keccak256(pad32(p)) + i``

References:
- https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html
"""

from eth_utils import keccak

from .encoding import (
    check_address,
    check_unsigned,
    int_to_min_bytes,
    pad_left,
    serialize_uint256,
)


def get_slot_key(slot: int) -> bytes:
    """
    Get the storage key of a value-type variable declared at ``slot``.

    Args:
        slot: Declared storage slot

    Returns:
        The slot number as a 32-byte key
    """
    return serialize_uint256(slot)


def get_address_mapping(address: bytes, slot: int) -> bytes:
    """
    Get the storage key for an entry of an address-keyed mapping.

    The key is keccak256 over the address and the mapping slot, each
    left-padded to 32 bytes and concatenated (64 bytes total).

    Args:
        address: 20-byte mapping key
        slot: Declared slot of the mapping (non-negative)

    Returns:
        32-byte storage key

    Raises:
        InvalidInput: If the address is not 20 bytes or the slot is negative
    """
    data = pad_left(check_address(address)) + serialize_uint256(slot)
    return keccak(data)


def get_dynamic_array_base(slot: int) -> bytes:
    """
    Get the key of element 0 of a dynamic array declared at ``slot``.

    Args:
        slot: Declared slot of the array (holds its length)

    Returns:
        keccak256 of the padded slot number
    """
    return keccak(serialize_uint256(slot))


def get_index_with_offset(keccak_hash: bytes, offset: int) -> bytes:
    """
    Add an offset to an already computed keccak hash.

    The hash is read as an unsigned big-endian integer. The sum is returned as
    minimal-length big-endian bytes, so it may be shorter than 32 bytes (and
    33 bytes on carry past 2^256). Callers re-pad with ``to_storage_key``.

    Args:
        keccak_hash: Base hash (usually 32 bytes)
        offset: Non-negative element offset

    Returns:
        Big-endian bytes of ``hash + offset`` without leading zeros

    Raises:
        InvalidInput: If offset is negative
    """
    base = int.from_bytes(keccak_hash, "big")
    return int_to_min_bytes(base + check_unsigned(offset, "offset"))
