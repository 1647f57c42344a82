"""
Dynamic Bytes Packing

Solidity stores ``bytes`` / ``string`` state variables in one of two forms,
selected by the lowest bit of the word at the variable's slot:

- short form (length <= 31): data left-aligned in the slot, lowest byte
  holds ``length * 2`` (even)
- long form (length >= 32): the slot holds ``length * 2 + 1`` (odd) and the
  data fills consecutive slots starting at ``keccak256(slot)``, the hash of
  the 32-byte slot key (an unpadded base index is padded before hashing)

References:
- https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html#bytes-and-string
"""

import logging
from typing import Dict, Union

from eth_utils import keccak

from .constants import WORD_SIZE, MAX_SHORT_BYTES_LENGTH
from .encoding import deserialize_uint256, serialize_uint256, to_storage_key
from .errors import InvalidInput
from .keys import get_index_with_offset

logger = logging.getLogger(__name__)

StorageMap = Dict[bytes, bytes]


def set_bytes_to_storage(
    storage_map: StorageMap,
    base_index: Union[bytes, int],
    data: bytes,
) -> StorageMap:
    """
    Write a dynamic byte string into ``storage_map`` starting at ``base_index``.

    Every touched slot is written as a whole word, so calling this twice with
    the same arguments leaves the same map behind.

    Args:
        storage_map: Storage map to update in place
        base_index: Key of the variable (unpadded big-endian bytes or int)
        data: Payload of any length

    Returns:
        The same ``storage_map``, for chaining

    Raises:
        InvalidInput: If data is not a byte string
        SchemaViolation: If a derived key leaves the 256-bit key space

    Examples:
        >>> storage = set_bytes_to_storage({}, b'\\x07', b'\\xab')
        >>> storage[b'\\x00' * 31 + b'\\x07'].hex()
        'ab00000000000000000000000000000000000000000000000000000000000002'
    """
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidInput(f"Payload must be bytes, got {type(data).__name__}")

    base_key = to_storage_key(base_index)
    data_len = len(data)

    if data_len <= MAX_SHORT_BYTES_LENGTH:
        slot = bytearray(WORD_SIZE)
        slot[:data_len] = data
        slot[-1] = data_len * 2
        storage_map[base_key] = bytes(slot)
        return storage_map

    # The length word is a full uint256, not a single byte
    storage_map[base_key] = serialize_uint256(data_len * 2 + 1)

    zero_index = keccak(base_key)
    for offset in range(0, data_len, WORD_SIZE):
        chunk = bytes(data[offset:offset + WORD_SIZE])
        slot_key = to_storage_key(get_index_with_offset(zero_index, offset // WORD_SIZE))
        storage_map[slot_key] = chunk.ljust(WORD_SIZE, b"\x00")

    logger.debug(
        f"Packed {data_len} bytes at 0x{base_key.hex()} into "
        f"{(data_len + WORD_SIZE - 1) // WORD_SIZE} data slots"
    )
    return storage_map


def get_bytes_from_storage(
    storage_map: StorageMap,
    base_index: Union[bytes, int],
) -> bytes:
    """
    Read back a dynamic byte string written by ``set_bytes_to_storage``.

    Missing slots read as zero words, like unset EVM storage.

    Args:
        storage_map: Storage map to read from
        base_index: Key of the variable (unpadded big-endian bytes or int)

    Returns:
        The decoded payload

    Raises:
        InvalidInput: If the length word is inconsistent with its form or
            declares more data slots than the map holds
    """
    base_key = to_storage_key(base_index)
    head = storage_map.get(base_key, bytes(WORD_SIZE))

    if head[-1] % 2 == 0:
        data_len = head[-1] // 2
        if data_len > MAX_SHORT_BYTES_LENGTH or any(head[:-1][data_len:]):
            raise InvalidInput(f"Malformed short bytes slot at 0x{base_key.hex()}")
        return head[:data_len]

    data_len = (deserialize_uint256(head) - 1) // 2
    if data_len <= MAX_SHORT_BYTES_LENGTH:
        raise InvalidInput(
            f"Long bytes form at 0x{base_key.hex()} declares only {data_len} bytes"
        )

    # Every data slot of a packed payload is present in the map
    slot_count = (data_len + WORD_SIZE - 1) // WORD_SIZE
    if slot_count > len(storage_map):
        raise InvalidInput(
            f"Long bytes form at 0x{base_key.hex()} declares {data_len} bytes, "
            f"more than the {len(storage_map)} slots in the map can hold"
        )

    zero_index = keccak(base_key)
    chunks = []
    for offset in range(0, data_len, WORD_SIZE):
        slot_key = to_storage_key(get_index_with_offset(zero_index, offset // WORD_SIZE))
        chunks.append(storage_map.get(slot_key, bytes(WORD_SIZE)))

    return b"".join(chunks)[:data_len]
