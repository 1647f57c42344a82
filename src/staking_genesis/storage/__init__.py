"""
EVM Storage Layout Library

Computes storage keys and packed storage words following the Solidity storage
layout, so contract state can be written directly into a genesis file.

Modules:
- constants: word sizes, staking defaults and the slot schema
- errors: exception hierarchy
- encoding: integer/address <-> 32-byte word conversions
- keys: mapping keys, array element keys and scalar slot keys
- indexes: per-validator key set of the staking contract
- packing: short/long dynamic bytes encoding
- utils: hex string helpers
"""

from .constants import *
from .errors import *
from .encoding import *
from .keys import *
from .indexes import *
from .packing import *
from .utils import *

__all__ = [
    # Constants
    'WORD_SIZE',
    'ETH_ADDRESS_SIZE',
    'MAX_SHORT_BYTES_LENGTH',
    'UINT256_MAX',
    'UINT64_MAX',
    'DEFAULT_STAKED_BALANCE',
    'DEFAULT_STAKED_BALANCE_HEX',
    'MAX_SAFE_JS_INT',
    'DEFAULT_MIN_VALIDATOR_COUNT',
    'DEFAULT_MAX_VALIDATOR_COUNT',
    'StorageSchema',
    'STAKING_SCHEMA',

    # Errors
    'StakingStorageError',
    'InvalidInput',
    'SchemaViolation',

    # Word encoding
    'int_to_min_bytes',
    'pad_left',
    'serialize_uint256',
    'serialize_bool',
    'serialize_address',
    'check_address',
    'check_unsigned',
    'to_storage_key',
    'deserialize_uint256',

    # Key derivation
    'get_slot_key',
    'get_address_mapping',
    'get_dynamic_array_base',
    'get_index_with_offset',

    # Validator indexes
    'StorageIndexes',
    'get_storage_indexes',

    # Dynamic bytes
    'StorageMap',
    'set_bytes_to_storage',
    'get_bytes_from_storage',

    # Utility functions
    'normalize_hex',
    'hex_to_bytes',
    'bytes_to_hex',
    'parse_uint',
    'word_to_hex',
]
