"""
Storage Layout Constants

This module contains the constants and the slot schema used to lay out the
staking contract's storage in the EVM (Solidity) storage model.

References:
- Solidity storage layout: https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html
- Staking contract: https://github.com/0xPolygon/staking-contracts
"""

from dataclasses import dataclass
from typing import Dict

from .errors import InvalidInput, SchemaViolation

# ====================
# Word Sizes
# ====================

# Every storage key and value is a single 32-byte EVM word
WORD_SIZE = 32

# Ethereum address size
ETH_ADDRESS_SIZE = 20

# Longest payload that still fits inline next to its length byte
MAX_SHORT_BYTES_LENGTH = WORD_SIZE - 1

# Largest value a storage word can hold
UINT256_MAX = 2**256 - 1
UINT64_MAX = 2**64 - 1

# ====================
# Staking Defaults
# ====================

# 10 ETH in wei, staked on behalf of every genesis validator
DEFAULT_STAKED_BALANCE_HEX = "0x8AC7230489E80000"
DEFAULT_STAKED_BALANCE = int(DEFAULT_STAKED_BALANCE_HEX, 16)

# Upper bound kept JSON-safe for tooling reading the genesis file
MAX_SAFE_JS_INT = 2**53 - 1

DEFAULT_MIN_VALIDATOR_COUNT = 1
DEFAULT_MAX_VALIDATOR_COUNT = MAX_SAFE_JS_INT

# ====================
# Slot Schema
# ====================


@dataclass(frozen=True)
class StorageSchema:
    """
    Declared storage slots of the staking contract.

    The numbers are fixed by the compiled contract and must never be derived
    at runtime. Instances are immutable and are passed explicitly to the
    functions that need them.

    Slots must be distinct uint256 values: two variables sharing a slot would
    overwrite each other's words.
    """
    validators: int = 0                  # address[]
    address_to_is_validator: int = 1     # mapping(address => bool)
    address_to_staked_amount: int = 2    # mapping(address => uint256)
    address_to_validator_index: int = 3  # mapping(address => uint256)
    staked_amount: int = 4               # uint256
    min_num_validators: int = 5          # uint256
    max_num_validators: int = 6          # uint256
    address_to_bls_public_key: int = 7   # mapping(address => bytes)

    def __post_init__(self):
        owners: Dict[int, str] = {}
        for name, slot in self.as_dict().items():
            if isinstance(slot, bool) or not isinstance(slot, int):
                raise InvalidInput(f"Slot of {name} must be an integer, got {type(slot).__name__}")
            if slot < 0 or slot > UINT256_MAX:
                raise InvalidInput(f"Slot of {name} out of uint256 range: {slot}")
            if slot in owners:
                raise SchemaViolation(
                    f"Slot {slot} declared for both {owners[slot]} and {name}"
                )
            owners[slot] = name

    def as_dict(self) -> Dict[str, int]:
        """Return the schema as a name -> slot dictionary."""
        return {
            "validators": self.validators,
            "address_to_is_validator": self.address_to_is_validator,
            "address_to_staked_amount": self.address_to_staked_amount,
            "address_to_validator_index": self.address_to_validator_index,
            "staked_amount": self.staked_amount,
            "min_num_validators": self.min_num_validators,
            "max_num_validators": self.max_num_validators,
            "address_to_bls_public_key": self.address_to_bls_public_key,
        }


STAKING_SCHEMA = StorageSchema()
