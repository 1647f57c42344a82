"""
Staking Contract Storage Indexes

This module resolves the storage keys that have to be written for every
genesis validator, so the staking contract sees them as if they had staked
through normal execution.

It is contract dependent, and based on the contract located at:
https://github.com/0xPolygon/staking-contracts/
"""

from dataclasses import dataclass

from .constants import STAKING_SCHEMA, StorageSchema
from .encoding import check_unsigned
from .keys import get_address_mapping, get_dynamic_array_base, get_index_with_offset


@dataclass(frozen=True)
class StorageIndexes:
    """Storage keys touched by one validator."""
    validators_index: bytes                 # address[], unpadded
    validator_bls_public_key_index: bytes   # mapping(address => bytes)
    address_to_is_validator_index: bytes    # mapping(address => bool)
    address_to_staked_amount_index: bytes   # mapping(address => uint256)
    address_to_validator_index_index: bytes  # mapping(address => uint256)


def get_storage_indexes(
    validator,
    index: int,
    schema: StorageSchema = STAKING_SCHEMA,
) -> StorageIndexes:
    """
    Get the storage indexes a validator occupies in the staking contract.

    Mapping entries are found at ``keccak(address . slot)``, where ``.`` is
    the concatenation of both values padded to 32 bytes. Array elements are
    found at ``keccak(pad32(slot)) + index``.

    Args:
        validator: Any object exposing a 20-byte ``address``
        index: Position of the validator in the ordered validator list
        schema: Slot schema of the contract

    Returns:
        StorageIndexes for the validator

    Raises:
        InvalidInput: If the address is malformed or the index is negative
    """
    address = validator.address
    check_unsigned(index, "index")

    return StorageIndexes(
        validators_index=get_index_with_offset(
            get_dynamic_array_base(schema.validators), index
        ),
        validator_bls_public_key_index=get_address_mapping(
            address, schema.address_to_bls_public_key
        ),
        address_to_is_validator_index=get_address_mapping(
            address, schema.address_to_is_validator
        ),
        address_to_staked_amount_index=get_address_mapping(
            address, schema.address_to_staked_amount
        ),
        address_to_validator_index_index=get_address_mapping(
            address, schema.address_to_validator_index
        ),
    )
