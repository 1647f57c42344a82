"""
Staking Contract Predeploy

This module builds the genesis account of the PoS staking contract, with its
storage pre-populated as if every genesis validator had already staked.

The storage map is built as a fold: each validator's entries are computed on
their own (``build_validator_storage``) and merged into the account map in
validator order (``merge_storage``). Per-validator keys are unique, so any
collision during the merge is a schema violation.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .bytecode import STAKING_SC_BYTECODE
from .models import PredeployParams, GenesisAccountModel
from .storage import (
    STAKING_SCHEMA,
    StorageMap,
    StorageSchema,
    StakingStorageError,
    SchemaViolation,
    get_slot_key,
    get_storage_indexes,
    serialize_address,
    serialize_bool,
    serialize_uint256,
    set_bytes_to_storage,
    to_storage_key,
    hex_to_bytes,
    bytes_to_hex,
    word_to_hex,
)

logger = logging.getLogger(__name__)


class PredeployError(Exception):
    """Raised when the staking contract genesis account cannot be built."""
    pass


@dataclass
class GenesisAccount:
    """Genesis allocation of the staking contract."""
    code: bytes
    storage: StorageMap = field(default_factory=dict)
    balance: int = 0

    def to_model(self, include_code: bool = True) -> GenesisAccountModel:
        """Convert the account to its JSON model, storage sorted by key."""
        return GenesisAccountModel(
            code=bytes_to_hex(self.code) if include_code else None,
            storage={
                word_to_hex(key): word_to_hex(value)
                for key, value in sorted(self.storage.items())
            },
            balance=hex(self.balance),
        )

    def to_dict(self, include_code: bool = True) -> dict:
        return self.to_model(include_code).model_dump(exclude_none=True)


def build_validator_storage(
    validator,
    index: int,
    staked_balance: int,
    schema: StorageSchema = STAKING_SCHEMA,
) -> StorageMap:
    """
    Compute the storage entries contributed by a single validator.

    Args:
        validator: Validator exposing ``address`` and ``bls_public_key``
        index: Position of the validator in the validator list
        staked_balance: Stake credited to the validator
        schema: Slot schema of the contract

    Returns:
        A fresh storage map holding only this validator's entries
    """
    indexes = get_storage_indexes(validator, index, schema)
    storage: StorageMap = {}

    # validators[index] = address
    storage[to_storage_key(indexes.validators_index)] = serialize_address(validator.address)

    bls_public_key = getattr(validator, "bls_public_key", None)
    if bls_public_key is not None:
        set_bytes_to_storage(
            storage,
            indexes.validator_bls_public_key_index,
            bls_public_key,
        )

    storage[to_storage_key(indexes.address_to_is_validator_index)] = serialize_bool(True)
    storage[to_storage_key(indexes.address_to_staked_amount_index)] = serialize_uint256(staked_balance)
    storage[to_storage_key(indexes.address_to_validator_index_index)] = serialize_uint256(index)

    logger.debug(
        f"Validator {index} (0x{validator.address.hex()}): {len(storage)} storage entries"
    )
    return storage


def merge_storage(target: StorageMap, entries: StorageMap) -> StorageMap:
    """
    Merge ``entries`` into a copy of ``target``.

    The copy keeps the fold pure at the cost of O(len(target)) per call, so
    folding n validators is O(n^2) overall. That stays well under a second
    for a few thousand genesis validators.

    Raises:
        SchemaViolation: If any key of ``entries`` is already present
    """
    collisions = target.keys() & entries.keys()
    if collisions:
        key = min(collisions)
        raise SchemaViolation(
            f"Storage key 0x{key.hex()} written twice "
            f"({len(collisions)} colliding keys); duplicate validator address?"
        )

    merged = dict(target)
    merged.update(entries)
    return merged


def apply_validator(
    storage: StorageMap,
    validator,
    index: int,
    params: PredeployParams,
    schema: StorageSchema = STAKING_SCHEMA,
) -> StorageMap:
    """Fold step: return ``storage`` extended with one validator's entries."""
    return merge_storage(
        storage,
        build_validator_storage(validator, index, params.default_staked_balance, schema),
    )


def build_contract_storage(
    validators: Sequence,
    params: PredeployParams,
    schema: StorageSchema = STAKING_SCHEMA,
) -> StorageMap:
    """
    Build the full storage map of the staking contract.

    Args:
        validators: Ordered validator list
        params: Predeploy parameters
        schema: Slot schema of the contract

    Returns:
        Storage key -> storage value map

    Runs in O(n^2) for n validators, see ``merge_storage``.

    Raises:
        InvalidInput: If a validator address is malformed
        SchemaViolation: If two validators map to the same storage key
    """
    storage: StorageMap = {}
    for index, validator in enumerate(validators):
        storage = apply_validator(storage, validator, index, params, schema)

    scalars = {
        get_slot_key(schema.validators): serialize_uint256(len(validators)),
        get_slot_key(schema.staked_amount): serialize_uint256(
            total_staked_amount(validators, params)
        ),
        get_slot_key(schema.min_num_validators): serialize_uint256(params.min_validator_count),
        get_slot_key(schema.max_num_validators): serialize_uint256(params.max_validator_count),
    }
    return merge_storage(storage, scalars)


def total_staked_amount(validators: Sequence, params: PredeployParams) -> int:
    """Total stake held by the contract: one default stake per validator."""
    return len(validators) * params.default_staked_balance


def predeploy_staking_contract(
    validators: Optional[Iterable] = None,
    params: Optional[PredeployParams] = None,
    schema: StorageSchema = STAKING_SCHEMA,
) -> GenesisAccount:
    """
    Set up the staking contract account using the given validators as
    pre-staked validators.

    Args:
        validators: Ordered validators, None is treated as an empty set
        params: Predeploy parameters, defaults when None
        schema: Slot schema of the contract

    Returns:
        GenesisAccount with code, storage and balance set

    Raises:
        PredeployError: If the storage layout cannot be computed
    """
    params = params or PredeployParams()
    validator_list: List = list(validators or [])

    try:
        storage = build_contract_storage(validator_list, params, schema)
    except StakingStorageError as e:
        raise PredeployError(f"Unable to build staking contract storage: {e}") from e

    account = GenesisAccount(
        code=hex_to_bytes(STAKING_SC_BYTECODE),
        storage=storage,
        balance=total_staked_amount(validator_list, params),
    )

    logger.info(
        f"Predeployed staking contract with {len(validator_list)} validators, "
        f"{len(storage)} storage entries, balance {account.balance}"
    )
    return account
