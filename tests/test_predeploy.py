"""
Staking Contract Predeploy Tests

Tests for the genesis account builder: scalar slots, per-validator mapping
entries, BLS key storage, aggregate balance and collision handling.
"""

import unittest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pydantic import ValidationError

from staking_genesis import (
    BLSValidator,
    ECDSAValidator,
    PredeployError,
    PredeployParams,
    apply_validator,
    build_contract_storage,
    build_validator_storage,
    merge_storage,
    predeploy_staking_contract,
)
from staking_genesis.bytecode import STAKING_SC_BYTECODE
from staking_genesis.storage import (
    DEFAULT_STAKED_BALANCE,
    MAX_SAFE_JS_INT,
    SchemaViolation,
    get_address_mapping,
    get_bytes_from_storage,
    get_dynamic_array_base,
    get_index_with_offset,
    get_slot_key,
    serialize_uint256,
    to_storage_key,
)

ADDRESS = b"\x11" * 20
BLS_KEY = bytes(range(48))


def word(value: int) -> bytes:
    return serialize_uint256(value)


def address_word(address: bytes) -> bytes:
    return b"\x00" * 12 + address


def make_validators(n: int):
    return [ECDSAValidator(bytes([i + 1]) * 20) for i in range(n)]


class TestSingleValidator(unittest.TestCase):

    def setUp(self):
        self.params = PredeployParams(min_validator_count=1, max_validator_count=5)
        self.account = predeploy_staking_contract([ECDSAValidator(ADDRESS)], self.params)
        self.storage = self.account.storage

    def test_scalar_slots(self):
        self.assertEqual(self.storage[get_slot_key(0)], word(1))
        self.assertEqual(self.storage[get_slot_key(4)], word(DEFAULT_STAKED_BALANCE))
        self.assertEqual(self.storage[get_slot_key(5)], word(1))
        self.assertEqual(self.storage[get_slot_key(6)], word(5))

    def test_mapping_entries(self):
        self.assertEqual(self.storage[get_address_mapping(ADDRESS, 1)], word(1))
        self.assertEqual(
            self.storage[get_address_mapping(ADDRESS, 2)], word(DEFAULT_STAKED_BALANCE)
        )
        self.assertEqual(self.storage[get_address_mapping(ADDRESS, 3)], word(0))

    def test_array_element(self):
        key = to_storage_key(get_index_with_offset(get_dynamic_array_base(0), 0))
        self.assertEqual(self.storage[key], address_word(ADDRESS))

    def test_no_bls_entry_for_ecdsa_validator(self):
        self.assertNotIn(get_address_mapping(ADDRESS, 7), self.storage)
        # 4 scalars, 1 array element, 3 mappings
        self.assertEqual(len(self.storage), 8)

    def test_balance_and_code(self):
        self.assertEqual(self.account.balance, DEFAULT_STAKED_BALANCE)
        self.assertEqual(self.account.code, bytes.fromhex(STAKING_SC_BYTECODE[2:]))

    def test_default_staked_balance(self):
        self.assertEqual(DEFAULT_STAKED_BALANCE, 10 * 10**18)


class TestEmptyValidatorSet(unittest.TestCase):

    def test_only_scalars_written(self):
        for validators in (None, []):
            with self.subTest(validators=validators):
                account = predeploy_staking_contract(validators)
                storage = account.storage

                self.assertEqual(
                    set(storage),
                    {get_slot_key(0), get_slot_key(4), get_slot_key(5), get_slot_key(6)},
                )
                self.assertEqual(storage[get_slot_key(0)], word(0))
                self.assertEqual(storage[get_slot_key(4)], word(0))
                self.assertEqual(storage[get_slot_key(5)], word(1))
                self.assertEqual(storage[get_slot_key(6)], word(MAX_SAFE_JS_INT))
                self.assertEqual(account.balance, 0)


class TestValidatorSet(unittest.TestCase):

    def test_array_indexing(self):
        validators = make_validators(6)
        storage = predeploy_staking_contract(validators).storage
        base = get_dynamic_array_base(0)

        for i, validator in enumerate(validators):
            key = to_storage_key(get_index_with_offset(base, i))
            self.assertEqual(storage[key], address_word(validator.address))
            self.assertEqual(
                storage[get_address_mapping(validator.address, 3)], word(i)
            )

    def test_aggregate_balance(self):
        n = 150
        validators = make_validators(n)
        params = PredeployParams(default_staked_balance="0x8AC7230489E80000")
        account = predeploy_staking_contract(validators, params)

        self.assertEqual(account.balance, n * DEFAULT_STAKED_BALANCE)
        self.assertEqual(account.storage[get_slot_key(4)], word(n * DEFAULT_STAKED_BALANCE))

    def test_bls_validator_public_key(self):
        validators = [BLSValidator(ADDRESS, BLS_KEY), ECDSAValidator(b"\x22" * 20)]
        storage = predeploy_staking_contract(validators).storage

        bls_index = get_address_mapping(ADDRESS, 7)
        self.assertEqual(storage[bls_index], word(2 * 48 + 1))
        self.assertEqual(get_bytes_from_storage(storage, bls_index), BLS_KEY)
        self.assertNotIn(get_address_mapping(b"\x22" * 20, 7), storage)

    def test_custom_staked_balance(self):
        params = PredeployParams(default_staked_balance=32)
        account = predeploy_staking_contract(make_validators(3), params)

        self.assertEqual(account.balance, 96)
        for validator in make_validators(3):
            self.assertEqual(
                account.storage[get_address_mapping(validator.address, 2)], word(32)
            )

    def test_duplicate_address_is_fatal(self):
        validators = [ECDSAValidator(ADDRESS), ECDSAValidator(ADDRESS)]
        with self.assertRaises(PredeployError) as ctx:
            predeploy_staking_contract(validators)
        self.assertIsInstance(ctx.exception.__cause__, SchemaViolation)

    def test_malformed_validator_is_fatal(self):
        class Broken:
            address = b"\x11" * 19
            bls_public_key = None

        with self.assertRaises(PredeployError):
            predeploy_staking_contract([Broken()])


class TestFold(unittest.TestCase):

    def test_fold_matches_builder(self):
        params = PredeployParams()
        validators = make_validators(4)

        storage = {}
        for i, validator in enumerate(validators):
            storage = apply_validator(storage, validator, i, params)

        full = build_contract_storage(validators, params)
        self.assertTrue(set(storage).issubset(full))
        self.assertEqual(len(full) - len(storage), 4)

    def test_fold_step_is_pure(self):
        params = PredeployParams()
        before = {}
        after = apply_validator(before, ECDSAValidator(ADDRESS), 0, params)

        self.assertEqual(before, {})
        self.assertEqual(len(after), 4)

    def test_partitioned_merge(self):
        params = PredeployParams()
        validators = make_validators(3)
        parts = [
            build_validator_storage(v, i, params.default_staked_balance)
            for i, v in enumerate(validators)
        ]

        merged = {}
        for part in parts:
            merged = merge_storage(merged, part)

        full = build_contract_storage(validators, params)
        for key, value in merged.items():
            self.assertEqual(full[key], value)

    def test_merge_collision(self):
        with self.assertRaises(SchemaViolation):
            merge_storage({b"\x00" * 32: word(1)}, {b"\x00" * 32: word(1)})

    def test_deterministic(self):
        validators = [BLSValidator(ADDRESS, BLS_KEY)] + make_validators(2)
        first = predeploy_staking_contract(validators)
        second = predeploy_staking_contract(validators)
        self.assertEqual(first.storage, second.storage)


class TestPredeployParams(unittest.TestCase):

    def test_defaults(self):
        params = PredeployParams()
        self.assertEqual(params.min_validator_count, 1)
        self.assertEqual(params.max_validator_count, MAX_SAFE_JS_INT)
        self.assertEqual(params.default_staked_balance, DEFAULT_STAKED_BALANCE)

    def test_balance_strings(self):
        self.assertEqual(PredeployParams(default_staked_balance="0x20").default_staked_balance, 32)
        self.assertEqual(PredeployParams(default_staked_balance="32").default_staked_balance, 32)

    def test_rejects_out_of_range(self):
        with self.assertRaises(ValidationError):
            PredeployParams(min_validator_count=-1)
        with self.assertRaises(ValidationError):
            PredeployParams(max_validator_count=2**64)
        with self.assertRaises(ValidationError):
            PredeployParams(default_staked_balance="0xzz")

    def test_rejects_inverted_bounds(self):
        with self.assertRaises(ValidationError):
            PredeployParams(min_validator_count=5, max_validator_count=1)

    def test_frozen(self):
        params = PredeployParams()
        with self.assertRaises(ValidationError):
            params.min_validator_count = 3


class TestGenesisAccountSerialization(unittest.TestCase):

    def test_to_dict(self):
        account = predeploy_staking_contract([ECDSAValidator(ADDRESS)])
        data = account.to_dict()

        self.assertEqual(data["balance"], "0x8ac7230489e80000")
        self.assertEqual(data["code"], STAKING_SC_BYTECODE.lower())
        self.assertEqual(data["storage"]["0x" + "00" * 32], "0x" + "00" * 31 + "01")
        for key, value in data["storage"].items():
            self.assertEqual(len(key), 66)
            self.assertEqual(len(value), 66)

    def test_without_code(self):
        data = predeploy_staking_contract([]).to_dict(include_code=False)
        self.assertNotIn("code", data)
        self.assertEqual(data["balance"], "0x0")


if __name__ == "__main__":
    unittest.main()
