"""
Storage Key Derivation Tests

Unit tests for word encoding, mapping keys, array element keys and the
per-validator index resolver.
"""

import unittest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from eth_utils import keccak

from staking_genesis.storage import (
    STAKING_SCHEMA,
    StorageSchema,
    InvalidInput,
    SchemaViolation,
    int_to_min_bytes,
    pad_left,
    serialize_uint256,
    serialize_address,
    to_storage_key,
    deserialize_uint256,
    get_slot_key,
    get_address_mapping,
    get_dynamic_array_base,
    get_index_with_offset,
    get_storage_indexes,
)
from staking_genesis.validators import ECDSAValidator

# keccak256(uint256(0)), the data location of an address[] declared at slot 0
KECCAK_SLOT_0 = bytes.fromhex(
    "290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563"
)
# keccak256(uint256(1))
KECCAK_SLOT_1 = bytes.fromhex(
    "b10e2d527612073b26eecdfd717e6a320cf44b4afac2b0732d9fcbe2b7fa0cf6"
)

ADDRESS_A = b"\x11" * 20
ADDRESS_B = b"\x22" * 20


class TestWordEncoding(unittest.TestCase):

    def test_int_to_min_bytes(self):
        self.assertEqual(int_to_min_bytes(0), b"")
        self.assertEqual(int_to_min_bytes(1), b"\x01")
        self.assertEqual(int_to_min_bytes(256), b"\x01\x00")
        self.assertEqual(int_to_min_bytes(2**256), b"\x01" + b"\x00" * 32)

    def test_int_to_min_bytes_rejects_negative(self):
        with self.assertRaises(InvalidInput):
            int_to_min_bytes(-1)
        with self.assertRaises(InvalidInput):
            int_to_min_bytes(True)

    def test_pad_left(self):
        self.assertEqual(pad_left(b"\x01\x02"), b"\x00" * 30 + b"\x01\x02")
        self.assertEqual(pad_left(b""), b"\x00" * 32)
        with self.assertRaises(InvalidInput):
            pad_left(b"\x01" * 33)

    def test_serialize_uint256(self):
        self.assertEqual(serialize_uint256(0), b"\x00" * 32)
        self.assertEqual(serialize_uint256(1), b"\x00" * 31 + b"\x01")
        self.assertEqual(serialize_uint256(2**256 - 1), b"\xff" * 32)
        self.assertEqual(
            serialize_uint256(0x8AC7230489E80000),
            b"\x00" * 24 + bytes.fromhex("8ac7230489e80000"),
        )
        with self.assertRaises(InvalidInput):
            serialize_uint256(2**256)
        with self.assertRaises(InvalidInput):
            serialize_uint256(-5)

    def test_deserialize_uint256(self):
        self.assertEqual(deserialize_uint256(serialize_uint256(12345)), 12345)
        with self.assertRaises(InvalidInput):
            deserialize_uint256(b"\x01")

    def test_serialize_address(self):
        self.assertEqual(serialize_address(ADDRESS_A), b"\x00" * 12 + ADDRESS_A)
        with self.assertRaises(InvalidInput):
            serialize_address(b"\x11" * 19)
        with self.assertRaises(InvalidInput):
            serialize_address("0x" + "11" * 20)

    def test_to_storage_key(self):
        self.assertEqual(to_storage_key(b""), b"\x00" * 32)
        self.assertEqual(to_storage_key(b"\x07"), b"\x00" * 31 + b"\x07")
        self.assertEqual(to_storage_key(7), b"\x00" * 31 + b"\x07")
        self.assertEqual(to_storage_key(b"\x00" * 40 + b"\x07"), b"\x00" * 31 + b"\x07")

    def test_to_storage_key_rejects_carry(self):
        with self.assertRaises(SchemaViolation):
            to_storage_key(b"\x01" + b"\x00" * 32)


class TestSlotKeys(unittest.TestCase):

    def test_get_slot_key(self):
        self.assertEqual(get_slot_key(0), b"\x00" * 32)
        self.assertEqual(get_slot_key(6), b"\x00" * 31 + b"\x06")

    def test_dynamic_array_base(self):
        self.assertEqual(get_dynamic_array_base(0), KECCAK_SLOT_0)
        self.assertEqual(get_dynamic_array_base(1), KECCAK_SLOT_1)


class TestAddressMapping(unittest.TestCase):

    def test_matches_padded_concatenation(self):
        expected = keccak(b"\x00" * 12 + ADDRESS_A + b"\x00" * 31 + b"\x01")
        self.assertEqual(get_address_mapping(ADDRESS_A, 1), expected)
        self.assertEqual(len(expected), 32)

    def test_deterministic(self):
        self.assertEqual(
            get_address_mapping(ADDRESS_A, 3),
            get_address_mapping(bytearray(ADDRESS_A), 3),
        )

    def test_distinct_inputs_give_distinct_keys(self):
        keys = {
            get_address_mapping(address, slot)
            for address in (ADDRESS_A, ADDRESS_B, b"\x00" * 20)
            for slot in range(8)
        }
        self.assertEqual(len(keys), 24)

    def test_large_slot(self):
        expected = keccak(b"\x00" * 12 + ADDRESS_A + b"\xff" * 32)
        self.assertEqual(get_address_mapping(ADDRESS_A, 2**256 - 1), expected)

    def test_invalid_input(self):
        with self.assertRaises(InvalidInput):
            get_address_mapping(b"\x11" * 21, 1)
        with self.assertRaises(InvalidInput):
            get_address_mapping(ADDRESS_A, -1)
        with self.assertRaises(InvalidInput):
            get_address_mapping(ADDRESS_A, 2**256)
        with self.assertRaises(InvalidInput):
            get_address_mapping(ADDRESS_A, None)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            get_address_mapping(b"", 1)


class TestIndexWithOffset(unittest.TestCase):

    def test_zero_offset_is_identity(self):
        self.assertEqual(get_index_with_offset(KECCAK_SLOT_0, 0), KECCAK_SLOT_0)

    def test_successor_law(self):
        previous = int.from_bytes(KECCAK_SLOT_0, "big")
        for n in range(1, 20):
            current = int.from_bytes(get_index_with_offset(KECCAK_SLOT_0, n), "big")
            self.assertEqual(current, previous + 1)
            previous = current

    def test_result_is_minimal_length(self):
        self.assertEqual(get_index_with_offset(b"\x00" * 32, 0), b"")
        self.assertEqual(get_index_with_offset(b"\x00" * 32, 5), b"\x05")
        self.assertEqual(get_index_with_offset(b"\x00" * 31 + b"\xff", 1), b"\x01\x00")

    def test_carry_is_not_truncated(self):
        result = get_index_with_offset(b"\xff" * 32, 1)
        self.assertEqual(result, b"\x01" + b"\x00" * 32)
        with self.assertRaises(SchemaViolation):
            to_storage_key(result)

    def test_negative_offset(self):
        with self.assertRaises(InvalidInput):
            get_index_with_offset(KECCAK_SLOT_0, -1)


class TestStorageIndexes(unittest.TestCase):

    def test_indexes_for_validator(self):
        indexes = get_storage_indexes(ECDSAValidator(ADDRESS_A), 0)

        self.assertEqual(indexes.validators_index, KECCAK_SLOT_0)
        self.assertEqual(
            indexes.address_to_is_validator_index, get_address_mapping(ADDRESS_A, 1)
        )
        self.assertEqual(
            indexes.address_to_staked_amount_index, get_address_mapping(ADDRESS_A, 2)
        )
        self.assertEqual(
            indexes.address_to_validator_index_index, get_address_mapping(ADDRESS_A, 3)
        )
        self.assertEqual(
            indexes.validator_bls_public_key_index, get_address_mapping(ADDRESS_A, 7)
        )

    def test_array_element_follows_position(self):
        for i in range(5):
            indexes = get_storage_indexes(ECDSAValidator(ADDRESS_A), i)
            self.assertEqual(
                int.from_bytes(indexes.validators_index, "big"),
                int.from_bytes(KECCAK_SLOT_0, "big") + i,
            )

    def test_schema_is_immutable(self):
        with self.assertRaises(Exception):
            STAKING_SCHEMA.validators = 9

    def test_explicit_schema(self):
        schema = StorageSchema(address_to_is_validator=11)
        indexes = get_storage_indexes(ECDSAValidator(ADDRESS_A), 0, schema)
        self.assertEqual(
            indexes.address_to_is_validator_index, get_address_mapping(ADDRESS_A, 11)
        )

    def test_schema_rejects_shared_slots(self):
        # a mapping sharing its slot with another mapping
        with self.assertRaises(SchemaViolation):
            StorageSchema(address_to_staked_amount=1)
        # a scalar sharing its slot with another scalar
        with self.assertRaises(SchemaViolation):
            StorageSchema(staked_amount=5)

    def test_schema_rejects_invalid_slots(self):
        for slot in (-1, 2**256, "4", True):
            with self.subTest(slot=slot):
                with self.assertRaises(InvalidInput):
                    StorageSchema(staked_amount=slot)

    def test_negative_position(self):
        with self.assertRaises(InvalidInput):
            get_storage_indexes(ECDSAValidator(ADDRESS_A), -1)


if __name__ == "__main__":
    unittest.main()
