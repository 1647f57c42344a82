"""
Storage Utility Functions

This package provides hex string helpers shared by the genesis builder
and the command line interface.
"""

from .hex_helpers import (
    normalize_hex,
    hex_to_bytes,
    bytes_to_hex,
    parse_uint,
    word_to_hex,
)

__all__ = [
    'normalize_hex',
    'hex_to_bytes',
    'bytes_to_hex',
    'parse_uint',
    'word_to_hex',
]
