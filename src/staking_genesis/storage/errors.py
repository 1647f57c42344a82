"""
Storage Layout Errors

Every error raised here is a programmer or schema error. The computation is
pure, so nothing is retried: callers abort genesis construction.
"""


class StakingStorageError(Exception):
    """Base exception for storage layout computation."""
    pass


class InvalidInput(StakingStorageError, ValueError):
    """Raised for malformed addresses, slots, offsets or storage words."""
    pass


class SchemaViolation(StakingStorageError):
    """Raised when two writes land on the same storage key or a key leaves the key space."""
    pass
