"""
Genesis Validator Types

Validators handed to the genesis builder. Every validator has an address;
BLS validators additionally carry a BLS public key that is mirrored into
the staking contract's ``address => bytes`` mapping.
"""

from dataclasses import dataclass
from typing import Optional

from .storage.encoding import check_address
from .storage.errors import InvalidInput


@dataclass(frozen=True)
class ECDSAValidator:
    """Validator identified by its ECDSA address only."""
    address: bytes

    def __post_init__(self):
        check_address(self.address)

    @property
    def bls_public_key(self) -> Optional[bytes]:
        return None


@dataclass(frozen=True)
class BLSValidator:
    """Validator with an ECDSA address and a BLS public key."""
    address: bytes
    bls_public_key: bytes

    def __post_init__(self):
        check_address(self.address)
        if not isinstance(self.bls_public_key, (bytes, bytearray)):
            raise InvalidInput(
                f"BLS public key must be bytes, got {type(self.bls_public_key).__name__}"
            )


def new_validator(address: bytes, bls_public_key: Optional[bytes] = None):
    """Build the validator variant matching the given fields."""
    if bls_public_key is None:
        return ECDSAValidator(address=address)
    return BLSValidator(address=address, bls_public_key=bls_public_key)

