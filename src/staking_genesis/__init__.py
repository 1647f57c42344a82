"""
Staking Genesis

Pre-populates the storage of the PoS staking contract for a genesis file, so
the contract starts out with the genesis validators already staked.

Usage:
    from staking_genesis import BLSValidator, PredeployParams, predeploy_staking_contract

    account = predeploy_staking_contract(
        [BLSValidator(address=b"\\x11" * 20, bls_public_key=bls_key)],
        PredeployParams(min_validator_count=1, max_validator_count=5),
    )
"""

from .models import PredeployParams, GenesisAccountModel
from .predeploy import (
    GenesisAccount,
    PredeployError,
    apply_validator,
    build_contract_storage,
    build_validator_storage,
    merge_storage,
    predeploy_staking_contract,
    total_staked_amount,
)
from .validators import BLSValidator, ECDSAValidator, new_validator

__version__ = "0.1.0"

__all__ = [
    'PredeployParams',
    'GenesisAccountModel',
    'GenesisAccount',
    'PredeployError',
    'apply_validator',
    'build_contract_storage',
    'build_validator_storage',
    'merge_storage',
    'predeploy_staking_contract',
    'total_staked_amount',
    'BLSValidator',
    'ECDSAValidator',
    'new_validator',
]
