"""
Predeploy Models Package

Pydantic models for validating predeploy parameters and for serializing the
resulting genesis account.

Usage:
    from staking_genesis.models import PredeployParams

    params = PredeployParams(min_validator_count=1, max_validator_count=5)
"""

from .predeploy_models import (
    PredeployParams,
    GenesisAccountModel,
)

__all__ = [
    'PredeployParams',
    'GenesisAccountModel',
]
