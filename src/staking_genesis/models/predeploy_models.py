"""
Predeploy Models

This module defines the Pydantic models for the staking contract predeploy:
the input parameters and the JSON shape of the resulting genesis account.
"""

from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..storage.constants import (
    DEFAULT_MIN_VALIDATOR_COUNT,
    DEFAULT_MAX_VALIDATOR_COUNT,
    DEFAULT_STAKED_BALANCE,
    UINT64_MAX,
    UINT256_MAX,
)
from ..storage.utils import parse_uint


class PredeployParams(BaseModel):
    """
    Parameters used to predeploy the PoS staking contract.

    Attributes:
        min_validator_count: Minimum number of validators (uint64)
        max_validator_count: Maximum number of validators (uint64)
        default_staked_balance: Stake credited to every genesis validator, in wei
    """
    model_config = ConfigDict(frozen=True)

    min_validator_count: int = Field(
        default=DEFAULT_MIN_VALIDATOR_COUNT, ge=0, le=UINT64_MAX,
        description="Minimum number of validators"
    )
    max_validator_count: int = Field(
        default=DEFAULT_MAX_VALIDATOR_COUNT, ge=0, le=UINT64_MAX,
        description="Maximum number of validators"
    )
    default_staked_balance: int = Field(
        default=DEFAULT_STAKED_BALANCE, ge=0, le=UINT256_MAX,
        description="Staked amount per validator in wei"
    )

    @field_validator('default_staked_balance', mode='before')
    @classmethod
    def parse_balance(cls, v: Union[int, str]):
        """Accept the balance as an integer, a decimal string or a 0x-hex string."""
        if isinstance(v, str):
            return parse_uint(v)
        return v

    @model_validator(mode='after')
    def check_bounds(self):
        if self.min_validator_count > self.max_validator_count:
            raise ValueError(
                f"min_validator_count ({self.min_validator_count}) exceeds "
                f"max_validator_count ({self.max_validator_count})"
            )
        return self


class GenesisAccountModel(BaseModel):
    """
    JSON form of a genesis alloc entry.

    Attributes:
        code: Contract bytecode as 0x-hex (omitted when not requested)
        storage: 0x-hex storage key -> 0x-hex storage value
        balance: Account balance as 0x-hex
    """
    code: Union[str, None] = Field(default=None, description="Contract bytecode")
    storage: Dict[str, str] = Field(default_factory=dict, description="Storage map")
    balance: str = Field(..., description="Account balance")
