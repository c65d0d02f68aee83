"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    SECONDS_PER_YEAR,
    WAD,
    RAY,
    HALF_RAY,
    RAY_DECIMALS,
    USD_DECIMALS,
    LTV_PRECISION,
)

from src.core.constants.chains import ChainId

__all__ = [
    # Generic
    "SECONDS_PER_YEAR",
    "WAD",
    "RAY",
    "HALF_RAY",
    "RAY_DECIMALS",
    "USD_DECIMALS",
    "LTV_PRECISION",
    # Chains
    "ChainId",
]
