"""Aave v3 protocol configuration."""

from src.protocols.aave.abi import UI_POOL_DATA_PROVIDER_ABI, UI_POOL_RESERVE_KEYS
from src.protocols.aave.config import AAVE_V3_MARKETS, ChainConfig, build_chain_config
from src.protocols.aave.permit import PERMIT_BY_CHAIN_AND_TOKEN

__all__ = [
    "UI_POOL_DATA_PROVIDER_ABI",
    "UI_POOL_RESERVE_KEYS",
    "AAVE_V3_MARKETS",
    "ChainConfig",
    "build_chain_config",
    "PERMIT_BY_CHAIN_AND_TOKEN",
]
