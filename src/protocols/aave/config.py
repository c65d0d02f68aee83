"""Aave v3 per-chain market configuration."""

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping, Optional

from config.settings import Settings
from src.core.constants import ChainId


@dataclass(frozen=True)
class ChainConfig:
    """RPC endpoint and Aave v3 periphery addresses for one chain."""

    provider_rpc: str
    ui_pool_data_provider_address: str
    lending_pool_address_provider: str


# Aave v3 deployments with public RPC defaults
AAVE_V3_MARKETS: Mapping[ChainId, ChainConfig] = MappingProxyType({
    ChainId.MAINNET: ChainConfig(
        provider_rpc="https://eth.llamarpc.com",
        ui_pool_data_provider_address="0x56b7A1012765C285afAC8b8F25C69Bf10ccfE978",
        lending_pool_address_provider="0x2f39d218133AFaB8F2B819B1066c7E434Ad94E9e",
    ),
    ChainId.POLYGON: ChainConfig(
        provider_rpc="https://polygon-rpc.com",
        ui_pool_data_provider_address="0xFa1A7c4a8A63C9CAb150529c26f182cBB5500944",
        lending_pool_address_provider="0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
    ),
    ChainId.ARBITRUM_ONE: ChainConfig(
        provider_rpc="https://arb1.arbitrum.io/rpc",
        ui_pool_data_provider_address="0x13c833256BD767da2320d727a3691BAff3770E39",
        lending_pool_address_provider="0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
    ),
    ChainId.AVALANCHE: ChainConfig(
        provider_rpc="https://api.avax.network/ext/bc/C/rpc",
        ui_pool_data_provider_address="0x3518E8927A7827CDdAf841872453003CA95906A3",
        lending_pool_address_provider="0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
    ),
    ChainId.BASE: ChainConfig(
        provider_rpc="https://mainnet.base.org",
        ui_pool_data_provider_address="0xb84A20e848baE3e13897934bB4e74E2225f4546B",
        lending_pool_address_provider="0xe20fCBdBfFC4Dd138cE8b2E6FBb6CB49777ad64D",
    ),
    ChainId.BNB: ChainConfig(
        provider_rpc="https://bsc-dataseed.binance.org",
        ui_pool_data_provider_address="0x632b5Dfc315b228bfE779E6442322Ad8a110Ea13",
        lending_pool_address_provider="0xff75B6da14FfbbfD355Daf7a2731456b3562Ba6D",
    ),
})


def build_chain_config(settings: Optional[Settings] = None) -> Mapping[ChainId, ChainConfig]:
    """Build the read-only chain table with RPC endpoints resolved from settings.

    Args:
        settings: Application settings; public RPC defaults are used without them

    Returns:
        Mapping of chain id to ChainConfig
    """
    if settings is None:
        return AAVE_V3_MARKETS

    resolved = {}
    for chain_id, chain in AAVE_V3_MARKETS.items():
        rpc_url = settings.rpc_url_for(chain_id)
        resolved[chain_id] = replace(chain, provider_rpc=rpc_url) if rpc_url else chain
    return MappingProxyType(resolved)
