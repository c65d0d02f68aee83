"""Aave v3 UiPoolDataProvider client implementing ReservesDataClient.

Reads all reserves of a pool through the UiPoolDataProviderV3 view contract
with a single eth_call over a read-only JSON-RPC connection.
"""

import logging
from typing import Optional

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3

from config.settings import Settings, get_settings
from src.core.models import ReservesData
from src.data.clients.aave.parser import AaveParser
from src.data.clients.base import ReservesDataClient
from src.protocols.aave.abi import UI_POOL_DATA_PROVIDER_ABI
from src.protocols.aave.config import ChainConfig

logger = logging.getLogger(__name__)


class UiPoolDataProvider(ReservesDataClient):
    """web3 client for the UiPoolDataProviderV3 view contract."""

    def __init__(
        self,
        ui_pool_data_provider_address: str,
        provider: AsyncHTTPProvider,
        chain_id: int,
    ):
        self._web3 = AsyncWeb3(provider)
        self._address = AsyncWeb3.to_checksum_address(ui_pool_data_provider_address)
        self._chain_id = int(chain_id)
        self._parser = AaveParser()
        self._contract = self._web3.eth.contract(
            address=self._address,
            abi=UI_POOL_DATA_PROVIDER_ABI,
        )

    @classmethod
    def from_chain_config(
        cls,
        chain_id: int,
        chain: ChainConfig,
        settings: Optional[Settings] = None,
    ) -> "UiPoolDataProvider":
        """Create a client with a fresh HTTP provider for the chain's RPC endpoint."""
        settings = settings or get_settings()
        provider = AsyncHTTPProvider(
            chain.provider_rpc,
            request_kwargs={"timeout": ClientTimeout(total=settings.rpc_request_timeout)},
        )
        return cls(chain.ui_pool_data_provider_address, provider, chain_id)

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def get_reserves_humanized(self, lending_pool_address_provider: str) -> ReservesData:
        """Fetch reserves and base currency data for a pool."""
        logger.debug(
            f"Fetching reserves from {self._address} on chain {self._chain_id} "
            f"for provider {lending_pool_address_provider}"
        )
        reserves_raw, base_currency_raw = await self._contract.functions.getReservesData(
            AsyncWeb3.to_checksum_address(lending_pool_address_provider)
        ).call()

        result = self._parser.parse_reserves_response(
            reserves_raw,
            base_currency_raw,
            self._chain_id,
            lending_pool_address_provider,
        )
        logger.info(f"Fetched {len(result.reserves)} reserves on chain {self._chain_id}")
        return result

    async def close(self) -> None:
        """Close the HTTP sessions held by the provider."""
        await self._web3.provider.disconnect()
