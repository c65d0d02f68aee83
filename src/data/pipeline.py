"""Data pipeline for Aave v3 markets.

Fetches a pool's reserves through the UiPoolDataProvider view contract,
formats them into human-readable units and assembles the public Market
list annotated with permit support.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Mapping, Optional

from config.settings import Settings, get_settings
from src.core.models import FormattedReserve, Market, ReserveData
from src.data.clients.aave.client import UiPoolDataProvider
from src.data.clients.base import ReservesDataClient
from src.data.formatters.reserve import format_reserves
from src.protocols.aave.config import ChainConfig, build_chain_config
from src.protocols.aave.permit import PERMIT_BY_CHAIN_AND_TOKEN

logger = logging.getLogger(__name__)


class UnknownChainError(ValueError):
    """Raised when no Aave v3 market is configured for a chain id."""


ClientFactory = Callable[[int, ChainConfig], ReservesDataClient]
ReserveFormatter = Callable[[List[ReserveData], int, int, int], List[FormattedReserve]]


def get_timestamp() -> int:
    """Current unix timestamp in seconds."""
    return int(datetime.now(timezone.utc).timestamp())


class MarketsPipeline:
    """Reads and assembles Aave v3 market data for configured chains.

    Every call is independent: a fresh client is created per fetch and
    nothing is cached between calls.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        chain_config: Optional[Mapping[int, ChainConfig]] = None,
        permit_config: Optional[Mapping[int, Mapping[str, bool]]] = None,
        client_factory: Optional[ClientFactory] = None,
        formatter: ReserveFormatter = format_reserves,
        clock: Callable[[], int] = get_timestamp,
    ):
        """Initialize the pipeline.

        Args:
            settings: Application settings
            chain_config: Chain id -> ChainConfig table (built from settings if None)
            permit_config: Chain id -> {underlying asset -> permit descriptor}
            client_factory: Creates a reserves client for (chain_id, ChainConfig)
            formatter: Turns humanized reserves into FormattedReserve records
            clock: Returns the current unix timestamp in seconds
        """
        self.settings = settings or get_settings()
        if chain_config is None:
            chain_config = build_chain_config(self.settings)
        self._chain_config = chain_config
        if permit_config is None:
            permit_config = PERMIT_BY_CHAIN_AND_TOKEN
        self._permit_config = permit_config
        self._client_factory = client_factory or self._default_client_factory
        self._formatter = formatter
        self._clock = clock

    def _default_client_factory(self, chain_id: int, chain: ChainConfig) -> ReservesDataClient:
        return UiPoolDataProvider.from_chain_config(chain_id, chain, self.settings)

    @property
    def available_chains(self) -> List[int]:
        """Chain ids with an Aave v3 market configured."""
        return list(self._chain_config.keys())

    def get_chain_config(self, chain_id: int) -> ChainConfig:
        """Get the configuration for a chain.

        Raises:
            UnknownChainError: If the chain is not configured
        """
        chain = self._chain_config.get(chain_id)
        if chain is None:
            raise UnknownChainError(f"Bad chain id: {chain_id}")
        return chain

    # ========== RESERVES ==========

    async def fetch_formatted_pool_reserves(self, chain_id: int) -> List[FormattedReserve]:
        """Fetch all reserves of a chain's pool in human-readable units.

        Args:
            chain_id: Chain to read from

        Returns:
            Formatted reserves in on-chain order

        Raises:
            UnknownChainError: If the chain is not configured (before any network I/O)
        """
        chain = self.get_chain_config(chain_id)

        client = self._client_factory(chain_id, chain)
        try:
            reserves = await client.get_reserves_humanized(chain.lending_pool_address_provider)
        finally:
            await client.close()

        base_currency = reserves.base_currency
        return self._formatter(
            reserves.reserves,
            self._clock(),
            base_currency.market_reference_currency_decimals,
            base_currency.market_reference_currency_price_in_usd,
        )

    # ========== MARKETS ==========

    async def fetch_markets_data(self, chain_id: int) -> List[Market]:
        """Fetch active markets of a chain, flagged with permit support.

        Frozen and paused reserves are dropped. A chain without permit
        configuration yields an empty list.

        Args:
            chain_id: Chain to read from

        Returns:
            Markets in on-chain order
        """
        formatted_reserves = await self.fetch_formatted_pool_reserves(chain_id)

        permit_config = self._permit_config.get(chain_id)
        if permit_config is None:
            logger.error(f"Permit config for chain id {chain_id} is not defined")
            return []

        markets = []
        for reserve in formatted_reserves:
            if reserve.is_frozen or reserve.is_paused:
                continue

            support_permit = reserve.underlying_asset in permit_config
            if not support_permit:
                logger.warning(
                    f"Permit config for underlying asset {reserve.underlying_asset} "
                    f"on chain id {chain_id} is not defined"
                )
            markets.append(self.to_market(reserve, support_permit))

        return markets

    @staticmethod
    def to_market(reserve: FormattedReserve, support_permit: bool) -> Market:
        """Project a formatted reserve onto the public Market record."""
        return Market(
            id=reserve.id,
            underlying_asset=reserve.underlying_asset,
            name=reserve.name,
            symbol=reserve.symbol,
            decimals=reserve.decimals,
            supply_apy=reserve.supply_apy,
            market_reference_price_in_usd=reserve.price_in_usd,
            usage_as_collateral_enabled=reserve.usage_as_collateral_enabled,
            borrowing_enabled=reserve.borrowing_enabled,
            a_token_address=reserve.a_token_address,
            variable_debt_token_address=reserve.variable_debt_token_address,
            is_isolated=reserve.is_isolated,
            available_liquidity=reserve.available_liquidity,
            available_liquidity_usd=reserve.available_liquidity_usd,
            variable_borrow_apy=reserve.variable_borrow_apy,
            support_permit=support_permit,
        )


async def fetch_formatted_pool_reserves(chain_id: int) -> List[FormattedReserve]:
    """Fetch formatted reserves for a chain with the default pipeline."""
    return await MarketsPipeline().fetch_formatted_pool_reserves(chain_id)


async def fetch_markets_data(chain_id: int) -> List[Market]:
    """Fetch markets for a chain with the default pipeline."""
    return await MarketsPipeline().fetch_markets_data(chain_id)
