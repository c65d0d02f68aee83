"""Data layer for the Aave markets reader."""

from .pipeline import (
    MarketsPipeline,
    UnknownChainError,
    fetch_formatted_pool_reserves,
    fetch_markets_data,
)
from .clients.base import ReservesDataClient
from .clients.aave import UiPoolDataProvider, AaveParser
from .formatters import format_reserve, format_reserves

__all__ = [
    # Core
    "MarketsPipeline",
    "UnknownChainError",
    "fetch_formatted_pool_reserves",
    "fetch_markets_data",
    # Clients
    "ReservesDataClient",
    "UiPoolDataProvider",
    "AaveParser",
    # Formatting
    "format_reserve",
    "format_reserves",
]
