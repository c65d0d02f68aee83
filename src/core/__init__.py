"""Core module - models and constants."""

from .models import Market, FormattedReserve, ReserveData, ReservesData, BaseCurrencyData
from .constants import ChainId, RAY, SECONDS_PER_YEAR

__all__ = [
    "Market",
    "FormattedReserve",
    "ReserveData",
    "ReservesData",
    "BaseCurrencyData",
    "ChainId",
    "RAY",
    "SECONDS_PER_YEAR",
]
