"""Core data models for the Aave markets reader."""

from .market import Market
from .reserve import BaseCurrencyData, FormattedReserve, ReserveData, ReservesData

__all__ = [
    "Market",
    "BaseCurrencyData",
    "FormattedReserve",
    "ReserveData",
    "ReservesData",
]
