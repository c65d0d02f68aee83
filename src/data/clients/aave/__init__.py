"""Aave v3 UiPoolDataProvider client."""

from src.data.clients.aave.client import UiPoolDataProvider
from src.data.clients.aave.parser import AaveParser

__all__ = [
    "UiPoolDataProvider",
    "AaveParser",
]
