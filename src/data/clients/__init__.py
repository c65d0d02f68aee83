"""Protocol clients module.

Provides interfaces for reading on-chain lending protocol data.
"""

from src.data.clients.base import ReservesDataClient

__all__ = [
    "ReservesDataClient",
]
