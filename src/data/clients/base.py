"""Base reserves client interface.

Defines the abstract interface that on-chain reserve readers must implement,
so the markets pipeline can be driven by a fake in tests.
"""

from abc import ABC, abstractmethod

from src.core.models import ReservesData


class ReservesDataClient(ABC):
    """Abstract base class for clients reading a pool's aggregated reserve data."""

    @property
    @abstractmethod
    def chain_id(self) -> int:
        """Return the chain this client reads from."""
        ...

    @abstractmethod
    async def get_reserves_humanized(self, lending_pool_address_provider: str) -> ReservesData:
        """Fetch all reserves of a pool plus base currency data in one round trip.

        Args:
            lending_pool_address_provider: Address of the pool's PoolAddressesProvider

        Returns:
            ReservesData with reserves in on-chain order
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections and clean up resources."""
        ...
