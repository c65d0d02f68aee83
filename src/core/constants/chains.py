"""EVM chain identifiers."""

from enum import IntEnum


class ChainId(IntEnum):
    """Supported EVM chain ids."""

    MAINNET = 1
    OPTIMISM = 10
    BNB = 56
    POLYGON = 137
    BASE = 8453
    ARBITRUM_ONE = 42161
    AVALANCHE = 43114
