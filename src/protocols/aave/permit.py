"""Underlying assets supporting EIP-2612 permit, per chain.

Keys are lowercased underlying asset addresses, matching the humanized
reserve data. Only presence matters; chains missing here have no permit
configuration at all.
"""

from types import MappingProxyType
from typing import Mapping

from src.core.constants import ChainId

PERMIT_BY_CHAIN_AND_TOKEN: Mapping[ChainId, Mapping[str, bool]] = MappingProxyType({
    ChainId.MAINNET: MappingProxyType({
        "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48": True,  # USDC
        "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9": True,  # AAVE
        "0x40d16fc0246ad3160ccc09b8d0d3a2cd28ae6c2f": True,  # GHO
        "0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0": True,  # wstETH
        "0x5f98805a4e8be255a32880fdec7f6728c6568ba0": True,  # LUSD
        "0xf939e0a03fb07f59a73314e73794be0e57ac1b4e": True,  # crvUSD
        "0x6c3ea9036406852006290770bedfcaba0e23a0e8": True,  # PYUSD
        "0xcd5fe23c85820f7b72d0926fc9b05b43e359b7ee": True,  # weETH
        "0x4c9edd5852cd905f086c759e8383e09bff1e68b3": True,  # USDe
        "0x9d39a5de30e57443bff2a8307a4256c8797a3497": True,  # sUSDe
        "0xcbb7c0000ab88b473b1f5afd9ef808440eed33bf": True,  # cbBTC
    }),
    ChainId.POLYGON: MappingProxyType({
        "0x3c499c542cef5e3811e1192ce70d8cc03d5c3359": True,  # USDC
        "0xd6df932a45c0f255f85145f286ea0b292b21c90b": True,  # AAVE
        "0x03b54a6e9a984069379fae1a4fc4dbae93b3bccd": True,  # wstETH
    }),
    ChainId.ARBITRUM_ONE: MappingProxyType({
        "0xaf88d065e77c8cc2239327c5edb3a432268e5831": True,  # USDC
        "0x912ce59144191c1204e64559fe8253a0e49e6548": True,  # ARB
        "0x5979d7b546e38e414f7e9822514be443a4800529": True,  # wstETH
        "0x7dff72693f6a4149b17e7c6314655f6a9f7c8b33": True,  # GHO
        "0x35751007a407ca6feffe80b3cb397736d2cf4dbe": True,  # weETH
    }),
    ChainId.AVALANCHE: MappingProxyType({
        "0xb97ef9ef8734c71904d8002f8b6bc66dd9c48a6e": True,  # USDC
        "0x2b2c81e08f1af8835a78bb2a90ae924ace0ea4be": True,  # sAVAX
    }),
    ChainId.BASE: MappingProxyType({
        "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913": True,  # USDC
        "0x2ae3f1ec7f1f5012cfeab0185bfc7aa3cf0dec22": True,  # cbETH
        "0xc1cba3fcea344f92d9239c08c0568f6f2f0ee452": True,  # wstETH
        "0x04c0599ae5a44757c0af6f9ec3b93da8976c150a": True,  # weETH
        "0xcbb7c0000ab88b473b1f5afd9ef808440eed33bf": True,  # cbBTC
    }),
})
