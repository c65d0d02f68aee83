"""Market data model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict


def format_decimal(value: Decimal) -> str:
    """Render a Decimal in plain (non-scientific) notation."""
    return format(value, "f")


@dataclass(frozen=True)
class Market:
    """Active Aave v3 reserve as exposed to consumers."""

    id: str
    underlying_asset: str
    name: str
    symbol: str
    decimals: int

    # Rates (APY)
    supply_apy: Decimal
    variable_borrow_apy: Decimal

    # Asset price (USD)
    market_reference_price_in_usd: Decimal

    usage_as_collateral_enabled: bool
    borrowing_enabled: bool
    is_isolated: bool

    # Token contracts
    a_token_address: str
    variable_debt_token_address: str

    # Liquidity
    available_liquidity: Decimal
    available_liquidity_usd: Decimal

    # True when the underlying token supports EIP-2612 permit
    support_permit: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape, Decimals as plain strings."""
        return {
            "id": self.id,
            "underlyingAsset": self.underlying_asset,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "supplyAPY": format_decimal(self.supply_apy),
            "marketReferencePriceInUsd": format_decimal(self.market_reference_price_in_usd),
            "usageAsCollateralEnabled": self.usage_as_collateral_enabled,
            "borrowingEnabled": self.borrowing_enabled,
            "aTokenAddress": self.a_token_address,
            "variableDebtTokenAddress": self.variable_debt_token_address,
            "isIsolated": self.is_isolated,
            "availableLiquidity": format_decimal(self.available_liquidity),
            "availableLiquidityUSD": format_decimal(self.available_liquidity_usd),
            "variableBorrowAPY": format_decimal(self.variable_borrow_apy),
            "supportPermit": self.support_permit,
        }
