"""Reserve data models for Aave v3 pools."""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, List

from .market import format_decimal


@dataclass(frozen=True)
class ReserveData:
    """Humanized reserve as returned by UiPoolDataProviderV3.getReservesData.

    Integer fields keep their on-chain scale (RAY rates, token base units,
    basis points). Addresses are strings; ``underlying_asset`` is lowercased.
    """

    id: str  # {chain_id}-{underlying}-{pool_address_provider}, lowercased
    underlying_asset: str
    name: str
    symbol: str
    decimals: int

    # Risk parameters (basis points)
    base_ltv_as_collateral: int
    reserve_liquidation_threshold: int
    reserve_liquidation_bonus: int
    reserve_factor: int

    # Flags
    usage_as_collateral_enabled: bool
    borrowing_enabled: bool
    is_active: bool
    is_frozen: bool

    # Indexes and rates (RAY)
    liquidity_index: int
    variable_borrow_index: int
    liquidity_rate: int
    variable_borrow_rate: int
    last_update_timestamp: int

    # Associated contracts
    a_token_address: str
    variable_debt_token_address: str
    interest_rate_strategy_address: str

    # Liquidity (token base units)
    available_liquidity: int
    total_scaled_variable_debt: int
    price_in_market_reference_currency: int
    price_oracle: str

    # Interest rate strategy (RAY)
    variable_rate_slope1: int = 0
    variable_rate_slope2: int = 0
    base_variable_borrow_rate: int = 0
    optimal_usage_ratio: int = 0

    is_paused: bool = False
    is_siloed_borrowing: bool = False
    accrued_to_treasury: int = 0
    unbacked: int = 0
    isolation_mode_total_debt: int = 0
    flash_loan_enabled: bool = False
    debt_ceiling: int = 0
    debt_ceiling_decimals: int = 0
    borrow_cap: int = 0  # whole tokens, 0 = no cap
    supply_cap: int = 0  # whole tokens, 0 = no cap
    borrowable_in_isolation: bool = False
    virtual_acc_active: bool = False
    virtual_underlying_balance: int = 0


@dataclass(frozen=True)
class BaseCurrencyData:
    """Market reference currency metadata returned alongside the reserves."""

    market_reference_currency_decimals: int
    market_reference_currency_price_in_usd: int  # USD_DECIMALS scale
    network_base_token_price_in_usd: int
    network_base_token_price_decimals: int


@dataclass(frozen=True)
class ReservesData:
    """Single getReservesData round trip: all reserves plus base currency data."""

    reserves: List[ReserveData]
    base_currency: BaseCurrencyData


@dataclass(frozen=True)
class FormattedReserve:
    """Reserve normalized to human-readable units."""

    id: str
    underlying_asset: str
    name: str
    symbol: str
    decimals: int

    # Rates
    supply_apy: Decimal
    supply_apr: Decimal
    variable_borrow_apy: Decimal
    variable_borrow_apr: Decimal

    # Prices
    price_in_market_reference_currency: Decimal
    price_in_usd: Decimal

    # Flags
    usage_as_collateral_enabled: bool
    borrowing_enabled: bool
    is_active: bool
    is_frozen: bool
    is_paused: bool
    is_isolated: bool
    is_siloed_borrowing: bool
    borrowable_in_isolation: bool
    flash_loan_enabled: bool

    # Associated contracts
    a_token_address: str
    variable_debt_token_address: str
    interest_rate_strategy_address: str
    price_oracle: str

    # Amounts (token units)
    available_liquidity: Decimal
    total_variable_debt: Decimal
    total_debt: Decimal
    total_liquidity: Decimal
    unbacked: Decimal
    utilization_rate: Decimal

    # Amounts (USD)
    available_liquidity_usd: Decimal
    total_debt_usd: Decimal
    total_liquidity_usd: Decimal

    # Risk parameters (fractions)
    base_ltv_as_collateral: Decimal
    reserve_liquidation_threshold: Decimal
    reserve_liquidation_bonus: Decimal
    reserve_factor: Decimal

    # Caps and isolation mode
    supply_cap: int = 0
    borrow_cap: int = 0
    debt_ceiling: Decimal = Decimal("0")
    isolation_mode_total_debt: Decimal = Decimal("0")

    last_update_timestamp: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with field names as keys, Decimals as plain strings."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = format_decimal(value) if isinstance(value, Decimal) else value
        return data
