"""Pytest configuration and fixtures."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.core.constants import RAY
from src.core.models import BaseCurrencyData, FormattedReserve, ReserveData, ReservesData
from src.protocols.aave.abi import UI_POOL_BASE_CURRENCY_KEYS, UI_POOL_RESERVE_KEYS

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
POOL_ADDRESSES_PROVIDER = "0x2f39d218133AFaB8F2B819B1066c7E434Ad94E9e"
NOW = 1_700_000_000


@pytest.fixture
def mock_settings():
    """Create mock settings for testing."""
    from unittest.mock import MagicMock

    settings = MagicMock()
    settings.alchemy_api_key = None
    settings.rpc_urls = {}
    settings.rpc_request_timeout = 30
    settings.log_level = "WARNING"
    settings.rpc_url_for.return_value = None

    return settings


@pytest.fixture
def raw_reserve_dict() -> dict:
    """Decoded AggregatedReserveData for USDC, keyed by ABI component name."""
    return {
        "underlyingAsset": USDC,
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
        "baseLTVasCollateral": 7500,
        "reserveLiquidationThreshold": 7800,
        "reserveLiquidationBonus": 10450,
        "reserveFactor": 1000,
        "usageAsCollateralEnabled": True,
        "borrowingEnabled": True,
        "isActive": True,
        "isFrozen": False,
        "liquidityIndex": RAY,
        "variableBorrowIndex": RAY,
        "liquidityRate": 3 * 10**25,  # 3% APR
        "variableBorrowRate": 5 * 10**25,  # 5% APR
        "lastUpdateTimestamp": NOW,
        "aTokenAddress": "0x98C23E9d8f34FEFb1B7BD6a91B7FF122F4e16F5c",
        "variableDebtTokenAddress": "0x72E95b8931767C79bA4EeE721354d6E99a61D004",
        "interestRateStrategyAddress": "0x9ec6F08190DeA04A54f8Afc53Db96134e5E3FdFB",
        "availableLiquidity": 500 * 10**6,
        "totalScaledVariableDebt": 1000 * 10**6,
        "priceInMarketReferenceCurrency": 100_010_000,
        "priceOracle": "0x54586bE62E3c3580375aE3723C145253060Ca0C2",
        "variableRateSlope1": 6 * 10**25,
        "variableRateSlope2": 6 * 10**26,
        "baseVariableBorrowRate": 0,
        "optimalUsageRatio": 9 * 10**26,
        "isPaused": False,
        "isSiloedBorrowing": False,
        "accruedToTreasury": 0,
        "unbacked": 0,
        "isolationModeTotalDebt": 0,
        "flashLoanEnabled": True,
        "debtCeiling": 0,
        "debtCeilingDecimals": 2,
        "borrowCap": 0,
        "supplyCap": 0,
        "borrowableInIsolation": True,
        "virtualAccActive": False,
        "virtualUnderlyingBalance": 0,
    }


@pytest.fixture
def raw_reserve_tuple(raw_reserve_dict) -> tuple:
    """Same reserve as web3 decodes it: a tuple in ABI order."""
    return tuple(raw_reserve_dict[key] for key in UI_POOL_RESERVE_KEYS)


@pytest.fixture
def raw_base_currency_tuple() -> tuple:
    """BaseCurrencyInfo with a USD reference currency (8 decimals)."""
    values = {
        "marketReferenceCurrencyUnit": 100_000_000,
        "marketReferenceCurrencyPriceInUsd": 100_000_000,
        "networkBaseTokenPriceInUsd": 2_000 * 10**8,
        "networkBaseTokenPriceDecimals": 8,
    }
    return tuple(values[key] for key in UI_POOL_BASE_CURRENCY_KEYS)


@pytest.fixture
def sample_reserve() -> ReserveData:
    """Create a sample humanized USDC reserve."""
    underlying = USDC.lower()
    return ReserveData(
        id=f"1-{underlying}-{POOL_ADDRESSES_PROVIDER}".lower(),
        underlying_asset=underlying,
        name="USD Coin",
        symbol="USDC",
        decimals=6,
        base_ltv_as_collateral=7500,
        reserve_liquidation_threshold=7800,
        reserve_liquidation_bonus=10450,
        reserve_factor=1000,
        usage_as_collateral_enabled=True,
        borrowing_enabled=True,
        is_active=True,
        is_frozen=False,
        liquidity_index=RAY,
        variable_borrow_index=RAY,
        liquidity_rate=3 * 10**25,
        variable_borrow_rate=5 * 10**25,
        last_update_timestamp=NOW,
        a_token_address="0x98C23E9d8f34FEFb1B7BD6a91B7FF122F4e16F5c",
        variable_debt_token_address="0x72E95b8931767C79bA4EeE721354d6E99a61D004",
        interest_rate_strategy_address="0x9ec6F08190DeA04A54f8Afc53Db96134e5E3FdFB",
        available_liquidity=500 * 10**6,
        total_scaled_variable_debt=1000 * 10**6,
        price_in_market_reference_currency=100_010_000,
        price_oracle="0x54586bE62E3c3580375aE3723C145253060Ca0C2",
    )


@pytest.fixture
def sample_base_currency() -> BaseCurrencyData:
    return BaseCurrencyData(
        market_reference_currency_decimals=8,
        market_reference_currency_price_in_usd=100_000_000,
        network_base_token_price_in_usd=2_000 * 10**8,
        network_base_token_price_decimals=8,
    )


@pytest.fixture
def sample_reserves_data(sample_reserve, sample_base_currency) -> ReservesData:
    return ReservesData(reserves=[sample_reserve], base_currency=sample_base_currency)


@pytest.fixture
def make_formatted_reserve():
    """Factory for formatted reserves; keyword overrides replace fields."""

    def _make(underlying_asset: str, **overrides) -> FormattedReserve:
        reserve = FormattedReserve(
            id=f"1-{underlying_asset}-{POOL_ADDRESSES_PROVIDER}".lower(),
            underlying_asset=underlying_asset,
            name="Token",
            symbol="TKN",
            decimals=18,
            supply_apy=Decimal("0.0312"),
            supply_apr=Decimal("0.0307"),
            variable_borrow_apy=Decimal("0.0456"),
            variable_borrow_apr=Decimal("0.0446"),
            price_in_market_reference_currency=Decimal("1.0001"),
            price_in_usd=Decimal("1.0001"),
            usage_as_collateral_enabled=True,
            borrowing_enabled=True,
            is_active=True,
            is_frozen=False,
            is_paused=False,
            is_isolated=False,
            is_siloed_borrowing=False,
            borrowable_in_isolation=False,
            flash_loan_enabled=True,
            a_token_address="0x98C23E9d8f34FEFb1B7BD6a91B7FF122F4e16F5c",
            variable_debt_token_address="0x72E95b8931767C79bA4EeE721354d6E99a61D004",
            interest_rate_strategy_address="0x9ec6F08190DeA04A54f8Afc53Db96134e5E3FdFB",
            price_oracle="0x54586bE62E3c3580375aE3723C145253060Ca0C2",
            available_liquidity=Decimal("300000000"),
            total_variable_debt=Decimal("1200000000"),
            total_debt=Decimal("1200000000"),
            total_liquidity=Decimal("1500000000"),
            unbacked=Decimal("0"),
            utilization_rate=Decimal("0.8"),
            available_liquidity_usd=Decimal("300030000"),
            total_debt_usd=Decimal("1200120000"),
            total_liquidity_usd=Decimal("1500150000"),
            base_ltv_as_collateral=Decimal("0.75"),
            reserve_liquidation_threshold=Decimal("0.78"),
            reserve_liquidation_bonus=Decimal("0.045"),
            reserve_factor=Decimal("0.1"),
        )
        return replace(reserve, **overrides)

    return _make
