"""Unit tests for reserve formatting and RAY math."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.core.constants import RAY, SECONDS_PER_YEAR
from src.core.models import FormattedReserve
from src.data.formatters.pool_math import (
    calculate_compounded_interest,
    normalize,
    rate_to_apy,
    ray_mul,
    ray_pow,
)
from src.data.formatters.reserve import format_reserve, format_reserves

NOW = 1_700_000_000
USD_PRICE = 100_000_000  # 1.0 with 8 decimals


class TestPoolMath:
    """Tests for RAY fixed-point helpers."""

    def test_ray_mul_identity(self):
        assert ray_mul(5 * RAY, RAY) == 5 * RAY

    def test_ray_mul_rounds_half_up(self):
        assert ray_mul(1, RAY // 2) == 1

    def test_ray_pow(self):
        assert ray_pow(2 * RAY, 10) == 1024 * RAY
        assert ray_pow(3 * RAY, 0) == RAY

    def test_rate_to_apy_zero(self):
        assert rate_to_apy(0) == 0

    def test_rate_to_apy_compounds_per_second(self):
        """5% APR compounded every second is close to e^0.05 - 1."""
        apy = normalize(rate_to_apy(5 * 10**25), 27)

        assert abs(apy - Decimal("0.0512710963760")) < Decimal("1e-9")

    def test_compounded_interest_no_elapsed_time(self):
        assert calculate_compounded_interest(5 * 10**25, NOW, NOW) == RAY

    def test_compounded_interest_clock_skew(self):
        assert calculate_compounded_interest(5 * 10**25, NOW, NOW - 10) == RAY

    def test_compounded_interest_one_year(self):
        """One year at 10% APR is close to e^0.1."""
        factor = calculate_compounded_interest(10**26, NOW, NOW + SECONDS_PER_YEAR)

        assert abs(normalize(factor, 27) - Decimal("1.10517")) < Decimal("0.0001")

    def test_normalize(self):
        assert normalize(1_500_000, 6) == Decimal("1.5")
        assert normalize(0, 18) == Decimal("0")


class TestFormatReserve:
    """Tests for format_reserve."""

    @pytest.fixture
    def formatted(self, sample_reserve):
        return format_reserve(sample_reserve, NOW, 8, USD_PRICE)

    def test_returns_formatted_reserve(self, formatted, sample_reserve):
        assert isinstance(formatted, FormattedReserve)
        assert formatted.id == sample_reserve.id
        assert formatted.underlying_asset == sample_reserve.underlying_asset
        assert formatted.symbol == "USDC"
        assert formatted.decimals == 6

    def test_rates(self, formatted):
        assert formatted.supply_apr == Decimal("0.03")
        assert formatted.variable_borrow_apr == Decimal("0.05")
        assert abs(formatted.supply_apy - Decimal("0.0304545339535")) < Decimal("1e-9")
        assert abs(formatted.variable_borrow_apy - Decimal("0.0512710963760")) < Decimal("1e-9")

    def test_prices(self, formatted):
        assert formatted.price_in_market_reference_currency == Decimal("1.0001")
        assert formatted.price_in_usd == Decimal("1.0001")

    def test_price_uses_reference_currency_usd_price(self, sample_reserve):
        """ETH-referenced markets multiply by the ETH/USD price."""
        reserve = replace(sample_reserve, price_in_market_reference_currency=5 * 10**17)

        formatted = format_reserve(reserve, NOW, 18, 2_000 * 10**8)

        assert formatted.price_in_market_reference_currency == Decimal("0.5")
        assert formatted.price_in_usd == Decimal("1000")

    def test_liquidity(self, formatted):
        assert formatted.available_liquidity == Decimal("500")
        assert formatted.total_debt == Decimal("1000")
        assert formatted.total_liquidity == Decimal("1500")
        assert formatted.available_liquidity_usd == Decimal("500.05")
        assert formatted.total_debt_usd == Decimal("1000.1")
        assert abs(formatted.utilization_rate - Decimal("0.6666666667")) < Decimal("1e-9")

    def test_debt_accrues_since_last_update(self, sample_reserve):
        formatted = format_reserve(sample_reserve, NOW + SECONDS_PER_YEAR, 8, USD_PRICE)

        assert formatted.total_debt > Decimal("1050")
        assert formatted.total_debt < Decimal("1052")

    def test_risk_parameters(self, formatted):
        assert formatted.base_ltv_as_collateral == Decimal("0.75")
        assert formatted.reserve_liquidation_threshold == Decimal("0.78")
        assert formatted.reserve_liquidation_bonus == Decimal("0.045")
        assert formatted.reserve_factor == Decimal("0.1")

    def test_not_isolated_without_debt_ceiling(self, formatted):
        assert formatted.is_isolated is False

    def test_isolated_with_debt_ceiling(self, sample_reserve):
        reserve = replace(
            sample_reserve,
            debt_ceiling=5_000_000_00,
            debt_ceiling_decimals=2,
            isolation_mode_total_debt=1_000_00,
        )

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.is_isolated is True
        assert formatted.debt_ceiling == Decimal("5000000")
        assert formatted.isolation_mode_total_debt == Decimal("1000")

    def test_borrow_cap_limits_available_liquidity(self, sample_reserve):
        reserve = replace(sample_reserve, borrow_cap=1_200)

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.available_liquidity == Decimal("200")
        assert formatted.total_liquidity == Decimal("1500")

    def test_borrow_cap_exceeded_floors_at_zero(self, sample_reserve):
        reserve = replace(sample_reserve, borrow_cap=900)

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.available_liquidity == Decimal("0")

    def test_virtual_accounting_balance(self, sample_reserve):
        reserve = replace(
            sample_reserve,
            virtual_acc_active=True,
            virtual_underlying_balance=300 * 10**6,
        )

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.available_liquidity == Decimal("300")
        assert formatted.total_liquidity == Decimal("1300")

    def test_empty_reserve_utilization(self, sample_reserve):
        reserve = replace(sample_reserve, available_liquidity=0, total_scaled_variable_debt=0)

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.utilization_rate == Decimal("0")

    def test_flags_pass_through(self, sample_reserve):
        reserve = replace(sample_reserve, is_frozen=True, is_paused=True, borrowing_enabled=False)

        formatted = format_reserve(reserve, NOW, 8, USD_PRICE)

        assert formatted.is_frozen is True
        assert formatted.is_paused is True
        assert formatted.borrowing_enabled is False


class TestFormatReserves:
    """Tests for format_reserves."""

    def test_preserves_order(self, sample_reserve):
        symbols = ["USDC", "WETH", "DAI", "WBTC"]
        reserves = [replace(sample_reserve, symbol=s, id=f"id-{s}") for s in symbols]

        formatted = format_reserves(reserves, NOW, 8, USD_PRICE)

        assert [r.symbol for r in formatted] == symbols

    def test_empty(self):
        assert format_reserves([], NOW, 8, USD_PRICE) == []

    def test_accepts_string_reference_price(self, sample_reserve):
        formatted = format_reserves([sample_reserve], NOW, 8, "100000000")

        assert formatted[0].price_in_usd == Decimal("1.0001")
