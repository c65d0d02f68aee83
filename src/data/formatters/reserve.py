"""Reserve formatter.

Converts humanized reserve data (RAY rates, token base units, basis points)
into FormattedReserve records with APYs, token amounts and USD values.
"""

from decimal import Decimal
from typing import Iterable, List

from src.core.constants import LTV_PRECISION, RAY_DECIMALS, USD_DECIMALS
from src.core.models import FormattedReserve, ReserveData
from src.data.formatters.pool_math import (
    calculate_compounded_interest,
    normalize,
    rate_to_apy,
    ray_mul,
)


def _total_variable_debt(reserve: ReserveData, current_timestamp: int) -> int:
    """Variable debt accrued up to current_timestamp, in token base units."""
    compounded = calculate_compounded_interest(
        reserve.variable_borrow_rate,
        reserve.last_update_timestamp,
        current_timestamp,
    )
    return ray_mul(
        ray_mul(reserve.total_scaled_variable_debt, reserve.variable_borrow_index),
        compounded,
    )


def format_reserve(
    reserve: ReserveData,
    current_timestamp: int,
    market_reference_currency_decimals: int,
    market_reference_price_in_usd: int,
) -> FormattedReserve:
    """Format a single reserve.

    Args:
        reserve: Humanized reserve data
        current_timestamp: Unix timestamp (seconds) debt is accrued to
        market_reference_currency_decimals: Decimals of the market reference currency
        market_reference_price_in_usd: Reference currency USD price, 8 decimals

    Returns:
        FormattedReserve in human-readable units
    """
    decimals = reserve.decimals

    total_debt = _total_variable_debt(reserve, current_timestamp)

    if reserve.virtual_acc_active:
        available = reserve.virtual_underlying_balance
    else:
        available = reserve.available_liquidity
    total_liquidity = total_debt + available + reserve.unbacked

    # Borrowable liquidity can't exceed the remaining borrow cap
    if reserve.borrow_cap > 0:
        borrow_cap_headroom = reserve.borrow_cap * 10**decimals - total_debt
        available = max(min(available, borrow_cap_headroom), 0)

    if total_liquidity == 0:
        utilization_rate = Decimal("0")
    else:
        utilization_rate = Decimal(total_debt) / Decimal(total_liquidity)

    price_in_market_reference_currency = normalize(
        reserve.price_in_market_reference_currency,
        market_reference_currency_decimals,
    )
    price_in_usd = price_in_market_reference_currency * normalize(
        market_reference_price_in_usd, USD_DECIMALS
    )

    available_liquidity = normalize(available, decimals)
    total_debt_amount = normalize(total_debt, decimals)
    total_liquidity_amount = normalize(total_liquidity, decimals)

    return FormattedReserve(
        id=reserve.id,
        underlying_asset=reserve.underlying_asset,
        name=reserve.name,
        symbol=reserve.symbol,
        decimals=decimals,
        supply_apy=normalize(rate_to_apy(reserve.liquidity_rate), RAY_DECIMALS),
        supply_apr=normalize(reserve.liquidity_rate, RAY_DECIMALS),
        variable_borrow_apy=normalize(rate_to_apy(reserve.variable_borrow_rate), RAY_DECIMALS),
        variable_borrow_apr=normalize(reserve.variable_borrow_rate, RAY_DECIMALS),
        price_in_market_reference_currency=price_in_market_reference_currency,
        price_in_usd=price_in_usd,
        usage_as_collateral_enabled=reserve.usage_as_collateral_enabled,
        borrowing_enabled=reserve.borrowing_enabled,
        is_active=reserve.is_active,
        is_frozen=reserve.is_frozen,
        is_paused=reserve.is_paused,
        is_isolated=reserve.debt_ceiling != 0,
        is_siloed_borrowing=reserve.is_siloed_borrowing,
        borrowable_in_isolation=reserve.borrowable_in_isolation,
        flash_loan_enabled=reserve.flash_loan_enabled,
        a_token_address=reserve.a_token_address,
        variable_debt_token_address=reserve.variable_debt_token_address,
        interest_rate_strategy_address=reserve.interest_rate_strategy_address,
        price_oracle=reserve.price_oracle,
        available_liquidity=available_liquidity,
        total_variable_debt=total_debt_amount,
        total_debt=total_debt_amount,
        total_liquidity=total_liquidity_amount,
        unbacked=normalize(reserve.unbacked, decimals),
        utilization_rate=utilization_rate,
        available_liquidity_usd=available_liquidity * price_in_usd,
        total_debt_usd=total_debt_amount * price_in_usd,
        total_liquidity_usd=total_liquidity_amount * price_in_usd,
        base_ltv_as_collateral=normalize(reserve.base_ltv_as_collateral, LTV_PRECISION),
        reserve_liquidation_threshold=normalize(
            reserve.reserve_liquidation_threshold, LTV_PRECISION
        ),
        # Stored as 10000 + bonus, e.g. 10500 for a 5% bonus
        reserve_liquidation_bonus=normalize(
            max(reserve.reserve_liquidation_bonus - 10**LTV_PRECISION, 0), LTV_PRECISION
        ),
        reserve_factor=normalize(reserve.reserve_factor, LTV_PRECISION),
        supply_cap=reserve.supply_cap,
        borrow_cap=reserve.borrow_cap,
        debt_ceiling=normalize(reserve.debt_ceiling, reserve.debt_ceiling_decimals),
        isolation_mode_total_debt=normalize(
            reserve.isolation_mode_total_debt, reserve.debt_ceiling_decimals
        ),
        last_update_timestamp=reserve.last_update_timestamp,
    )


def format_reserves(
    reserves: Iterable[ReserveData],
    current_timestamp: int,
    market_reference_currency_decimals: int,
    market_reference_price_in_usd: int,
) -> List[FormattedReserve]:
    """Format reserves, preserving input order."""
    return [
        format_reserve(
            reserve,
            current_timestamp,
            market_reference_currency_decimals,
            int(market_reference_price_in_usd),
        )
        for reserve in reserves
    ]
