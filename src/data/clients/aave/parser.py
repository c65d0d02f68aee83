"""UiPoolDataProviderV3 response parser.

Contains all parsing logic for converting decoded getReservesData output
into domain models. Values keep their on-chain scale; normalization to
human-readable units happens in src.data.formatters.
"""

from typing import Any, Dict, List, Sequence

from src.core.models import BaseCurrencyData, ReserveData, ReservesData
from src.protocols.aave.abi import UI_POOL_BASE_CURRENCY_KEYS, UI_POOL_RESERVE_KEYS


class AaveParser:
    """Parser for UiPoolDataProviderV3 responses."""

    @staticmethod
    def to_dict(raw: Any, keys: Sequence[str]) -> Dict[str, Any]:
        """Turn a decoded ABI tuple into a dict keyed by component name."""
        if isinstance(raw, dict):
            return dict(raw)
        return dict(zip(keys, raw))

    @staticmethod
    def parse_int(value: Any) -> int:
        """Parse an on-chain integer, treating None as zero."""
        if value is None:
            return 0
        return int(value)

    @classmethod
    def parse_reserve(
        cls,
        raw: Any,
        chain_id: int,
        lending_pool_address_provider: str,
    ) -> ReserveData:
        """Parse one AggregatedReserveData struct to ReserveData.

        Args:
            raw: Decoded struct (tuple in ABI order, or dict)
            chain_id: Chain the reserve lives on
            lending_pool_address_provider: Pool addresses provider queried

        Returns:
            ReserveData with a lowercased id and underlying asset
        """
        r = cls.to_dict(raw, UI_POOL_RESERVE_KEYS)
        underlying = str(r["underlyingAsset"]).lower()
        reserve_id = f"{chain_id}-{underlying}-{lending_pool_address_provider}".lower()
        to_int = cls.parse_int

        return ReserveData(
            id=reserve_id,
            underlying_asset=underlying,
            name=str(r.get("name") or ""),
            symbol=str(r.get("symbol") or ""),
            decimals=to_int(r.get("decimals")),
            base_ltv_as_collateral=to_int(r.get("baseLTVasCollateral")),
            reserve_liquidation_threshold=to_int(r.get("reserveLiquidationThreshold")),
            reserve_liquidation_bonus=to_int(r.get("reserveLiquidationBonus")),
            reserve_factor=to_int(r.get("reserveFactor")),
            usage_as_collateral_enabled=bool(r.get("usageAsCollateralEnabled")),
            borrowing_enabled=bool(r.get("borrowingEnabled")),
            is_active=bool(r.get("isActive")),
            is_frozen=bool(r.get("isFrozen")),
            liquidity_index=to_int(r.get("liquidityIndex")),
            variable_borrow_index=to_int(r.get("variableBorrowIndex")),
            liquidity_rate=to_int(r.get("liquidityRate")),
            variable_borrow_rate=to_int(r.get("variableBorrowRate")),
            last_update_timestamp=to_int(r.get("lastUpdateTimestamp")),
            a_token_address=str(r.get("aTokenAddress") or ""),
            variable_debt_token_address=str(r.get("variableDebtTokenAddress") or ""),
            interest_rate_strategy_address=str(r.get("interestRateStrategyAddress") or ""),
            available_liquidity=to_int(r.get("availableLiquidity")),
            total_scaled_variable_debt=to_int(r.get("totalScaledVariableDebt")),
            price_in_market_reference_currency=to_int(r.get("priceInMarketReferenceCurrency")),
            price_oracle=str(r.get("priceOracle") or ""),
            variable_rate_slope1=to_int(r.get("variableRateSlope1")),
            variable_rate_slope2=to_int(r.get("variableRateSlope2")),
            base_variable_borrow_rate=to_int(r.get("baseVariableBorrowRate")),
            optimal_usage_ratio=to_int(r.get("optimalUsageRatio")),
            is_paused=bool(r.get("isPaused")),
            is_siloed_borrowing=bool(r.get("isSiloedBorrowing")),
            accrued_to_treasury=to_int(r.get("accruedToTreasury")),
            unbacked=to_int(r.get("unbacked")),
            isolation_mode_total_debt=to_int(r.get("isolationModeTotalDebt")),
            flash_loan_enabled=bool(r.get("flashLoanEnabled")),
            debt_ceiling=to_int(r.get("debtCeiling")),
            debt_ceiling_decimals=to_int(r.get("debtCeilingDecimals")),
            borrow_cap=to_int(r.get("borrowCap")),
            supply_cap=to_int(r.get("supplyCap")),
            borrowable_in_isolation=bool(r.get("borrowableInIsolation")),
            virtual_acc_active=bool(r.get("virtualAccActive")),
            virtual_underlying_balance=to_int(r.get("virtualUnderlyingBalance")),
        )

    @classmethod
    def parse_base_currency(cls, raw: Any) -> BaseCurrencyData:
        """Parse BaseCurrencyInfo.

        The market reference currency decimals are derived from its unit,
        e.g. a unit of 10**8 means 8 decimals.
        """
        b = cls.to_dict(raw, UI_POOL_BASE_CURRENCY_KEYS)
        unit = cls.parse_int(b.get("marketReferenceCurrencyUnit"))

        return BaseCurrencyData(
            market_reference_currency_decimals=len(str(unit)) - 1,
            market_reference_currency_price_in_usd=cls.parse_int(
                b.get("marketReferenceCurrencyPriceInUsd")
            ),
            network_base_token_price_in_usd=cls.parse_int(b.get("networkBaseTokenPriceInUsd")),
            network_base_token_price_decimals=cls.parse_int(b.get("networkBaseTokenPriceDecimals")),
        )

    @classmethod
    def parse_reserves_response(
        cls,
        reserves_raw: Sequence[Any],
        base_currency_raw: Any,
        chain_id: int,
        lending_pool_address_provider: str,
    ) -> ReservesData:
        """Parse a full getReservesData result, preserving reserve order."""
        reserves: List[ReserveData] = [
            cls.parse_reserve(raw, chain_id, lending_pool_address_provider)
            for raw in reserves_raw or []
        ]
        return ReservesData(
            reserves=reserves,
            base_currency=cls.parse_base_currency(base_currency_raw),
        )
