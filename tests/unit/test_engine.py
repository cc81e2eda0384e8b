"""Unit tests for the stock market engine facade."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from gbce_app.data.models import StockSymbol, TransactionType
from gbce_app.engine import StockMarketEngine
from gbce_app.utils.time import utc_now
from gbce_app.errors import (
    DivideByZeroError,
    EmptyLedgerError,
    InvalidTimestampError,
    InvalidTransactionTypeError,
    NotFoundError,
)


@pytest.fixture
def engine(reference_time, tmp_path):
    """Engine with default settings and a clock pinned to the reference time."""
    return StockMarketEngine(config_dir=tmp_path, clock=lambda: reference_time)


class TestEngineInit:
    """Test engine construction"""

    def test_defaults(self, engine):
        assert engine.config.calculation.vwsp_window_minutes == 15
        assert len(engine.ledger) == 0

    def test_overrides_reach_calculator(self, tmp_path):
        engine = StockMarketEngine(config_dir=tmp_path,
                                   overrides={"calculation": {"decimal_places": 4}})

        assert engine.calculator.params.decimal_places == 4
        assert engine.pe_ratio("JOE", 100) == Decimal("7.6923")

    def test_default_clock_is_wall_clock(self, tmp_path):
        engine = StockMarketEngine(config_dir=tmp_path)

        assert engine.clock is utc_now


class TestRecordTrade:
    """Test recording trades through the engine"""

    def test_record_trade_with_text(self, engine, reference_time):
        trade = engine.record_trade("sell", "gin", "2.5", 230)

        assert trade.transaction_type is TransactionType.SELL
        assert trade.symbol is StockSymbol.GIN
        assert trade.quantity == Decimal("2.5")
        assert trade.price == Decimal("230")
        assert trade.timestamp == reference_time
        assert engine.ledger.all_trades() == (trade,)

    def test_record_trade_with_enums_and_timestamp(self, engine, reference_time):
        earlier = reference_time - timedelta(hours=1)

        trade = engine.record_trade(TransactionType.BUY, StockSymbol.POP, 1, 10, timestamp=earlier)

        assert trade.timestamp == earlier

    def test_record_trade_unknown_symbol(self, engine):
        with pytest.raises(NotFoundError):
            engine.record_trade("BUY", "XYZ", 1, 10)

        assert len(engine.ledger) == 0

    def test_record_trade_invalid_transaction_type(self, engine):
        with pytest.raises(InvalidTransactionTypeError):
            engine.record_trade("SHORT", "POP", 1, 10)

        assert len(engine.ledger) == 0


class TestEngineCalculations:
    """Test engine calculation entry points"""

    def test_instrument(self, engine):
        assert engine.instrument("ale").last_dividend == 23

    def test_dividend_yield(self, engine):
        assert engine.dividend_yield("POP", 4) == Decimal("2.00")
        assert engine.dividend_yield(StockSymbol.GIN, 4) == Decimal("0.50")

    def test_dividend_yield_zero_price(self, engine):
        with pytest.raises(DivideByZeroError):
            engine.dividend_yield("GIN", 0)

    def test_pe_ratio(self, engine):
        assert engine.pe_ratio("ALE", 46) == Decimal("2.00")

    def test_pe_ratio_zero_dividend(self, engine):
        with pytest.raises(DivideByZeroError):
            engine.pe_ratio("TEA", 46)

    def test_unknown_symbol(self, engine):
        with pytest.raises(NotFoundError):
            engine.pe_ratio("XYZ", 46)

    def test_vwsp_filters_by_symbol(self, engine, reference_time):
        recent = reference_time - timedelta(minutes=5)
        engine.record_trade("BUY", "ALE", 6, 120, timestamp=recent)
        engine.record_trade("SELL", "ALE", 4, 140, timestamp=recent)
        engine.record_trade("BUY", "POP", 100, 1, timestamp=recent)

        assert engine.vwsp("ALE") == Decimal("128.00")
        assert engine.vwsp("POP") == Decimal("1.00")
        assert engine.vwsp("JOE") == Decimal(0)

    def test_vwsp_explicit_now_and_window(self, engine, reference_time):
        engine.record_trade("BUY", "ALE", 6, 120, timestamp=reference_time - timedelta(minutes=20))

        assert engine.vwsp("ALE") == Decimal(0)
        assert engine.vwsp("ALE", window_minutes=30) == Decimal("120.00")
        assert engine.vwsp("ALE", now=reference_time - timedelta(minutes=10)) == Decimal("120.00")

    def test_gbce_empty(self, engine):
        with pytest.raises(EmptyLedgerError):
            engine.gbce()

    def test_gbce_across_symbols(self, engine):
        engine.record_trade("BUY", "POP", 1, 4)
        engine.record_trade("SELL", "TEA", 1, 9)

        assert engine.gbce() == Decimal("6.00")


class TestTradeTimestamps:
    """Test timestamps supplied to record_trade"""

    def test_naive_timestamp_rejected(self, engine, reference_time):
        with pytest.raises(InvalidTimestampError):
            engine.record_trade("BUY", "ALE", 1, 100, timestamp=datetime(2024, 6, 5, 11, 59))

        assert len(engine.ledger) == 0

        engine.record_trade("BUY", "ALE", 1, 100, timestamp=reference_time - timedelta(minutes=1))
        assert engine.vwsp("ALE") == Decimal("100.00")

    def test_other_timezones_are_normalised(self, engine, reference_time):
        eastern = timezone(timedelta(hours=-4))
        local = (reference_time - timedelta(minutes=1)).astimezone(eastern)

        trade = engine.record_trade("SELL", "ALE", 2, 50, timestamp=local)

        assert trade.timestamp.tzinfo is timezone.utc
        assert engine.vwsp("ALE") == Decimal("50.00")
