"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from gbce_app.data.ledger import TradeLedger
from gbce_app.data.models import StockSymbol, Trade, TransactionType


@pytest.fixture
def reference_time() -> datetime:
    """Fixed "now" used by every windowed calculation in the suite."""
    return datetime(2024, 6, 5, 12, 0, 0, tzinfo=timezone.utc)


def make_trade(symbol: StockSymbol, quantity, price, timestamp: datetime,
               transaction_type: TransactionType = TransactionType.BUY) -> Trade:
    """Build a trade from plain numbers."""
    return Trade(
        transaction_type=transaction_type,
        symbol=symbol,
        timestamp=timestamp,
        quantity=Decimal(str(quantity)),
        price=Decimal(str(price)),
    )


@pytest.fixture
def trade_factory():
    """Factory for building trades inside tests."""
    return make_trade


@pytest.fixture
def populated_ledger(reference_time: datetime) -> TradeLedger:
    """
    Ledger with trades ten and twenty minutes before the reference time.

    Ten minutes ago:    ALE 6 @ 120, ALE 4 @ 140, TEA 20 @ 30
    Twenty minutes ago: ALE 10 @ 120, POP 15 @ 10, GIN 17 @ 230
    """
    ten_minutes_ago = reference_time - timedelta(minutes=10)
    twenty_minutes_ago = reference_time - timedelta(minutes=20)

    ledger = TradeLedger()
    ledger.append(make_trade(StockSymbol.ALE, 6, 120, ten_minutes_ago))
    ledger.append(make_trade(StockSymbol.ALE, 4, 140, ten_minutes_ago, TransactionType.SELL))
    ledger.append(make_trade(StockSymbol.TEA, 20, 30, ten_minutes_ago, TransactionType.SELL))
    ledger.append(make_trade(StockSymbol.ALE, 10, 120, twenty_minutes_ago))
    ledger.append(make_trade(StockSymbol.POP, 15, 10, twenty_minutes_ago))
    ledger.append(make_trade(StockSymbol.GIN, 17, 230, twenty_minutes_ago, TransactionType.SELL))
    return ledger
