"""
Append-only in-memory trade ledger.

Trades are kept in insertion order and never modified or removed. Reads hand
out tuple snapshots, so callers cannot alias the ledger's own list.
"""

import threading
from datetime import datetime
from decimal import Decimal
from typing import Iterator, Optional, Union

from gbce_app.logging.config import get_ledger_logger
from gbce_app.utils.time import ensure_utc, format_timestamp, utc_now

from .models import StockSymbol, Trade, TransactionType

logger = get_ledger_logger(__name__)

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric input to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class TradeLedger:
    """Owns every recorded trade for the lifetime of the process."""

    def __init__(self) -> None:
        self._trades: list[Trade] = []
        self._lock = threading.Lock()

    def append(self, trade: Trade) -> None:
        """Add a trade to the end of the ledger. No validation is performed."""
        with self._lock:
            self._trades.append(trade)

        logger.info(
            "trade_recorded",
            symbol=trade.symbol.value,
            transaction_type=trade.transaction_type.value,
            quantity=str(trade.quantity),
            price=str(trade.price),
            timestamp=format_timestamp(trade.timestamp),
        )

    def record(self, transaction_type: TransactionType, symbol: StockSymbol,
               quantity: Number, price: Number,
               timestamp: Optional[datetime] = None) -> Trade:
        """
        Build a trade from its parts and append it.

        Args:
            transaction_type: BUY or SELL
            symbol: Stock traded
            quantity: Number of shares
            price: Price per share in pence
            timestamp: Time of the trade, defaults to the current UTC time

        Returns:
            The appended Trade

        Raises:
            InvalidTimestampError: If the timestamp has no timezone
        """
        trade = Trade(
            transaction_type=transaction_type,
            symbol=symbol,
            timestamp=ensure_utc(timestamp) if timestamp is not None else utc_now(),
            quantity=to_decimal(quantity),
            price=to_decimal(price),
        )
        self.append(trade)
        return trade

    def all_trades(self) -> tuple[Trade, ...]:
        """Every trade in insertion order."""
        with self._lock:
            return tuple(self._trades)

    def trades_for(self, symbol: StockSymbol) -> tuple[Trade, ...]:
        """Trades for one symbol, preserving insertion order."""
        with self._lock:
            return tuple(trade for trade in self._trades if trade.symbol == symbol)

    def __len__(self) -> int:
        with self._lock:
            return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self.all_trades())
