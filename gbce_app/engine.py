"""
Main stock market engine coordinator.

Owns the trade ledger and the configured calculator, and exposes the
operations a shell or script drives: record a trade, look up an instrument,
and calculate dividend yield, P/E ratio, VWSP and the GBCE index.
"""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

from .config.loader import load_config
from .data.catalog import lookup
from .data.ledger import Number, TradeLedger
from .data.models import Instrument, StockSymbol, Trade, TransactionType
from .logging.config import get_logger
from .metrics.calculator import StockCalculator
from .metrics.dividend import Price
from .utils.time import utc_now

logger = get_logger(__name__)

SymbolLike = Union[StockSymbol, str]


class StockMarketEngine:
    """
    Main coordinator for the stock calculation toolkit.

    Caller input → typed values → Ledger append, or Ledger slice + Catalog
    → Calculator → Decimal result or domain error.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None,
                 clock: Optional[Callable[[], datetime]] = None) -> None:
        """Initialize the engine with its configuration, ledger and clock."""
        self.config = load_config(Path(config_dir) if config_dir else None, overrides)
        self.calculator = StockCalculator(self.config.calculation)
        self.ledger = TradeLedger()
        self.clock = clock or utc_now

        logger.info(
            "Stock market engine initialized",
            decimal_places=self.config.calculation.decimal_places,
            vwsp_window_minutes=self.config.calculation.vwsp_window_minutes,
        )

    def instrument(self, symbol: SymbolLike) -> Instrument:
        """Catalog entry for a symbol."""
        return lookup(symbol)

    def record_trade(self, transaction_type: Union[TransactionType, str],
                     symbol: SymbolLike, quantity: Number, price: Number,
                     timestamp: Optional[datetime] = None) -> Trade:
        """
        Record a trade in the ledger.

        Args:
            transaction_type: BUY or SELL, as enum member or text
            symbol: Stock traded, as enum member or text
            quantity: Number of shares, at most 2 decimal places
            price: Price per share in pence
            timestamp: Time of the trade, timezone-aware, defaults to the engine clock

        Returns:
            The recorded Trade
        """
        if isinstance(transaction_type, str):
            transaction_type = TransactionType.from_string(transaction_type)

        # Resolving through the catalog rejects unlisted symbols
        instrument = lookup(symbol)

        return self.ledger.record(
            transaction_type,
            instrument.symbol,
            quantity,
            price,
            timestamp=timestamp if timestamp is not None else self.clock(),
        )

    def dividend_yield(self, symbol: SymbolLike, price: Price) -> Decimal:
        """Dividend yield of a stock at a market price in pence."""
        return self.calculator.dividend_yield(lookup(symbol), price)

    def pe_ratio(self, symbol: SymbolLike, price: Price) -> Decimal:
        """P/E ratio of a stock at a market price in pence."""
        return self.calculator.pe_ratio(lookup(symbol), price)

    def vwsp(self, symbol: SymbolLike, window_minutes: Optional[int] = None,
             now: Optional[datetime] = None) -> Decimal:
        """
        Volume weighted stock price of one stock's recent trades.

        Args:
            symbol: Stock to calculate for
            window_minutes: Trailing window, defaults to the configured window
            now: Reference instant, defaults to the engine clock
        """
        instrument = lookup(symbol)
        trades = self.ledger.trades_for(instrument.symbol)
        return self.calculator.vwsp(
            trades,
            window_minutes=window_minutes,
            now=now if now is not None else self.clock(),
        )

    def gbce(self) -> Decimal:
        """GBCE All Share Index over every recorded trade."""
        return self.calculator.gbce(self.ledger.all_trades())
