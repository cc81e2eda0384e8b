"""Configured calculator coordinating all metric calculations"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..config.defaults import CalculationParams
from ..data.models import Instrument, Trade
from ..errors import StockCalculationError
from ..logging.config import get_calculation_logger, log_calculation, log_calculation_failure
from ..utils.time import ensure_reference_time, format_timestamp
from .dividend import Price, calculate_dividend_yield, calculate_pe_ratio
from .gbce import calculate_gbce
from .vwsp import calculate_vwsp

logger = get_calculation_logger(__name__)


class StockCalculator:
    """
    Applies the configured precision and window to the pure calculations,
    logging each result and each domain error before it propagates
    """

    def __init__(self, params: Optional[CalculationParams] = None):
        self.params = params or CalculationParams()

    def pe_ratio(self, instrument: Instrument, price: Price) -> Decimal:
        """P/E ratio of an instrument at a market price."""
        context = {"symbol": instrument.symbol.value, "price": str(price)}
        try:
            result = calculate_pe_ratio(instrument, price, places=self.params.decimal_places)
        except StockCalculationError as e:
            log_calculation_failure(logger, "pe_ratio", e, context)
            raise

        log_calculation(logger, "pe_ratio", result, context)
        return result

    def dividend_yield(self, instrument: Instrument, price: Price) -> Decimal:
        """Dividend yield of an instrument at a market price."""
        context = {
            "symbol": instrument.symbol.value,
            "kind": instrument.kind.value,
            "price": str(price),
        }
        try:
            result = calculate_dividend_yield(instrument, price, places=self.params.decimal_places)
        except StockCalculationError as e:
            log_calculation_failure(logger, "dividend_yield", e, context)
            raise

        log_calculation(logger, "dividend_yield", result, context)
        return result

    def vwsp(self, trades: Sequence[Trade], window_minutes: Optional[int] = None,
             now: Optional[datetime] = None) -> Decimal:
        """
        Volume weighted stock price over the trailing window

        Args:
            trades: Trades to weight, normally a single symbol's ledger slice
            window_minutes: Window length, defaults to the configured window
            now: Reference instant, defaults to the current UTC time
        """
        if window_minutes is None:
            window_minutes = self.params.vwsp_window_minutes
        now = ensure_reference_time(now)

        result = calculate_vwsp(trades, window_minutes, now=now, places=self.params.decimal_places)

        log_calculation(logger, "vwsp", result, {
            "trade_count": len(trades),
            "window_minutes": window_minutes,
            "now": format_timestamp(now),
        })
        return result

    def gbce(self, trades: Sequence[Trade]) -> Decimal:
        """GBCE all share index over every trade given."""
        context = {"trade_count": len(trades)}
        try:
            result = calculate_gbce(trades, places=self.params.decimal_places)
        except StockCalculationError as e:
            log_calculation_failure(logger, "gbce", e, context)
            raise

        log_calculation(logger, "gbce", result, context)
        return result
