"""
Domain error classifications for catalog lookups and metric calculations.

These exceptions are deterministic and locally recoverable: the caller shows
the message and carries on. None of them are worth retrying.
"""

from typing import Optional, Dict, Any


class StockCalculationError(Exception):
    """Base class for domain errors raised by the calculation engine."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class NotFoundError(StockCalculationError):
    """Symbol has no entry in the instrument catalog."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class DivideByZeroError(StockCalculationError):
    """Price or last dividend is zero where a quotient is required."""

    def __init__(self, message: str, metric_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name


class UnrecognizedKindError(StockCalculationError):
    """Instrument kind outside COMMON and PREFERRED."""

    def __init__(self, message: str, kind: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind


class EmptyLedgerError(StockCalculationError):
    """GBCE requested with no recorded trades."""
