"""
Error classification for the stock calculation toolkit.

This module provides the structured exception hierarchy for failures raised
by the instrument catalog, the calculation engine, caller input lookups and
configuration loading.
"""

from .calculation import (
    StockCalculationError,
    NotFoundError,
    DivideByZeroError,
    UnrecognizedKindError,
    EmptyLedgerError,
)
from .input import (
    InputError,
    InvalidTransactionTypeError,
    InvalidTimestampError,
)
from .system_failures import (
    ConfigurationError,
)

__all__ = [
    # Calculation Errors
    "StockCalculationError",
    "NotFoundError",
    "DivideByZeroError",
    "UnrecognizedKindError",
    "EmptyLedgerError",
    # Input Errors
    "InputError",
    "InvalidTransactionTypeError",
    "InvalidTimestampError",
    # System Failures
    "ConfigurationError",
]
