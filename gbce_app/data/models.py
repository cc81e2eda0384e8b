"""
Canonical data models for instruments and trades.

This module defines the closed enumerations used throughout the toolkit and
the immutable records built from them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from gbce_app.errors import InvalidTransactionTypeError, NotFoundError


class StockSymbol(Enum):
    """Symbols of the instruments listed on the exchange."""
    TEA = "TEA"
    POP = "POP"
    ALE = "ALE"
    GIN = "GIN"
    JOE = "JOE"

    @classmethod
    def from_string(cls, entered_symbol: str) -> "StockSymbol":
        """Resolve a symbol case-insensitively, raising NotFoundError if unknown."""
        try:
            return cls(entered_symbol.strip().upper())
        except ValueError:
            raise NotFoundError(
                f"No stock exists with symbol {entered_symbol}",
                symbol=entered_symbol,
            ) from None


class StockType(Enum):
    """Instrument kind, which selects the dividend yield formula."""
    COMMON = "COMMON"
    PREFERRED = "PREFERRED"


class TransactionType(Enum):
    """Whether a trade bought or sold the stock."""
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def from_string(cls, entered_name: str) -> "TransactionType":
        """Resolve a transaction type case-insensitively."""
        try:
            return cls(entered_name.strip().upper())
        except ValueError:
            raise InvalidTransactionTypeError(
                f"Trade can be {cls.BUY.value} or {cls.SELL.value}. "
                f"Value entered was {entered_name}",
                value=entered_name,
            ) from None


@dataclass(frozen=True)
class Instrument:
    """Static reference data for one listed stock."""
    symbol: StockSymbol
    kind: StockType
    last_dividend: int                       # Pence
    fixed_dividend: Optional[Decimal]        # Fraction, e.g. 0.02 for 2%; PREFERRED only
    par_value: int                           # Pence


@dataclass(frozen=True)
class Trade:
    """A single recorded buy or sell of a stock."""
    transaction_type: TransactionType
    symbol: StockSymbol
    timestamp: datetime     # UTC wall-clock time the trade was recorded
    quantity: Decimal       # Shares, at most 2 decimal places
    price: Decimal          # Pence per share

    @property
    def notional(self) -> Decimal:
        """Quantity multiplied by price."""
        return self.quantity * self.price
