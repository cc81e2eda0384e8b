"""
Fixed instrument catalog.

The sample exchange lists exactly five stocks. Their reference data is static
for the life of the process, so the table is exposed read-only.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Union

from gbce_app.errors import NotFoundError

from .models import Instrument, StockSymbol, StockType

INSTRUMENTS = MappingProxyType({
    StockSymbol.TEA: Instrument(StockSymbol.TEA, StockType.COMMON, 0, None, 100),
    StockSymbol.POP: Instrument(StockSymbol.POP, StockType.COMMON, 8, None, 100),
    StockSymbol.ALE: Instrument(StockSymbol.ALE, StockType.COMMON, 23, None, 60),
    StockSymbol.GIN: Instrument(StockSymbol.GIN, StockType.PREFERRED, 8, Decimal("0.02"), 100),
    StockSymbol.JOE: Instrument(StockSymbol.JOE, StockType.COMMON, 13, None, 250),
})


def lookup(symbol: Union[StockSymbol, str]) -> Instrument:
    """
    Return the catalog entry for a symbol.

    Args:
        symbol: StockSymbol member or its text form (case-insensitive)

    Returns:
        Instrument reference data

    Raises:
        NotFoundError: If the symbol has no catalog entry
    """
    if isinstance(symbol, str):
        symbol = StockSymbol.from_string(symbol)

    try:
        return INSTRUMENTS[symbol]
    except KeyError:
        raise NotFoundError(
            f"No sample stock data found for symbol {symbol}",
            symbol=str(symbol),
        ) from None


def all_instruments() -> tuple[Instrument, ...]:
    """All catalog entries in symbol declaration order."""
    return tuple(INSTRUMENTS[symbol] for symbol in StockSymbol if symbol in INSTRUMENTS)
