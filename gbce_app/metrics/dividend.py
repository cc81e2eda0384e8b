"""Dividend yield and P/E ratio calculations"""

from decimal import Decimal
from typing import Union

from gbce_app.data.ledger import to_decimal
from gbce_app.data.models import Instrument, StockType
from gbce_app.errors import DivideByZeroError, UnrecognizedKindError

from .rounding import DEFAULT_PLACES, divide

Price = Union[Decimal, int, float, str]


def calculate_pe_ratio(instrument: Instrument, price: Price,
                       places: int = DEFAULT_PLACES) -> Decimal:
    """
    Calculate the Price/Earnings ratio

    P/E = market_price / last_dividend

    Args:
        instrument: Catalog entry for the stock
        price: Market price in pence
        places: Decimal places in the result

    Returns:
        P/E ratio rounded half-up

    Raises:
        DivideByZeroError: If the instrument's last dividend is zero
    """
    if instrument.last_dividend == 0:
        raise DivideByZeroError(
            f"Cannot calculate PE ratio as last dividend for {instrument.symbol.value} is zero "
            "and would result in a divide by zero",
            metric_name="pe_ratio",
            context={"symbol": instrument.symbol.value, "price": str(price)},
        )

    return divide(to_decimal(price), Decimal(instrument.last_dividend), places)


def calculate_dividend_yield(instrument: Instrument, price: Price,
                             places: int = DEFAULT_PLACES) -> Decimal:
    """
    Calculate the Dividend Yield for the instrument's kind

    COMMON:    last_dividend / market_price
    PREFERRED: fixed_dividend * par_value / market_price

    Args:
        instrument: Catalog entry for the stock
        price: Market price in pence
        places: Decimal places in the result

    Returns:
        Dividend yield rounded half-up

    Raises:
        DivideByZeroError: If the market price is zero
        UnrecognizedKindError: If the instrument kind is neither COMMON nor PREFERRED
    """
    price = to_decimal(price)

    # Zero price is rejected before looking at the kind
    if price == 0:
        raise DivideByZeroError(
            "Price cannot be 0 for the dividend yield calculation",
            metric_name="dividend_yield",
            context={"symbol": instrument.symbol.value},
        )

    if instrument.kind is StockType.COMMON:
        return divide(Decimal(instrument.last_dividend), price, places)
    elif instrument.kind is StockType.PREFERRED:
        return divide(instrument.fixed_dividend * Decimal(instrument.par_value), price, places)
    else:
        raise UnrecognizedKindError(
            f"Stock type {instrument.kind} not recognised, unable to calculate dividend yield",
            kind=instrument.kind,
            context={"symbol": instrument.symbol.value},
        )
