"""GBCE All Share Index: geometric mean of trade prices"""

import math
from collections.abc import Sequence
from decimal import Decimal, localcontext

from gbce_app.data.models import Trade
from gbce_app.errors import EmptyLedgerError

from .rounding import DEFAULT_PLACES, round_half_up

ROOT_PRECISION = 50


def calculate_gbce(trades: Sequence[Trade], places: int = DEFAULT_PLACES) -> Decimal:
    """
    Calculate the GBCE All Share Index

    GBCE = (price_1 * price_2 * ... * price_n) ** (1 / n)

    The product is exact, but the nth root goes through a float: there is
    no exact decimal nth root. The error is far below the final rounding.
    Products that overflow or underflow a float take the root through
    Decimal logarithms instead.

    Args:
        trades: Every recorded trade across all stocks
        places: Decimal places in the result

    Returns:
        Index value rounded half-up

    Raises:
        EmptyLedgerError: If no trades have been recorded
    """
    if not trades:
        raise EmptyLedgerError("GBCE can not be calculated as there have been no trades")

    n = len(trades)

    # Starts at 1 so the first price is multiplied like the rest
    product = Decimal(1)
    for trade in trades:
        product *= trade.price

    as_float = float(product)
    if product == 0 or (math.isfinite(as_float) and as_float != 0.0):
        root = math.pow(as_float, 1.0 / n)

        # repr gives the shortest string that round-trips the float
        return round_half_up(Decimal(repr(root)), places)

    return round_half_up(_decimal_root(product, n), places)


def _decimal_root(product: Decimal, n: int) -> Decimal:
    """nth root through Decimal logarithms, for products outside float range."""
    with localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        return (product.ln() / n).exp()
