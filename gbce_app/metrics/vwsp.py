"""Volume Weighted Stock Price over a trailing time window"""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Optional

from gbce_app.data.models import Trade
from gbce_app.utils.time import ensure_reference_time, window_cutoff

from .rounding import DEFAULT_PLACES, divide


def calculate_vwsp(trades: Iterable[Trade], window_minutes: int,
                   now: Optional[datetime] = None,
                   places: int = DEFAULT_PLACES) -> Decimal:
    """
    Calculate the Volume Weighted Stock Price

    VWSP = sum(quantity * price) / sum(quantity)

    Only trades strictly after now - window_minutes are included; a trade
    exactly on the cutoff is left out.

    Args:
        trades: Trades to consider, normally one symbol's ledger slice
        window_minutes: Length of the trailing window
        now: Reference instant closing the window, defaults to the current UTC time
        places: Decimal places in the result

    Returns:
        VWSP rounded half-up, or exactly 0 if no trade falls in the window
    """
    # Evaluated once so every trade is compared against the same cutoff
    cutoff = window_cutoff(ensure_reference_time(now), window_minutes)

    total_quantity = Decimal(0)
    total_notional = Decimal(0)

    for trade in trades:
        if trade.timestamp > cutoff:
            total_notional += trade.notional
            total_quantity += trade.quantity

    if total_quantity == 0:
        return Decimal(0)

    return divide(total_notional, total_quantity, places)
