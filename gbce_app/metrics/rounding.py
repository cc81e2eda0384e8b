"""Half-up decimal rounding shared by every calculation"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

DEFAULT_PLACES = 2

# Working precision for quotients before they are rounded to `places`
DIVISION_PRECISION = 50


def round_half_up(value: Decimal, places: int = DEFAULT_PLACES) -> Decimal:
    """Quantize to `places` fractional digits, ties away from zero."""
    with localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def divide(numerator: Decimal, denominator: Decimal, places: int = DEFAULT_PLACES) -> Decimal:
    """
    Divide two decimals and round the quotient half-up.

    Args:
        numerator: Dividend
        denominator: Divisor, must be non-zero
        places: Fractional digits kept in the result

    Returns:
        numerator / denominator rounded to `places` decimal places
    """
    with localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        quotient = Decimal(numerator) / Decimal(denominator)
    return round_half_up(quotient, places)
