"""Calculation engine for dividend, valuation and index metrics"""

from .calculator import StockCalculator
from .dividend import calculate_dividend_yield, calculate_pe_ratio
from .gbce import calculate_gbce
from .rounding import divide, round_half_up
from .vwsp import calculate_vwsp

__all__ = [
    "StockCalculator",
    "calculate_dividend_yield",
    "calculate_pe_ratio",
    "calculate_vwsp",
    "calculate_gbce",
    "divide",
    "round_half_up",
]
