"""
GBCE App - Super Simple Stocks Calculation Toolkit

Records buy and sell trades for the sample Global Beverage Corporation
Exchange stocks and derives dividend yield, P/E ratio, volume weighted
stock price and the GBCE All Share Index from them.
"""

__version__ = "0.1.0"
__author__ = "GBCE Team"
