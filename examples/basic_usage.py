#!/usr/bin/env python3
"""
Basic Usage Example - GBCE Stock Calculation Toolkit

This script demonstrates the basic usage of the stock market engine with a
handful of simulated trades. It shows how to:
- Initialize the engine and logging
- Look up instrument reference data
- Record trades
- Calculate dividend yield, P/E ratio, VWSP and the GBCE index
- Handle the engine's domain errors

Run: python examples/basic_usage.py
"""

from dataclasses import asdict
from datetime import datetime, timedelta, timezone

from gbce_app.config.loader import load_config
from gbce_app.engine import StockMarketEngine
from gbce_app.errors import StockCalculationError
from gbce_app.logging import configure_logging


def main() -> None:
    """Run the basic usage demonstration."""
    config = load_config()
    configure_logging(**asdict(config.logging))

    now = datetime.now(timezone.utc)
    engine = StockMarketEngine(clock=lambda: now)

    print("GBCE Stock Calculation Toolkit - Basic Usage")
    print("=" * 50)

    print("\n📋 Instruments")
    for symbol in ("TEA", "POP", "ALE", "GIN", "JOE"):
        instrument = engine.instrument(symbol)
        print(f"  {instrument.symbol.value}: {instrument.kind.value}, "
              f"last dividend {instrument.last_dividend}, par value {instrument.par_value}")

    print("\n💰 Dividend yield and P/E at a market price of 46p")
    for symbol in ("POP", "ALE", "GIN", "TEA"):
        try:
            print(f"  {symbol} yield: {engine.dividend_yield(symbol, 46)}")
            print(f"  {symbol} P/E:   {engine.pe_ratio(symbol, 46)}")
        except StockCalculationError as e:
            print(f"  {symbol}: {e}")

    print("\n📈 Recording trades")
    ten_minutes_ago = now - timedelta(minutes=10)
    twenty_minutes_ago = now - timedelta(minutes=20)
    engine.record_trade("BUY", "ALE", 6, 120, timestamp=ten_minutes_ago)
    engine.record_trade("SELL", "ALE", 4, 140, timestamp=ten_minutes_ago)
    engine.record_trade("SELL", "TEA", 20, 30, timestamp=ten_minutes_ago)
    engine.record_trade("BUY", "ALE", 10, 120, timestamp=twenty_minutes_ago)
    engine.record_trade("BUY", "POP", 15, 10, timestamp=twenty_minutes_ago)
    engine.record_trade("SELL", "GIN", 17, 230, timestamp=twenty_minutes_ago)
    print(f"  {len(engine.ledger)} trades recorded")

    print("\n⚖️  Volume weighted stock price (last 15 minutes)")
    for symbol in ("ALE", "TEA", "GIN"):
        print(f"  {symbol}: {engine.vwsp(symbol)}")

    print("\n🏦 GBCE All Share Index")
    print(f"  {engine.gbce()}")


if __name__ == "__main__":
    main()
