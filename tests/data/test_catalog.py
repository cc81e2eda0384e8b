"""Tests for the fixed instrument catalog"""

import pytest
from decimal import Decimal

from gbce_app.data.catalog import INSTRUMENTS, all_instruments, lookup
from gbce_app.data.models import StockSymbol, StockType
from gbce_app.errors import NotFoundError


class TestLookup:
    """Test catalog lookups"""

    @pytest.mark.parametrize("symbol,kind,last_dividend,fixed_dividend,par_value", [
        (StockSymbol.TEA, StockType.COMMON, 0, None, 100),
        (StockSymbol.POP, StockType.COMMON, 8, None, 100),
        (StockSymbol.ALE, StockType.COMMON, 23, None, 60),
        (StockSymbol.GIN, StockType.PREFERRED, 8, Decimal("0.02"), 100),
        (StockSymbol.JOE, StockType.COMMON, 13, None, 250),
    ])
    def test_reference_data(self, symbol, kind, last_dividend, fixed_dividend, par_value):
        """Each symbol maps to its published reference data"""
        instrument = lookup(symbol)

        assert instrument.symbol is symbol
        assert instrument.kind is kind
        assert instrument.last_dividend == last_dividend
        assert instrument.fixed_dividend == fixed_dividend
        assert instrument.par_value == par_value

    def test_lookup_by_text(self):
        """Text symbols resolve case-insensitively"""
        assert lookup("gin") is INSTRUMENTS[StockSymbol.GIN]
        assert lookup(" Pop ") is INSTRUMENTS[StockSymbol.POP]

    def test_lookup_unknown_text(self):
        """Unknown text symbols raise NotFoundError"""
        with pytest.raises(NotFoundError) as exc_info:
            lookup("XYZ")

        assert exc_info.value.symbol == "XYZ"
        assert "XYZ" in str(exc_info.value)

    def test_lookup_non_symbol(self):
        """Keys outside the catalog raise NotFoundError"""
        with pytest.raises(NotFoundError):
            lookup(42)


class TestCatalogShape:
    """Test catalog invariants"""

    def test_one_entry_per_symbol(self):
        """Exactly one instrument exists per symbol"""
        instruments = all_instruments()

        assert len(instruments) == len(StockSymbol)
        assert [i.symbol for i in instruments] == list(StockSymbol)

    def test_catalog_is_read_only(self):
        """The catalog mapping cannot be modified"""
        with pytest.raises(TypeError):
            INSTRUMENTS[StockSymbol.TEA] = INSTRUMENTS[StockSymbol.POP]

    def test_instruments_are_frozen(self):
        """Catalog entries cannot be mutated"""
        with pytest.raises(AttributeError):
            lookup(StockSymbol.TEA).last_dividend = 5

    def test_only_preferred_has_fixed_dividend(self):
        """Fixed dividend is present for PREFERRED and absent for COMMON"""
        for instrument in all_instruments():
            if instrument.kind is StockType.PREFERRED:
                assert instrument.fixed_dividend is not None
            else:
                assert instrument.fixed_dividend is None
