"""Instrument reference data, trade records and the trade ledger"""
