"""Brokerage order ledger: order evaluation and portfolio valuation."""

__version__ = "0.1.0"
