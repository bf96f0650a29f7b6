"""
Alke Wallet

An in-memory two-currency (USD/CLP) wallet with deposits, withdrawals,
whole-balance conversion and an append-only transaction history. All
financial math uses Decimal.
"""

__version__ = "1.0.0"
