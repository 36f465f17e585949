"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and an exact Money type stored in integer minor
units with rounding-aware arithmetic and remainder-safe allocation.
"""

from lodging_pricing.domain.monetary.currency import Currency
from lodging_pricing.domain.monetary.currency_registry import BRL, DEFAULT_CURRENCY, EUR, GBP, JPY, KWD, USD
from lodging_pricing.domain.monetary.errors import CurrencyMismatchError, MissingCurrencyError
from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.domain.monetary.rounding import DEFAULT_ROUNDING, RoundingMode

__all__ = [
    "BRL",
    "Currency",
    "CurrencyMismatchError",
    "DEFAULT_CURRENCY",
    "DEFAULT_ROUNDING",
    "EUR",
    "GBP",
    "JPY",
    "KWD",
    "MissingCurrencyError",
    "Money",
    "RoundingMode",
    "USD",
]
