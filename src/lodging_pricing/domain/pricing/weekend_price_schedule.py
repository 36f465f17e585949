from __future__ import annotations

from datetime import date

from lodging_pricing.domain.monetary.currency import Currency
from lodging_pricing.domain.monetary.currency_registry import DEFAULT_CURRENCY
from lodging_pricing.domain.monetary.errors import CurrencyMismatchError
from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.utils.date_tools import is_weekend
from lodging_pricing.utils.decimal_tools import DecimalLike

from .protocol import PriceSchedule


class WeekendPriceSchedule(PriceSchedule):
    """Two-tier schedule: one price Monday to Friday, another on Saturday and Sunday.

    Args:
        weekday_price: Price of a night starting Monday through Friday.
        weekend_price: Price of a night starting on Saturday or Sunday.
            Must be in the same currency as $weekday_price.
    """

    __slots__ = ("_weekday_price", "_weekend_price")

    def __init__(self, weekday_price: Money, weekend_price: Money) -> None:
        # Raise: both tiers must be Money so the schedule always yields Money
        if not isinstance(weekday_price, Money) or not isinstance(weekend_price, Money):
            raise TypeError(f"Cannot init `WeekendPriceSchedule` because prices must be Money (got types '{type(weekday_price).__name__}' and '{type(weekend_price).__name__}')")

        # Raise: a schedule whose tiers differ in currency could not be summed
        if weekday_price.currency != weekend_price.currency:
            raise CurrencyMismatchError(weekday_price.currency, weekend_price.currency, "WeekendPriceSchedule.__init__")

        self._weekday_price = weekday_price
        self._weekend_price = weekend_price

    @classmethod
    def of_major(cls, weekday_price: DecimalLike, weekend_price: DecimalLike, currency: Currency = DEFAULT_CURRENCY) -> WeekendPriceSchedule:
        """Build a schedule from two major-unit amounts in $currency (reais by default)."""
        return cls(Money.of_major(weekday_price, currency), Money.of_major(weekend_price, currency))

    @property
    def weekday_price(self) -> Money:
        return self._weekday_price

    @property
    def weekend_price(self) -> Money:
        return self._weekend_price

    @property
    def currency(self) -> Currency:
        return self._weekday_price.currency

    def price_on(self, day: date) -> Money:
        """Implements: PriceSchedule.price_on

        Returns $weekend_price for Saturday and Sunday, otherwise $weekday_price.
        """
        return self._weekend_price if is_weekend(day) else self._weekday_price

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeekendPriceSchedule):
            return False
        return self._weekday_price == other._weekday_price and self._weekend_price == other._weekend_price

    def __hash__(self) -> int:
        return hash((self._weekday_price, self._weekend_price))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(weekday={self._weekday_price!r}, weekend={self._weekend_price!r})"
