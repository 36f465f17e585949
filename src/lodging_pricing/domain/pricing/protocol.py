from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.utils.date_tools import iter_days


# region Interface


class PriceSchedule(Protocol):
    """Domain interface mapping a calendar date to the price of one night.

    Implementations only provide `price_on`. The summing helpers below are inherited by
    classes that subclass this protocol explicitly (see `WeekendPriceSchedule`).
    """

    def price_on(self, day: date) -> Money:
        """Returns the price of the night starting on $day.

        Args:
            day: Calendar date to price.

        Returns:
            The price as Money.
        """
        ...

    def price_over_range(self, start: date, end: date) -> Money:
        """Sum `price_on` for every day from $start to $end, both inclusive.

        When $start equals $end the result is the price of that single day.

        Args:
            start: First night.
            end: Last night; must not be before $start.

        Returns:
            The total as Money.

        Raises:
            ValueError: If $end is before $start.
        """
        # Raise: an inverted range has no nights to price
        if end < start:
            raise ValueError(f"Cannot call `price_over_range` because $end ({end}) is before $start ({start})")

        return self.price_over_dates(list(iter_days(start, end)))

    def price_over_dates(self, dates: Sequence[date]) -> Money:
        """Sum `price_on` over $dates in any order; duplicates are priced each time.

        Args:
            dates: Nights to price. The first one determines the currency of the total.

        Returns:
            The total as Money.

        Raises:
            ValueError: If $dates is empty.
        """
        # Raise: at least one date is needed to know the currency of the result
        if not dates:
            raise ValueError("Cannot call `price_over_dates` because $dates is empty")

        total = Money.zero(self.price_on(dates[0]).currency)
        for day in dates:
            total = total.add(self.price_on(day))
        return total


# endregion
