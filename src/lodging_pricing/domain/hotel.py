from __future__ import annotations

from enum import Enum

from lodging_pricing.domain.monetary.currency import Currency
from lodging_pricing.domain.monetary.currency_registry import DEFAULT_CURRENCY
from lodging_pricing.domain.pricing.protocol import PriceSchedule
from lodging_pricing.domain.pricing.weekend_price_schedule import WeekendPriceSchedule
from lodging_pricing.utils.decimal_tools import DecimalLike


class ClientType(Enum):
    """Client categories; each one is priced with its own schedule.

    The value is the label used in reservation requests.
    """

    REGULAR = "Regular"
    REWARDS = "Rewards"

    @property
    def is_rewards(self) -> bool:
        return self is ClientType.REWARDS

    @classmethod
    def from_label(cls, label: str) -> ClientType:
        """Resolve a request label ("Regular" or "Rewards", exact case) to a ClientType.

        Raises:
            ValueError: If $label is not a known client type.
        """
        for client_type in cls:
            if client_type.value == label:
                return client_type
        raise ValueError(f"Unknown client type $label '{label}'. Expected one of: {[c.value for c in cls]}")


class Hotel:
    """A lodging provider with separate price schedules for regular and rewards clients.

    Attributes:
        name (str): Display name, returned as the answer of cheapest-hotel queries.
        rank (int): Quality tier; higher is better. Only used to break price ties.
        regular_schedule (PriceSchedule): Prices for regular clients.
        rewards_schedule (PriceSchedule): Prices for rewards-program clients.
    """

    __slots__ = ("_name", "_rank", "_regular_schedule", "_rewards_schedule")

    def __init__(self, name: str, rank: int, regular_schedule: PriceSchedule, rewards_schedule: PriceSchedule) -> None:
        """Initialize a Hotel.

        Raises:
            ValueError: If $name is empty.
            TypeError: If $rank is not an int or a schedule is missing.
        """
        # Raise: the name identifies the hotel in query answers
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot init `Hotel` because $name is empty (got '{name}')")

        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f"Cannot init `Hotel` because $rank is not int (got type '{type(rank).__name__}')")

        if regular_schedule is None or rewards_schedule is None:
            raise TypeError(f"Cannot init `Hotel` named '{name}' because a price schedule is None")

        self._name = name.strip()
        self._rank = rank
        self._regular_schedule = regular_schedule
        self._rewards_schedule = rewards_schedule

    @classmethod
    def with_weekend_schedule(
        cls,
        name: str,
        rank: int,
        regular_weekday: DecimalLike,
        regular_weekend: DecimalLike,
        rewards_weekday: DecimalLike,
        rewards_weekend: DecimalLike,
        currency: Currency = DEFAULT_CURRENCY,
    ) -> Hotel:
        """Create a Hotel whose two schedules are weekday/weekend splits in major units."""
        return cls(
            name,
            rank,
            WeekendPriceSchedule.of_major(regular_weekday, regular_weekend, currency),
            WeekendPriceSchedule.of_major(rewards_weekday, rewards_weekend, currency),
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def regular_schedule(self) -> PriceSchedule:
        return self._regular_schedule

    @property
    def rewards_schedule(self) -> PriceSchedule:
        return self._rewards_schedule

    def schedule_for(self, client_type: ClientType) -> PriceSchedule:
        """Return the schedule that prices $client_type."""
        return self._rewards_schedule if client_type.is_rewards else self._regular_schedule

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hotel):
            return False
        return (
            self._name == other._name
            and self._rank == other._rank
            and self._regular_schedule == other._regular_schedule
            and self._rewards_schedule == other._rewards_schedule
        )

    def __hash__(self) -> int:
        return hash((self._name, self._rank))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._name}', rank={self._rank})"
