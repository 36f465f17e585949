from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from functools import cmp_to_key
from typing import Protocol, TypeVar

from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.domain.pricing.protocol import PriceSchedule

logger = logging.getLogger(__name__)


# region Interface


class PricedEntity(Protocol):
    """Anything that can be priced for regular and rewards clients and ranked on ties.

    `Hotel` is the usual implementation; the comparator only needs these three attributes.
    """

    @property
    def rank(self) -> int: ...

    @property
    def regular_schedule(self) -> PriceSchedule: ...

    @property
    def rewards_schedule(self) -> PriceSchedule: ...


# endregion

E = TypeVar("E", bound=PricedEntity)


def total_price(entity: PricedEntity, is_rewards_client: bool, dates: Sequence[date]) -> Money:
    """Price every night in $dates with the schedule matching the client type.

    Args:
        entity: Provider to price.
        is_rewards_client: True selects $entity.rewards_schedule, False the regular one.
        dates: Nights to price; duplicates are priced independently.

    Returns:
        Total as Money.

    Raises:
        ValueError: If $dates is empty.
    """
    schedule = entity.rewards_schedule if is_rewards_client else entity.regular_schedule
    return schedule.price_over_dates(dates)


def compare_price(a: PricedEntity, b: PricedEntity, is_rewards_client: bool, dates: Sequence[date]) -> int:
    """Order $a and $b by total price; on an exact tie the higher rank comes first.

    Returns:
        -1 if $a sorts before $b, 1 if after, 0 only when price and rank are both equal.

    Raises:
        CurrencyMismatchError: If the two totals are in different currencies.
    """
    price_comparison = total_price(a, is_rewards_client, dates).compare_to(total_price(b, is_rewards_client, dates))
    if price_comparison != 0:
        return price_comparison

    # Tie: descending rank, so the better provider is "less"
    return (b.rank > a.rank) - (b.rank < a.rank)


def find_cheapest(entities: Iterable[E], is_rewards_client: bool, dates: Sequence[date]) -> E:
    """Return the entity that `compare_price` orders first.

    When several entities share the same price and rank, the earliest one wins.

    Raises:
        ValueError: If $entities or $dates is empty.
    """
    candidates = list(entities)

    # Raise: a minimum of nothing is undefined
    if not candidates:
        raise ValueError("Cannot call `find_cheapest` because $entities is empty")

    # Raise: without nights there is no price to compare
    if not dates:
        raise ValueError("Cannot call `find_cheapest` because $dates is empty")

    cheapest = min(candidates, key=cmp_to_key(lambda a, b: compare_price(a, b, is_rewards_client, dates)))
    logger.debug(f"Selected cheapest of {len(candidates)} candidate(s) for {len(dates)} night(s) (rewards={is_rewards_client}): {cheapest!r} at {total_price(cheapest, is_rewards_client, dates)}")
    return cheapest
