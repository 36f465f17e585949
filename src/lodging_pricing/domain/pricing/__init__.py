"""Price schedules: pure functions from a calendar date to the Money price of a night."""

from lodging_pricing.domain.pricing.protocol import PriceSchedule
from lodging_pricing.domain.pricing.weekend_price_schedule import WeekendPriceSchedule

__all__ = ["PriceSchedule", "WeekendPriceSchedule"]
