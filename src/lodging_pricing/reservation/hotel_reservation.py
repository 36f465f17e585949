from __future__ import annotations

import logging
from collections.abc import Iterable

from lodging_pricing.comparison.price_comparator import find_cheapest
from lodging_pricing.domain.hotel import Hotel
from lodging_pricing.reservation.request_parser import parse_reservation_request

logger = logging.getLogger(__name__)


def default_hotels() -> list[Hotel]:
    """Return the standard catalog: weekday/weekend prices in reais for regular and rewards clients."""
    return [
        Hotel.with_weekend_schedule("Lakewood", 3, 110, 90, 80, 80),
        Hotel.with_weekend_schedule("Bridgewood", 4, 160, 60, 110, 50),
        Hotel.with_weekend_schedule("Ridgewood", 5, 220, 150, 100, 40),
    ]


class HotelReservation:
    """In-memory hotel catalog answering "which hotel is cheapest for this request?".

    Args:
        hotels: Initial catalog. When None, `default_hotels()` is used.
    """

    def __init__(self, hotels: Iterable[Hotel] | None = None) -> None:
        self._hotels: list[Hotel] = default_hotels() if hotels is None else list(hotels)

    @property
    def hotels(self) -> tuple[Hotel, ...]:
        """Snapshot of the catalog; changing it does not affect this object."""
        return tuple(self._hotels)

    def add_hotel(self, hotel: Hotel) -> None:
        if not isinstance(hotel, Hotel):
            raise TypeError(f"Cannot call `add_hotel` because $hotel is not Hotel (got type '{type(hotel).__name__}')")
        self._hotels.append(hotel)
        logger.debug(f"Added {hotel!r} to catalog ({len(self._hotels)} hotel(s))")

    def remove_hotel(self, hotel: Hotel) -> None:
        """Remove $hotel from the catalog.

        Raises:
            ValueError: If $hotel is not in the catalog.
        """
        if hotel not in self._hotels:
            raise ValueError(f"Cannot call `remove_hotel` because {hotel!r} is not in the catalog")
        self._hotels.remove(hotel)
        logger.debug(f"Removed {hotel!r} from catalog ({len(self._hotels)} hotel(s))")

    def get_cheapest_hotel(self, text: str) -> str:
        """Parse a reservation request line and return the name of the cheapest hotel.

        Ties on price go to the hotel with the higher rank.

        Raises:
            InvalidReservationRequestError: If $text is malformed.
            ValueError: If the catalog is empty.
        """
        request = parse_reservation_request(text)
        cheapest = find_cheapest(self._hotels, request.is_rewards_client, request.dates)
        logger.info(f"Cheapest hotel for {request.client_type.value} client over {len(request.dates)} night(s): {cheapest.name}")
        return cheapest.name
