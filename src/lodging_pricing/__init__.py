__version__ = "0.0.1"

from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.domain.hotel import ClientType, Hotel
from lodging_pricing.reservation.hotel_reservation import HotelReservation

__all__ = ["ClientType", "Hotel", "HotelReservation", "Money"]
