"""Reservation requests and the hotel catalog that answers them."""

from lodging_pricing.reservation.hotel_reservation import HotelReservation, default_hotels
from lodging_pricing.reservation.request_parser import (
    REQUEST_FORMAT,
    InvalidReservationRequestError,
    ReservationRequest,
    parse_reservation_request,
)

__all__ = [
    "HotelReservation",
    "InvalidReservationRequestError",
    "REQUEST_FORMAT",
    "ReservationRequest",
    "default_hotels",
    "parse_reservation_request",
]
