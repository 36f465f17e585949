from __future__ import annotations

import logging

from lodging_pricing.reservation.hotel_reservation import HotelReservation
from lodging_pricing.reservation.request_parser import REQUEST_FORMAT, InvalidReservationRequestError, parse_reservation_request
from lodging_pricing.utils.report.price_report import PriceComparisonReport


logger = logging.getLogger(__name__)


def run() -> None:
    # Catalog with the three default hotels
    reservation = HotelReservation()

    answer = "S"
    while answer in ("S", "s"):
        print("Entrada:")
        line = input()
        try:
            name = reservation.get_cheapest_hotel(line)
            print("Saida:")
            print(name)
            # Per-night breakdown goes to the log, the answer to stdout
            request = parse_reservation_request(line)
            PriceComparisonReport(reservation.hotels, request.is_rewards_client, request.dates).print_report()
        except InvalidReservationRequestError:
            print(f"Formato inválido ({REQUEST_FORMAT})")
        print("\nExecutar novamente? (S)")
        answer = input()
    print("Programa finalizado")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    run()
