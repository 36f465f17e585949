from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date

from lodging_pricing.domain.hotel import ClientType

logger = logging.getLogger(__name__)

# "16Mar2009(mon)": day, 3-4 letter English month, year, weekday label (not validated)
_DATE_PATTERN = re.compile(r"([0-9]{2})([A-Za-z]{3,4})([0-9]{4})\([a-z]{3,4}\)")

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

REQUEST_FORMAT = "<Regular|Rewards>: <date1(ddMMMyyyy(EEE))>, <date2>, <date3>, ..."


class InvalidReservationRequestError(ValueError):
    """Raised when a reservation request does not follow `REQUEST_FORMAT`."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid reservation request '{text}': {reason}. Expected format: {REQUEST_FORMAT}")


@dataclass(frozen=True)
class ReservationRequest:
    """Parsed reservation request: who is staying and which nights, in request order."""

    client_type: ClientType
    dates: tuple[date, ...]

    @property
    def is_rewards_client(self) -> bool:
        return self.client_type.is_rewards


def _parse_month(token: str) -> int:
    # Accepts "Mar" as well as 4-letter forms such as "Sept" or "June"
    lowered = token.lower()
    for number, month_name in enumerate(_MONTH_NAMES, start=1):
        if month_name.startswith(lowered):
            return number
    raise ValueError(f"unknown month '{token}'")


def parse_reservation_request(text: str) -> ReservationRequest:
    """Parse a line like 'Regular: 16Mar2009(mon), 17Mar2009(tues)'.

    The client label is everything before the first ':' (surrounding whitespace is
    ignored) and must be exactly "Regular" or "Rewards". Every date token after it is
    collected in order; duplicates are kept.

    Args:
        text: The raw request line.

    Returns:
        ReservationRequest with at least one date.

    Raises:
        InvalidReservationRequestError: If the label is unknown, no date is found, or a
            date does not exist in the calendar.
    """
    if not isinstance(text, str):
        raise InvalidReservationRequestError(str(text), "request is not text")

    label, _, body = text.partition(":")

    try:
        client_type = ClientType.from_label(label.strip())
    except ValueError as e:
        raise InvalidReservationRequestError(text, f"unknown client type '{label.strip()}'") from e

    dates: list[date] = []
    for match in _DATE_PATTERN.finditer(body):
        day, month, year = match.groups()
        try:
            dates.append(date(int(year), _parse_month(month), int(day)))
        except ValueError as e:
            raise InvalidReservationRequestError(text, f"'{match.group(0)}' is not a valid date ({e})") from e

    # Raise: at least one night is needed to price anything
    if not dates:
        raise InvalidReservationRequestError(text, "no dates found")

    logger.debug(f"Parsed reservation request: client_type={client_type.value}, {len(dates)} date(s)")
    return ReservationRequest(client_type=client_type, dates=tuple(dates))
