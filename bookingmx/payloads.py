"""
Translation between API records and domain objects.

Request records use camelCase keys and ISO dates:

    {"guestName": "Ana", "hotelName": "H1",
     "checkIn": "2026-04-01", "checkOut": "2026-04-03"}

Structural problems (not a mapping, blank names, unparseable dates) are
reported here as InvalidInput. Missing dates are passed through as None
so the lifecycle reports them with its own date rules.
"""

import re
from datetime import date, datetime
from typing import Any, Mapping

from bookingmx.domain.errors import InvalidInput, ReservationError
from bookingmx.domain.reservation import Reservation, ReservationRequest

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _parse_name(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(f"{key} must not be blank")
    return value


def _parse_date(payload: Mapping[str, Any], key: str) -> date | None:
    value = payload.get(key)
    if value is None:
        return None
    # datetime is a date subclass but can't be compared with one.
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str) and _ISO_DATE.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidInput(f"{key} must be an ISO date")


def parse_reservation_request(payload: Any) -> ReservationRequest:
    if not isinstance(payload, Mapping):
        raise InvalidInput("request body must be an object")
    return ReservationRequest(
        guest_name=_parse_name(payload, "guestName"),
        hotel_name=_parse_name(payload, "hotelName"),
        check_in=_parse_date(payload, "checkIn"),
        check_out=_parse_date(payload, "checkOut"),
    )


def reservation_to_response(reservation: Reservation) -> dict[str, Any]:
    """Public fields of a reservation, JSON-ready."""
    return {
        "id": reservation.id,
        "guestName": reservation.guest_name,
        "hotelName": reservation.hotel_name,
        "checkIn": reservation.check_in.isoformat(),
        "checkOut": reservation.check_out.isoformat(),
        "status": reservation.status.value,
    }


def error_response(exc: ReservationError) -> tuple[int, dict[str, str]]:
    """Return (http status, body) for a domain error."""
    return exc.http_status, {"error": exc.kind, "message": exc.message}
