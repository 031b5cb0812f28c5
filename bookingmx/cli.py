"""
Command implementations for scripts/reservations.py and scripts/nearby.py.

Kept out of the scripts so they can be imported and tested against an
in-memory store.
"""

from datetime import date
from typing import Callable

from bookingmx.domain.errors import ReservationError
from bookingmx.domain.reservation import Reservation, ReservationRequest
from bookingmx.domain.reservation_store import ReservationStore
from bookingmx.graph_query import (
    DEFAULT_MAX_DISTANCE,
    SAMPLE_DATA,
    build_graph,
    get_nearby_cities,
    validate_graph_data,
)
from bookingmx.lifecycle import ReservationLifecycle
from bookingmx.payloads import parse_reservation_request


RESERVATIONS_USAGE = """\
Usage:
    python scripts/reservations.py [list]                             # list reservations
    python scripts/reservations.py show ID
    python scripts/reservations.py create GUEST HOTEL CHECK_IN CHECK_OUT
    python scripts/reservations.py update ID GUEST HOTEL CHECK_IN CHECK_OUT
    python scripts/reservations.py cancel ID

Dates are ISO formatted (YYYY-MM-DD)."""

NEARBY_USAGE = """\
Usage:
    python scripts/nearby.py CITY [MAX_DISTANCE]"""


def _format_row(r: Reservation) -> str:
    return (
        f"{r.id:>4}  {r.status.value:<8}  {r.guest_name[:20]:<20}  "
        f"{r.hotel_name[:20]:<20}  {r.check_in.isoformat()} → {r.check_out.isoformat()}"
    )


def _request_from_args(args: list[str]) -> ReservationRequest:
    guest, hotel, check_in, check_out = args
    return parse_reservation_request(
        {"guestName": guest, "hotelName": hotel, "checkIn": check_in, "checkOut": check_out}
    )


def list_reservations(lifecycle: ReservationLifecycle) -> None:
    reservations = sorted(lifecycle.list(), key=lambda r: r.id)
    if not reservations:
        print("No reservations.")
        return

    print(f"\n{'ID':>4}  {'Status':<8}  {'Guest':<20}  {'Hotel':<20}  Dates")
    print("-" * 80)
    for r in reservations:
        print(_format_row(r))
    print()


def run_reservations(
    argv: list[str],
    store: ReservationStore,
    today: Callable[[], date] = date.today,
) -> int:
    """Dispatch one reservations command. Returns the process exit code."""
    lifecycle = ReservationLifecycle(store, today=today)

    if not argv or argv == ["list"]:
        list_reservations(lifecycle)
        return 0

    cmd, args = argv[0], argv[1:]
    reservation_id = None
    if cmd in ("show", "update", "cancel") and args:
        try:
            reservation_id = int(args[0])
        except ValueError:
            print("ERROR: reservation id must be an integer.")
            return 2

    try:
        if cmd == "show" and len(args) == 1:
            print(_format_row(lifecycle.get(reservation_id)))
        elif cmd == "create" and len(args) == 4:
            created = lifecycle.create(_request_from_args(args))
            print(f"Reservation #{created.id} created.")
        elif cmd == "update" and len(args) == 5:
            updated = lifecycle.update(reservation_id, _request_from_args(args[1:]))
            print(f"Reservation #{updated.id} updated.")
        elif cmd == "cancel" and len(args) == 1:
            canceled = lifecycle.cancel(reservation_id)
            print(f"Reservation #{canceled.id} canceled.")
        else:
            print(RESERVATIONS_USAGE)
            return 2
    except ReservationError as exc:
        print(f"ERROR: {exc.message}")
        return 1
    return 0


def run_nearby(argv: list[str], data: dict | None = None) -> int:
    """Print the direct neighbors of a city in the sample dataset."""
    if not argv or len(argv) > 2:
        print(NEARBY_USAGE)
        return 2

    data = data if data is not None else SAMPLE_DATA
    result = validate_graph_data(data)
    if not result.ok:
        print(f"ERROR: invalid dataset: {result.reason}")
        return 1

    destination = argv[0]
    try:
        max_distance = float(argv[1]) if len(argv) == 2 else DEFAULT_MAX_DISTANCE
    except ValueError:
        print(f"ERROR: max distance must be a number, got {argv[1]!r}.")
        return 2

    graph = build_graph(data["cities"], data["edges"])
    try:
        nearby = get_nearby_cities(graph, destination, max_distance)
    except ReservationError as exc:
        print(f"ERROR: {exc.message}")
        return 2
    if not nearby:
        print(f"No cities within {max_distance:g} km of {destination}.")
        return 0

    for n in nearby:
        print(f"{n.distance:>6g} km  {n.city}")
    return 0
