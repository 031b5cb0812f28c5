"""
Reservation lifecycle.

Validates guest input and enforces the Active → Canceled transition.
Persistence goes through the ReservationStore port, injected at
construction time:

  create  → validate dates → new Active reservation → store.save
  update  → lookup → must be Active → validate dates → overwrite → store.save
  cancel  → lookup → status = Canceled → store.save

Date rules run in a fixed order and the first failure wins.
"""

import logging
from datetime import date
from typing import Callable

from bookingmx.domain.errors import InvalidInput, InvalidState, NotFound
from bookingmx.domain.reservation import Reservation, ReservationRequest, ReservationStatus
from bookingmx.domain.reservation_store import ReservationStore

log = logging.getLogger(__name__)


def validate_dates(
    check_in: date | None,
    check_out: date | None,
    today: date,
) -> None:
    """Raise InvalidInput for the first violated date rule."""
    if check_in is None or check_out is None:
        raise InvalidInput("dates cannot be absent")
    if not check_out > check_in:
        raise InvalidInput("check-out must be after check-in")
    if check_in < today:
        raise InvalidInput("check-in must be in the future")
    if check_out < today:
        raise InvalidInput("check-out must be in the future")


class ReservationLifecycle:
    """
    Business rules around a ReservationStore.

    `today` is called on every validation so a long-lived instance keeps
    up with the calendar; tests pass a fixed date.
    """

    def __init__(
        self,
        store: ReservationStore,
        today: Callable[[], date] = date.today,
    ):
        self._store = store
        self._today = today

    def get(self, reservation_id: int) -> Reservation:
        existing = self._store.find_by_id(reservation_id)
        if existing is None:
            log.warning("res=%s not found", reservation_id)
            raise NotFound("reservation not found")
        return existing

    def create(self, request: ReservationRequest) -> Reservation:
        self._validate(request)
        reservation = Reservation(
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
        )
        saved = self._store.save(reservation)
        log.info(
            "res=%d created guest=%r hotel=%r %s → %s",
            saved.id, saved.guest_name, saved.hotel_name,
            saved.check_in.isoformat(), saved.check_out.isoformat(),
        )
        return saved

    def update(self, reservation_id: int, request: ReservationRequest) -> Reservation:
        existing = self.get(reservation_id)

        if not existing.is_active:
            log.warning("res=%d update rejected: reservation is canceled", reservation_id)
            raise InvalidState("cannot update a canceled reservation")

        self._validate(request)

        existing.guest_name = request.guest_name
        existing.hotel_name = request.hotel_name
        existing.check_in = request.check_in
        existing.check_out = request.check_out

        saved = self._store.save(existing)
        log.info(
            "res=%d updated %s → %s",
            saved.id, saved.check_in.isoformat(), saved.check_out.isoformat(),
        )
        return saved

    def cancel(self, reservation_id: int) -> Reservation:
        # Canceling twice is allowed and leaves the status unchanged.
        existing = self.get(reservation_id)
        existing.status = ReservationStatus.CANCELED
        saved = self._store.save(existing)
        log.info("res=%d canceled", saved.id)
        return saved

    def _validate(self, request: ReservationRequest) -> None:
        try:
            validate_dates(request.check_in, request.check_out, self._today())
        except InvalidInput as exc:
            log.warning("rejected reservation dates: %s", exc.message)
            raise

    # Defined last: the method name shadows the builtin inside the class body.
    def list(self) -> list[Reservation]:
        return self._store.find_all()
