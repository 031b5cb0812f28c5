"""
In-memory ReservationStore for tests and local development. No database required.
"""

import logging
import threading

from bookingmx.domain.reservation import Reservation
from bookingmx.domain.reservation_store import ReservationStore

log = logging.getLogger(__name__)


class InMemoryReservationStore(ReservationStore):
    """
    Dict-backed store. Returns the stored instances themselves, so an
    update made through the lifecycle is visible to every holder.
    """

    def __init__(self):
        self._store: dict[int, Reservation] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> list[Reservation]:
        with self._lock:
            return list(self._store.values())

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            return self._store.get(reservation_id)

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.id is None:
                reservation.id = self._next_id
                self._next_id += 1
            else:
                # Keep assigned ids clear of ids chosen by callers.
                self._next_id = max(self._next_id, reservation.id + 1)
            self._store[reservation.id] = reservation
        log.debug("saved reservation id=%d status=%s", reservation.id, reservation.status.value)
        return reservation

    def delete(self, reservation_id: int) -> None:
        with self._lock:
            removed = self._store.pop(reservation_id, None)
        if removed is not None:
            log.debug("deleted reservation id=%d", reservation_id)
