"""
SQLite adapter for ReservationStore.

Use ":memory:" for tests, a file path for production.
"""

import logging
import sqlite3
import threading
from datetime import date, datetime, timezone

from bookingmx.domain.reservation import Reservation, ReservationStatus
from bookingmx.domain.reservation_store import ReservationStore

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS reservations (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    guest_name  TEXT NOT NULL,
    hotel_name  TEXT NOT NULL,
    check_in    TEXT NOT NULL,
    check_out   TEXT NOT NULL,
    status      TEXT NOT NULL DEFAULT 'ACTIVE',
    updated_at  TEXT NOT NULL
);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_reservation(row: sqlite3.Row) -> Reservation:
    return Reservation(
        id=row["id"],
        guest_name=row["guest_name"],
        hotel_name=row["hotel_name"],
        check_in=date.fromisoformat(row["check_in"]),
        check_out=date.fromisoformat(row["check_out"]),
        status=ReservationStatus(row["status"]),
    )


class SqliteReservationStore(ReservationStore):
    """
    Reads return fresh Reservation instances; callers must save() to
    persist any change they make to one.
    """

    def __init__(self, db_path: str = "bookingmx.db"):
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)
        self._lock = threading.Lock()

    def find_all(self) -> list[Reservation]:
        with self._lock:
            rows = self._conn.execute("SELECT * FROM reservations ORDER BY id").fetchall()
        return [_row_to_reservation(row) for row in rows]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            row = self._conn.execute(
                "SELECT * FROM reservations WHERE id = ?",
                (reservation_id,),
            ).fetchone()
        if not row:
            return None
        return _row_to_reservation(row)

    def save(self, reservation: Reservation) -> Reservation:
        values = (
            reservation.guest_name,
            reservation.hotel_name,
            reservation.check_in.isoformat(),
            reservation.check_out.isoformat(),
            reservation.status.value,
            _now(),
        )
        with self._lock:
            if reservation.id is None:
                cur = self._conn.execute(
                    "INSERT INTO reservations"
                    " (guest_name, hotel_name, check_in, check_out, status, updated_at)"
                    " VALUES (?, ?, ?, ?, ?, ?)",
                    values,
                )
                reservation.id = cur.lastrowid
            else:
                self._conn.execute(
                    "INSERT OR REPLACE INTO reservations"
                    " (id, guest_name, hotel_name, check_in, check_out, status, updated_at)"
                    " VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (reservation.id, *values),
                )
            self._conn.commit()
        log.debug("saved reservation id=%d status=%s", reservation.id, reservation.status.value)
        return reservation

    def delete(self, reservation_id: int) -> None:
        with self._lock:
            self._conn.execute("DELETE FROM reservations WHERE id = ?", (reservation_id,))
            self._conn.commit()
        log.debug("deleted reservation id=%d", reservation_id)

    def close(self) -> None:
        self._conn.close()
