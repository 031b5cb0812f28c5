"""
Reservation model.

A reservation is created Active with no identifier, receives its id on
first save, and may be moved to Canceled. Canceled is terminal.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


@dataclass
class ReservationRequest:
    """Guest input for create and update. Dates may be missing."""

    guest_name: str
    hotel_name: str
    check_in: date | None
    check_out: date | None


@dataclass(eq=False)
class Reservation:
    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date
    status: ReservationStatus = ReservationStatus.ACTIVE
    id: int | None = field(default=None)

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def __eq__(self, other: object) -> bool:
        # Identity is the store-assigned id; unsaved records only equal themselves.
        if not isinstance(other, Reservation):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
