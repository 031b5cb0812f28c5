"""
ReservationStore port: owns every reservation and assigns identifiers.
"""

from abc import ABC, abstractmethod

from bookingmx.domain.reservation import Reservation


class ReservationStore(ABC):
    """
    Port: persist reservations keyed by id.

    The lifecycle depends ONLY on this interface. It doesn't know whether
    reservations live in a dict or a SQLite file. Implementations never
    check business rules, they only store.
    """

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """Return every stored reservation. Order is not significant."""
        ...

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Reservation | None:
        """Return the reservation, or None if not stored."""
        ...

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """
        Insert or overwrite a reservation.

        A reservation without an id gets the next counter value (starting
        at 1). One with an id replaces whatever is stored at that id.
        Returns the stored reservation with its id populated.
        """
        ...

    @abstractmethod
    def delete(self, reservation_id: int) -> None:
        """Remove the reservation. No-op if absent."""
        ...
