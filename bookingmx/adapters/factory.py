import os

from bookingmx.domain.reservation_store import ReservationStore

DEFAULT_DB_PATH = "data/bookingmx.db"


def create_reservation_store(
    backend: str | None = None,
    db_path: str | None = None,
) -> ReservationStore:
    """
    Factory: create the right store adapter based on config.

    The backend can be passed explicitly or read from the
    RESERVATION_STORE env var. Defaults to "memory". The SQLite
    path comes from db_path or DB_PATH.
    """
    backend = backend or os.environ.get("RESERVATION_STORE", "memory")

    if backend == "sqlite":
        from .sqlite_reservation_store import SqliteReservationStore

        path = db_path or os.environ.get("DB_PATH", DEFAULT_DB_PATH)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return SqliteReservationStore(db_path=path)

    if backend == "memory":
        from .memory_reservation_store import InMemoryReservationStore

        return InMemoryReservationStore()

    raise ValueError(f"Unknown reservation store: {backend!r}")
