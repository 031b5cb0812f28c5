#!/usr/bin/env python3
"""
Reservation admin CLI: list, create, update, and cancel reservations.

Usage (from project root):
    python scripts/reservations.py                                   # list
    python scripts/reservations.py show 3
    python scripts/reservations.py create "Ana" "Hotel Azul" 2026-11-01 2026-11-03
    python scripts/reservations.py update 3 "Ana" "Hotel Azul" 2026-11-02 2026-11-05
    python scripts/reservations.py cancel 3

Environment variables:
    RESERVATION_STORE   - "sqlite" or "memory" (default: sqlite)
    DB_PATH             - SQLite database path (default: data/bookingmx.db)
    LOG_LEVEL           - logging level (default: WARNING)
"""

import logging
import os
import sys

# Allow running as `python scripts/reservations.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bookingmx.adapters.factory import create_reservation_store
from bookingmx.cli import run_reservations

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING"),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def main() -> int:
    store = create_reservation_store(os.environ.get("RESERVATION_STORE", "sqlite"))
    return run_reservations(sys.argv[1:], store)


if __name__ == "__main__":
    sys.exit(main())
