#!/usr/bin/env python3
"""
Nearby-city lookup over the built-in Jalisco sample dataset.

Usage (from project root):
    python scripts/nearby.py Guadalajara          # within 250 km
    python scripts/nearby.py Guadalajara 50
"""

import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bookingmx.cli import run_nearby

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING"),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


if __name__ == "__main__":
    sys.exit(run_nearby(sys.argv[1:]))
