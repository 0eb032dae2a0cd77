#!/usr/bin/env python3
"""
Seed script for the airports collection.

Loads airports from a CSV with ``name,iataCode,city`` columns (or a small
built-in sample when no file is given), validates every row the same way the
API does, and inserts them. Rows whose IATA code is already stored are
skipped.

Usage:
    python scripts/seed_airports.py [airports.csv]
"""

import argparse
import asyncio
import csv
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

# Make app package importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.airports.schemas import AirportCreate
from app.airports.service import AirportService
from app.airports.validation import validate_create
from app.core.config import get_settings
from app.core.database import ConnectionState, Database
from app.core.exceptions import DuplicateAirportError, ValidationError
from app.core.logging_config import setup_logging

logger = logging.getLogger("seed_airports")

SAMPLE_AIRPORTS = [
    {"name": "John F. Kennedy International Airport", "iataCode": "JFK", "city": "New York"},
    {"name": "LaGuardia Airport", "iataCode": "LGA", "city": "New York"},
    {"name": "O'Hare International Airport", "iataCode": "ORD", "city": "Chicago"},
    {"name": "Chicago Midway International Airport", "iataCode": "MDW", "city": "Chicago"},
    {"name": "Los Angeles International Airport", "iataCode": "LAX", "city": "Los Angeles"},
    {"name": "Heathrow Airport", "iataCode": "LHR", "city": "London"},
    {"name": "Indira Gandhi International Airport", "iataCode": "DEL", "city": "New Delhi"},
]


def load_airports(rows: Iterable[dict]) -> Tuple[List[AirportCreate], int]:
    """Validate raw rows. Returns the valid airports and the number rejected."""
    airports = []
    rejected = 0
    for line, row in enumerate(rows, start=1):
        try:
            airports.append(validate_create(row))
        except ValidationError as e:
            rejected += 1
            logger.warning(f"Row {line} rejected: {e.message}")
    return airports, rejected


def read_csv(path: Path) -> List[dict]:
    if not path.exists():
        raise FileNotFoundError(f"CSV not found at {path}")
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


async def seed(service: AirportService, airports: Iterable[AirportCreate]) -> Tuple[int, int]:
    """Insert airports one by one. Returns (inserted, skipped duplicates)."""
    inserted = skipped = 0
    for airport in airports:
        try:
            await service.insert_one(airport)
            inserted += 1
        except DuplicateAirportError:
            skipped += 1
    return inserted, skipped


async def main(csv_path: Optional[str]) -> int:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    rows = read_csv(Path(csv_path)) if csv_path else SAMPLE_AIRPORTS
    airports, rejected = load_airports(rows)

    database = Database.from_settings(settings)
    if await database.connect() is not ConnectionState.CONNECTED:
        return 1
    try:
        inserted, skipped = await seed(AirportService(database), airports)
    finally:
        await database.disconnect()

    logger.info(f"Seeded {inserted} airports ({skipped} already present, {rejected} invalid rows)")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the airports collection")
    parser.add_argument("csv", nargs="?", help="CSV file with name,iataCode,city columns")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.csv)))
