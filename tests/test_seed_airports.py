"""Tests for the airports seed script helpers."""

import asyncio

from app.airports.service import AirportService

import seed_airports


def test_sample_airports_are_valid():
    airports, rejected = seed_airports.load_airports(seed_airports.SAMPLE_AIRPORTS)
    assert rejected == 0
    assert len(airports) == len(seed_airports.SAMPLE_AIRPORTS)


def test_invalid_rows_are_counted():
    rows = [
        {"name": "Heathrow", "iataCode": "LHR", "city": "London"},
        {"name": "", "iataCode": "XXX", "city": "Nowhere"},
        {"name": "No City", "iataCode": "NOC"},
    ]
    airports, rejected = seed_airports.load_airports(rows)
    assert [a.iataCode for a in airports] == ["LHR"]
    assert rejected == 2


def test_read_csv(tmp_path):
    path = tmp_path / "airports.csv"
    path.write_text("name,iataCode,city\nHeathrow,LHR,London\n", encoding="utf-8")
    assert seed_airports.read_csv(path) == [{"name": "Heathrow", "iataCode": "LHR", "city": "London"}]


def test_seed_skips_existing_codes(database, collection):
    airports, _ = seed_airports.load_airports(seed_airports.SAMPLE_AIRPORTS)
    inserted, skipped = asyncio.run(seed_airports.seed(AirportService(database), airports))

    # ORD, MDW and JFK are already in the fixture collection
    assert skipped == 3
    assert inserted == len(airports) - 3
    assert len({d["iataCode"] for d in collection.docs}) == len(collection.docs)
