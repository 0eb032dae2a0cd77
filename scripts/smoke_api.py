#!/usr/bin/env python3
"""
End-to-end smoke check for a running Airport Directory API.

Walks the full airport lifecycle against a live server and MongoDB:
create, list, search by city, update, delete (twice).

Usage:
    BASE_URL=http://localhost:3000 python scripts/smoke_api.py
"""

import os
import sys

import requests

BASE_URL = os.getenv("BASE_URL", "http://localhost:3000")

SMOKE_AIRPORT = {
    "name": "Smoke Test Field",
    "iataCode": "ZZQ",
    "city": "Smokeville",
}


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    END = '\033[0m'

def print_step(name: str):
    print(f"\n{Colors.BLUE}=== {name} ==={Colors.END}")

def print_success(msg: str):
    print(f"{Colors.GREEN}✓ {msg}{Colors.END}")

def print_error(msg: str):
    print(f"{Colors.RED}✗ {msg}{Colors.END}")

def print_info(msg: str):
    print(f"{Colors.YELLOW}ℹ {msg}{Colors.END}")


def check(label: str, response: requests.Response, expected_status: int) -> bool:
    if response.status_code == expected_status:
        print_success(f"{label} - {response.status_code}")
        return True
    print_error(f"{label} - expected {expected_status}, got {response.status_code}: {response.text}")
    return False


def check_health() -> bool:
    print_step("Health")
    try:
        r = requests.get(f"{BASE_URL}/health", timeout=5)
    except requests.RequestException as e:
        print_error(f"GET /health - {e}")
        return False
    if not check("GET /health", r, 200):
        return False
    print_info(f"Database: {r.json().get('database', 'unknown')}")
    return r.json().get("database") == "connected"


def check_lifecycle() -> bool:
    print_step("Airport lifecycle")
    code = SMOKE_AIRPORT["iataCode"]
    ok = True

    # Leftovers from an aborted run
    requests.delete(f"{BASE_URL}/airports/{code}", timeout=5)

    ok &= check("POST /airports (missing city)", requests.post(
        f"{BASE_URL}/airports", json={"name": "x", "iataCode": code}, timeout=5), 400)
    ok &= check("POST /airports", requests.post(
        f"{BASE_URL}/airports", json=SMOKE_AIRPORT, timeout=5), 201)
    ok &= check("POST /airports (duplicate)", requests.post(
        f"{BASE_URL}/airports", json=SMOKE_AIRPORT, timeout=5), 409)

    r = requests.get(f"{BASE_URL}/airports", timeout=5)
    ok &= check("GET /airports", r, 200)
    if r.ok and not any(a.get("iataCode") == code for a in r.json()):
        print_error("Created airport missing from listing")
        ok = False

    r = requests.get(f"{BASE_URL}/airports/city/  smokeVILLE ", timeout=5)
    ok &= check("GET /airports/city/{city}", r, 200)
    if r.ok:
        print_info(f"Search echoed city: {r.json()['city']!r}")

    ok &= check("PUT /airports/{code} (form body)", requests.put(
        f"{BASE_URL}/airports/{code}", data={"city": "Smoke City"}, timeout=5), 200)
    ok &= check("GET /airports/city (old city)", requests.get(
        f"{BASE_URL}/airports/city/Smokeville", timeout=5), 404)

    ok &= check("DELETE /airports/{code}", requests.delete(f"{BASE_URL}/airports/{code}", timeout=5), 200)
    ok &= check("DELETE /airports/{code} (again)", requests.delete(f"{BASE_URL}/airports/{code}", timeout=5), 404)
    ok &= check("PUT /airports/{code} (deleted)", requests.put(
        f"{BASE_URL}/airports/{code}", json={"name": "gone"}, timeout=5), 404)
    return bool(ok)


def main():
    print(f"\n{Colors.BLUE}{'='*60}")
    print("Airport Directory API - Smoke Check")
    print(f"{'='*60}{Colors.END}\n")

    print_info(f"Testing against: {BASE_URL}")
    print_info("Make sure the API is running before starting\n")

    if not check_health():
        print_error("\nHealth check failed. Is the API running and connected to MongoDB?")
        sys.exit(1)

    if not check_lifecycle():
        print_error("\nLifecycle checks had errors.")
        sys.exit(1)

    print(f"\n{Colors.GREEN}{'='*60}")
    print("All checks passed!")
    print(f"{'='*60}{Colors.END}\n")

if __name__ == "__main__":
    main()
