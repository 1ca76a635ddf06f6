#!/usr/bin/env python3
"""
Taxi booking flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_book_taxi.py
    python scripts/flow_book_taxi.py --base-url http://localhost:8000 --date 2099-01-01

Flow:
    1. Register a customer
    2. Register a second customer
    3. Register a taxi
    4. Book the taxi for the first customer (expect 201)
    5. Book the same taxi and date for the second customer (expect 409)
    6. Book a taxi that does not exist (expect 409)
    7. Move the first booking to the second customer, same taxi and date (expect 200)
"""

import argparse
import json
import sys
import uuid

import httpx

BASE_URL = "http://localhost:8000"
API_PREFIX = "/api/v1"
MISSING_TAXI_ID = 999999


def api_request(base_url: str, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make an API request and return status and JSON body."""
    url = f"{base_url}{API_PREFIX}{endpoint}"
    response = httpx.request(method, url, json=data, timeout=10.0, follow_redirects=True)
    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def expect(result: dict, status: int) -> dict:
    """Print the response and stop the flow on an unexpected status."""
    print(json.dumps(result["data"], indent=2, default=str))
    if result["status"] != status:
        print(f"ERROR: expected {status}, got {result['status']}")
        sys.exit(1)
    print(f"OK ({status})")
    return result["data"]


def unique_reg() -> str:
    return uuid.uuid4().hex[:7].upper()


def main():
    parser = argparse.ArgumentParser(description="Run the taxi booking flow")
    parser.add_argument("--base-url", default=BASE_URL)
    parser.add_argument("--date", default="2099-01-01", help="Booking date (YYYY-MM-DD)")
    args = parser.parse_args()

    suffix = uuid.uuid4().hex[:6]

    print_step(1, "Register customer Bob")
    bob = expect(
        api_request(args.base_url, "POST", "/customers/", {
            "name": "Bob",
            "email": f"bob.{suffix}@mailinator.com",
            "phone_number": "01225593234",
        }),
        201,
    )

    print_step(2, "Register customer Will")
    will = expect(
        api_request(args.base_url, "POST", "/customers/", {
            "name": "Will",
            "email": f"will.{suffix}@mailinator.com",
            "phone_number": "02534637492",
        }),
        201,
    )

    print_step(3, "Register taxi")
    taxi = expect(
        api_request(args.base_url, "POST", "/taxis/", {"num_seats": 4, "reg": unique_reg()}),
        201,
    )

    print_step(4, f"Book taxi {taxi['id']} for Bob on {args.date}")
    booking = expect(
        api_request(args.base_url, "POST", "/bookings/", {
            "customer_id": bob["id"],
            "taxi_id": taxi["id"],
            "booking_date": args.date,
        }),
        201,
    )

    print_step(5, "Book the same taxi and date for Will")
    expect(
        api_request(args.base_url, "POST", "/bookings/", {
            "customer_id": will["id"],
            "taxi_id": taxi["id"],
            "booking_date": args.date,
        }),
        409,
    )

    print_step(6, "Book a taxi that does not exist")
    expect(
        api_request(args.base_url, "POST", "/bookings/", {
            "customer_id": bob["id"],
            "taxi_id": MISSING_TAXI_ID,
            "booking_date": args.date,
        }),
        409,
    )

    print_step(7, "Hand Bob's booking over to Will")
    expect(
        api_request(args.base_url, "PUT", f"/bookings/{booking['id']}", {
            "id": booking["id"],
            "customer_id": will["id"],
            "taxi_id": taxi["id"],
            "booking_date": args.date,
        }),
        200,
    )

    print("\nFlow completed.")


if __name__ == "__main__":
    main()
