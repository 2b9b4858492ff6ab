"""Shared fixtures: sample search-service payloads and fake gateways."""

from __future__ import annotations

import pytest

from skypath.infrastructure.config import Config

API_URL = "http://skypath.test"


def segment_payload(origin: str, destination: str, flight_number: str, price: float = 100.0) -> dict:
    return {
        "flightNumber": flight_number,
        "airline": "SkyPath Air",
        "origin": origin,
        "destination": destination,
        "departureLocal": "2024-03-15T08:00",
        "arrivalLocal": "2024-03-15T11:30",
        "price": price,
        "aircraft": "A320",
    }


@pytest.fixture
def three_leg_payload() -> dict:
    return {
        "segments": [
            segment_payload("JFK", "ORD", "SP100", 120.0),
            segment_payload("ORD", "DEN", "SP200", 80.5),
            segment_payload("DEN", "LAX", "SP300", 99.5),
        ],
        "layoversMinutes": [65, 120],
        "totalDurationMinutes": 545,
        "totalPrice": 300.0,
    }


@pytest.fixture
def direct_payload() -> dict:
    return {
        "segments": [segment_payload("JFK", "LAX", "SP1", 349.99)],
        "layoversMinutes": [],
        "totalDurationMinutes": 390,
        "totalPrice": 349.99,
    }


@pytest.fixture
def config() -> Config:
    return Config(api_url=API_URL, locale="en-US")


class FakeGateway:
    """In-memory gateway: returns ``result`` or raises ``error``."""

    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.queries = []

    async def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.result

    async def health(self) -> bool:
        return True
