"""Tests for decoding search-service payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skypath.domain.models import Itinerary, SearchResult


def test_search_result_decodes_wire_names(three_leg_payload):
    result = SearchResult.model_validate(
        {"origin": "JFK", "destination": "LAX", "date": "2024-03-15", "count": 1, "itineraries": [three_leg_payload]}
    )
    itinerary = result.itineraries[0]
    assert itinerary.layovers_minutes == [65, 120]
    assert itinerary.total_duration_minutes == 545
    assert itinerary.segments[1].flight_number == "SP200"
    assert itinerary.segments[1].departure_local == "2024-03-15T08:00"
    assert result.is_empty is False


def test_empty_result():
    result = SearchResult.model_validate({"count": 0, "itineraries": []})
    assert result.is_empty
    assert result.origin is None


def test_count_must_match_itineraries(direct_payload):
    with pytest.raises(ValidationError):
        SearchResult.model_validate({"count": 2, "itineraries": [direct_payload]})


def test_layovers_must_pair_segments(three_leg_payload):
    three_leg_payload["layoversMinutes"] = [65]
    with pytest.raises(ValidationError):
        Itinerary.model_validate(three_leg_payload)


def test_itinerary_needs_a_segment():
    with pytest.raises(ValidationError):
        Itinerary.model_validate(
            {"segments": [], "layoversMinutes": [], "totalDurationMinutes": 0, "totalPrice": 0}
        )


def test_negative_price_is_rejected(direct_payload):
    direct_payload["segments"][0]["price"] = -1
    with pytest.raises(ValidationError):
        Itinerary.model_validate(direct_payload)
