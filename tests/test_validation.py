"""Tests for the two-tier query validation."""

from __future__ import annotations

import pytest

from skypath.domain.models import Query, Rejection
from skypath.domain.validation import (
    CODE_LENGTH_MESSAGE,
    DATE_FORMAT_MESSAGE,
    SAME_AIRPORT_MESSAGE,
    is_submittable,
    validate_for_submit,
)


@pytest.mark.parametrize(
    "origin, destination, date",
    [
        ("JFK", "LAX", "2024-03-15"),
        ("jfk", "lax", "2024-03-15"),
        ("JFK", "JFK", "2024-03-15"),
        ("abc", "xyz", "2024-13-32"),
    ],
)
def test_is_submittable_ignores_case_and_equality(origin, destination, date):
    assert is_submittable(origin, destination, date) is True


@pytest.mark.parametrize(
    "origin, destination, date",
    [
        ("JF", "LAX", "2024-03-15"),
        ("JFK", "LAXX", "2024-03-15"),
        (" JFK", "LAX", "2024-03-15"),
        ("JFK", "LAX", "03-15-2024"),
        ("JFK", "LAX", "2024-03-15T10:00"),
        ("JFK", "LAX", ""),
    ],
)
def test_is_submittable_rejects_bad_lengths_and_dates(origin, destination, date):
    assert is_submittable(origin, destination, date) is False


def test_validate_for_submit_normalizes_codes():
    query = validate_for_submit(" jfk", "lax ", "2024-03-15")
    assert query == Query(origin="JFK", destination="LAX", date="2024-03-15")


def test_validate_for_submit_rejects_same_airport():
    assert validate_for_submit("JFK", "jfk", "2024-03-15") == Rejection(message=SAME_AIRPORT_MESSAGE)


def test_validate_for_submit_rejects_short_code():
    rejection = validate_for_submit("JF", "LAX", "2024-03-15")
    assert isinstance(rejection, Rejection)
    assert rejection.message == CODE_LENGTH_MESSAGE
    assert "3 letters" in rejection.message


def test_validate_for_submit_rejects_date_format():
    assert validate_for_submit("JFK", "LAX", "03-15-2024") == Rejection(message=DATE_FORMAT_MESSAGE)


def test_first_failing_check_wins():
    # Codes are checked before equality and date
    assert validate_for_submit("JF", "JF", "bad").message == CODE_LENGTH_MESSAGE
    assert validate_for_submit("JFK", "JFK", "bad").message == SAME_AIRPORT_MESSAGE


def test_no_calendar_validation():
    assert isinstance(validate_for_submit("JFK", "LAX", "2024-13-32"), Query)


def test_query_params():
    query = Query(origin="SFO", destination="NRT", date="2024-03-15")
    assert query.as_params() == {"origin": "SFO", "destination": "NRT", "date": "2024-03-15"}
