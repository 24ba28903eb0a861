from datetime import datetime, timedelta

import pytest

from flight_quality.schema import FlightRecord

BASE_TIME = datetime(2024, 3, 1, 8, 0)


def _make_flight(
    flight_number="AA123",
    aircraft="N123",
    departure_airport="JFK",
    arrival_airport="LAX",
    departs_in_hours=0.0,
    duration_hours=2.0,
    **overrides,
) -> FlightRecord:
    """
    Builds a FlightRecord relative to BASE_TIME.
    Explicit departure_datetime / arrival_datetime overrides (including None) win.
    """
    departure = BASE_TIME + timedelta(hours=departs_in_hours)
    values = dict(
        aircraft_registration=aircraft,
        aircraft_type="B738",
        flight_number=flight_number,
        departure_airport=departure_airport,
        arrival_airport=arrival_airport,
        departure_datetime=departure,
        arrival_datetime=departure + timedelta(hours=duration_hours),
    )
    values.update(overrides)
    return FlightRecord(**values)


@pytest.fixture
def make_flight():
    return _make_flight


@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def flights_csv(tmp_path):
    """Writes CSV text to a temporary file and returns its path."""
    def _write(text, name="flights.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


HEADER = "id,aircraft_registration_number,aircraft_type,flight_number,departure_airport,departure_datetime,arrival_airport,arrival_datetime\n"


@pytest.fixture
def csv_header():
    return HEADER
