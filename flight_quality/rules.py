"""
Detection rules for flight-record inconsistencies.

Every rule is a pure function of the flight collection and returns a fresh
list of findings. Rules never raise for incomplete records: a comparison
that needs a missing value is skipped, and missing values render as empty
text in the messages.
"""
from datetime import timedelta
from typing import List, Sequence

from flight_quality.grouping import (
    airport_code,
    adjacent_pairs,
    continuity_breaks,
    continuous_legs,
    flight_number_groups,
)
from flight_quality.schema import MISSING_FIELD_LABELS, Finding, FindingKind, FlightRecord


def find_missing_data(flights: Sequence[FlightRecord]) -> List[Finding]:
    """
    Flags each missing departure airport, arrival airport, departure datetime
    and arrival datetime, one finding per field, in input order.
    """
    findings = []
    for flight in flights:
        for field_name in MISSING_FIELD_LABELS:
            value = getattr(flight, field_name)
            if value is None or value == '':
                findings.append(Finding(
                    kind=FindingKind.MISSING_DATA,
                    flight_number=flight.flight_number,
                    aircraft=flight.aircraft_registration,
                    detail={'field': field_name},
                ))
    return findings


def find_inconsistent_airport_transitions(flights: Sequence[FlightRecord]) -> List[Finding]:
    """
    Flags consecutive legs of the same aircraft where the next leg departs
    from an airport other than the one the previous leg arrived at.
    """
    return [
        Finding(
            kind=FindingKind.AIRPORT_TRANSITION,
            flight_number=current.flight_number,
            aircraft=current.aircraft_registration,
            detail={
                'departure_airport': current.departure_airport,
                'previous_arrival_airport': previous.arrival_airport,
                'previous_flight_number': previous.flight_number,
            },
        )
        for previous, current in continuity_breaks(flights)
    ]


def find_missing_flights(flights: Sequence[FlightRecord]) -> List[Finding]:
    """
    Same condition as the transition check, reported as a leg missing
    between the two flights.
    """
    return [
        Finding(
            kind=FindingKind.MISSING_FLIGHT,
            flight_number=current.flight_number,
            aircraft=current.aircraft_registration,
            detail={
                'departure_airport': current.departure_airport,
                'previous_arrival_airport': previous.arrival_airport,
                'previous_flight_number': previous.flight_number,
            },
        )
        for previous, current in continuity_breaks(flights)
    ]


def find_inconsistent_time_sequences(flights: Sequence[FlightRecord]) -> List[Finding]:
    """Flags flights that arrive before they depart. Flights missing either time are skipped."""
    findings = []
    for flight in flights:
        if flight.departure_datetime is None or flight.arrival_datetime is None:
            continue
        if flight.arrival_datetime < flight.departure_datetime:
            findings.append(Finding(
                kind=FindingKind.TIME_SEQUENCE,
                flight_number=flight.flight_number,
                aircraft=flight.aircraft_registration,
                detail={
                    'departure_datetime': flight.departure_datetime,
                    'arrival_datetime': flight.arrival_datetime,
                },
            ))
    return findings


def find_unrealistic_turnarounds(flights: Sequence[FlightRecord], minimum_turnaround: timedelta) -> List[Finding]:
    """
    Flags aircraft that leave again sooner than ``minimum_turnaround`` after
    arriving. Only legs that continue from the arrival airport are checked;
    broken chains belong to the transition check.

    Args:
        flights: The flight records.
        minimum_turnaround: Shortest acceptable time on the ground.

    Returns:
        One finding per short turnaround, in aircraft then departure order.
    """
    findings = []
    for previous, current in continuous_legs(flights):
        if current.departure_datetime is None or previous.arrival_datetime is None:
            continue

        elapsed = current.departure_datetime - previous.arrival_datetime
        if elapsed < minimum_turnaround:
            findings.append(Finding(
                kind=FindingKind.TURNAROUND,
                flight_number=current.flight_number,
                aircraft=current.aircraft_registration,
                detail={
                    'elapsed_minutes': elapsed.total_seconds() / 60,
                    'arrival_airport': previous.arrival_airport,
                    'previous_flight_number': previous.flight_number,
                },
            ))
    return findings


def check_flight_number_consistency(flights: Sequence[FlightRecord]) -> List[Finding]:
    """
    Compares consecutive uses of the same flight number.

    A pair with different departure or arrival airports yields a mismatch
    finding. Independently, a pair where the later use departs before the
    earlier one has arrived yields an overlap finding.
    """
    findings = []
    for previous, current in adjacent_pairs(flight_number_groups(flights)):
        same_route = (
            airport_code(current.departure_airport) == airport_code(previous.departure_airport)
            and airport_code(current.arrival_airport) == airport_code(previous.arrival_airport)
        )
        if not same_route:
            findings.append(Finding(
                kind=FindingKind.FLIGHT_NUMBER_MISMATCH,
                flight_number=current.flight_number,
                aircraft=current.aircraft_registration,
                detail={
                    'departure_airport': current.departure_airport,
                    'arrival_airport': current.arrival_airport,
                    'previous_flight_number': previous.flight_number,
                    'previous_departure_airport': previous.departure_airport,
                    'previous_arrival_airport': previous.arrival_airport,
                    'previous_aircraft': previous.aircraft_registration,
                },
            ))

        if current.departure_datetime is None or previous.arrival_datetime is None:
            continue
        if current.departure_datetime < previous.arrival_datetime:
            findings.append(Finding(
                kind=FindingKind.FLIGHT_NUMBER_OVERLAP,
                flight_number=current.flight_number,
                aircraft=current.aircraft_registration,
                detail={
                    'departure_datetime': current.departure_datetime,
                    'previous_flight_number': previous.flight_number,
                    'previous_arrival_datetime': previous.arrival_datetime,
                    'previous_aircraft': previous.aircraft_registration,
                },
            ))
    return findings
