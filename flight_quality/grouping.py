from datetime import datetime
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from flight_quality.schema import FlightRecord

Pair = Tuple[FlightRecord, FlightRecord]


def departure_sort_key(flight: FlightRecord) -> Tuple[bool, datetime]:
    """
    Sort key for chronological order by departure.
    Flights without a departure timestamp come before all others.
    """
    if flight.departure_datetime is None:
        return (False, datetime.min)
    return (True, flight.departure_datetime)


def airport_code(value: Optional[str]) -> Optional[str]:
    """Treats an empty airport code the same as a missing one."""
    return value or None


def group_by(flights: Iterable[FlightRecord], key: Callable[[FlightRecord], Optional[str]]) -> Dict[str, List[FlightRecord]]:
    """
    Groups flights by ``key`` in first-appearance order and sorts each
    group by departure. Flights whose key is missing or empty are left out.
    """
    groups: Dict[str, List[FlightRecord]] = {}
    for flight in flights:
        value = key(flight)
        if not value:
            continue
        groups.setdefault(value, []).append(flight)

    # sorted() is stable, so equal departures keep input order
    return {value: sorted(group, key=departure_sort_key) for value, group in groups.items()}


def aircraft_sequences(flights: Iterable[FlightRecord]) -> Dict[str, List[FlightRecord]]:
    """Flights per aircraft registration, registrations ascending, each in departure order."""
    groups = group_by(flights, lambda f: f.aircraft_registration)
    return {registration: groups[registration] for registration in sorted(groups)}


def flight_number_groups(flights: Iterable[FlightRecord]) -> Dict[str, List[FlightRecord]]:
    """Flights per flight number, each group in departure order."""
    return group_by(flights, lambda f: f.flight_number)


def order_by_aircraft(flights: Iterable[FlightRecord]) -> List[FlightRecord]:
    """The flat "by aircraft, then by departure" view of the collection."""
    return [flight for sequence in aircraft_sequences(flights).values() for flight in sequence]


def adjacent_pairs(
    sequences: Dict[str, List[FlightRecord]],
    predicate: Optional[Callable[[FlightRecord, FlightRecord], bool]] = None,
) -> Iterator[Pair]:
    """
    Yields (previous, current) for each neighbouring pair inside every group.
    Pairs never span two groups. If ``predicate`` is given, only pairs for
    which it returns True are yielded.
    """
    for sequence in sequences.values():
        for previous, current in zip(sequence, sequence[1:]):
            if predicate is None or predicate(previous, current):
                yield previous, current


def breaks_continuity(previous: FlightRecord, current: FlightRecord) -> bool:
    return airport_code(current.departure_airport) != airport_code(previous.arrival_airport)


def continuity_breaks(flights: Iterable[FlightRecord]) -> Iterator[Pair]:
    """Consecutive legs of one aircraft where the next leg leaves from a different airport."""
    return adjacent_pairs(aircraft_sequences(flights), breaks_continuity)


def continuous_legs(flights: Iterable[FlightRecord]) -> Iterator[Pair]:
    """Consecutive legs of one aircraft where the next leg leaves from the airport it arrived at."""
    return adjacent_pairs(
        aircraft_sequences(flights),
        lambda previous, current: not breaks_continuity(previous, current),
    )
