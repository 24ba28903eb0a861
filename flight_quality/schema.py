# flight_quality/schema.py

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class FlightRecord:
    id: Optional[str] = None
    aircraft_registration: Optional[str] = None
    aircraft_type: Optional[str] = None
    flight_number: Optional[str] = None
    departure_airport: Optional[str] = None
    arrival_airport: Optional[str] = None
    departure_datetime: Optional[datetime] = None
    arrival_datetime: Optional[datetime] = None


class FindingKind(str, Enum):
    MISSING_DATA = "missing_data"
    MISSING_FLIGHT = "missing_flight"
    AIRPORT_TRANSITION = "airport_transition"
    TIME_SEQUENCE = "time_sequence"
    TURNAROUND = "turnaround"
    FLIGHT_NUMBER_MISMATCH = "flight_number_mismatch"
    FLIGHT_NUMBER_OVERLAP = "flight_number_overlap"


# Field name on FlightRecord -> label used in missing-data messages
MISSING_FIELD_LABELS = {
    'departure_airport': 'Departure Airport',
    'arrival_airport': 'Arrival Airport',
    'departure_datetime': 'Departure Datetime',
    'arrival_datetime': 'Arrival Datetime',
}


@dataclass(frozen=True)
class Finding:
    """
    One detected inconsistency.

    The kind says which check produced it; ``detail`` carries the structured
    values (airport codes, timestamps, elapsed minutes, missing field) that
    the message is rendered from.
    """
    kind: FindingKind
    flight_number: Optional[str]
    aircraft: Optional[str] = None
    detail: Mapping[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return render_finding(self)


def _text(value) -> str:
    """Renders absent values as empty text."""
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%d %H:%M:%S')
    return str(value)


def format_minutes(minutes: float) -> str:
    rounded = round(float(minutes), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def render_finding(finding: Finding) -> str:
    d = finding.detail
    fn = _text(finding.flight_number)
    aircraft = _text(finding.aircraft)

    if finding.kind is FindingKind.MISSING_DATA:
        return f"Flight {fn}: Missing {MISSING_FIELD_LABELS[d['field']]}."

    if finding.kind is FindingKind.MISSING_FLIGHT:
        return (
            f"Missing Flight: Aircraft {aircraft} arrived at {_text(d.get('previous_arrival_airport'))}, "
            f"but the next flight departs from {_text(d.get('departure_airport'))}."
        )

    if finding.kind is FindingKind.AIRPORT_TRANSITION:
        return (
            f"Inconsistent Transition: Aircraft {aircraft}, "
            f"Flight {fn} departs from {_text(d.get('departure_airport'))} after "
            f"arriving at {_text(d.get('previous_arrival_airport'))}."
        )

    if finding.kind is FindingKind.TIME_SEQUENCE:
        return f"Inconsistent Time Sequence: Flight {fn} arrives earlier than it departs."

    if finding.kind is FindingKind.TURNAROUND:
        return (
            f"Unrealistic Turnaround: Aircraft {aircraft}, "
            f"Flight {fn} departs {format_minutes(d['elapsed_minutes'])} minutes "
            f"after arriving at {_text(d.get('arrival_airport'))}."
        )

    if finding.kind is FindingKind.FLIGHT_NUMBER_MISMATCH:
        return (
            f"Flight Number {fn} inconsistency: "
            f"Departure/Arrival airports differ between flights. "
            f"Flight {_text(d.get('previous_flight_number'))} from {_text(d.get('previous_departure_airport'))} "
            f"to {_text(d.get('previous_arrival_airport'))}, "
            f"but Flight {fn} from {_text(d.get('departure_airport'))} to {_text(d.get('arrival_airport'))}."
        )

    if finding.kind is FindingKind.FLIGHT_NUMBER_OVERLAP:
        return (
            f"Flight Number {fn} overlap: "
            f"Flight {fn} departs at {_text(d.get('departure_datetime'))} "
            f"before previous flight {_text(d.get('previous_flight_number'))} "
            f"arrives at {_text(d.get('previous_arrival_datetime'))}."
        )

    raise ValueError(f"Unknown finding kind: {finding.kind!r}")
