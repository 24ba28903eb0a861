import logging
from dataclasses import dataclass, field
from datetime import timedelta
from functools import partial
from typing import List, Sequence

from flight_quality.rules import (
    check_flight_number_consistency,
    find_inconsistent_airport_transitions,
    find_inconsistent_time_sequences,
    find_missing_data,
    find_missing_flights,
    find_unrealistic_turnarounds,
)
from flight_quality.schema import Finding, FlightRecord

logger = logging.getLogger(__name__)

DEFAULT_MIN_TURNAROUND = timedelta(hours=2)
NO_INCONSISTENCIES = "No inconsistencies found in the flight data."


@dataclass(frozen=True)
class ReportSection:
    title: str
    findings: List[Finding]

    def lines(self) -> List[str]:
        return [self.title] + [finding.message for finding in self.findings]


@dataclass(frozen=True)
class InconsistencyReport:
    sections: List[ReportSection] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.sections

    @property
    def findings(self) -> List[Finding]:
        return [finding for section in self.sections for finding in section.findings]

    def lines(self) -> List[str]:
        """Section titles followed by their messages, or a single all-clear line."""
        if self.is_clean:
            return [NO_INCONSISTENCIES]
        return [line for section in self.sections for line in section.lines()]


def build_report(flights: Sequence[FlightRecord], minimum_turnaround: timedelta = DEFAULT_MIN_TURNAROUND) -> InconsistencyReport:
    """
    Runs every check over the flights and collects the non-empty results.

    Args:
        flights: The flight records to audit.
        minimum_turnaround: Shortest acceptable time on the ground between legs.

    Returns:
        An InconsistencyReport whose sections follow the fixed check order.
    """
    if flights is None:
        raise TypeError("flights must be a collection of FlightRecord, not None")
    flights = list(flights)

    checks = [
        ("Missing Data Inconsistencies:", find_missing_data),
        ("Missing Flight Transitions:", find_missing_flights),
        ("Inconsistent Airport Transitions:", find_inconsistent_airport_transitions),
        ("Inconsistent Time Sequences:", find_inconsistent_time_sequences),
        ("Unrealistic Turnaround Times:", partial(find_unrealistic_turnarounds, minimum_turnaround=minimum_turnaround)),
        ("Flight Number Inconsistencies:", check_flight_number_consistency),
    ]

    sections = []
    for title, check in checks:
        findings = check(flights)
        logger.debug("%s %d finding(s)", title, len(findings))
        if findings:
            sections.append(ReportSection(title=title, findings=findings))

    logger.info(
        "Audited %d flight(s): %d finding(s) in %d section(s)",
        len(flights), sum(len(s.findings) for s in sections), len(sections),
    )
    return InconsistencyReport(sections=sections)


def check_inconsistencies(flights: Sequence[FlightRecord], minimum_turnaround: timedelta = DEFAULT_MIN_TURNAROUND) -> List[str]:
    """The combined report as plain text lines."""
    return build_report(flights, minimum_turnaround).lines()
