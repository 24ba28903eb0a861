# cli.py
import sys
from datetime import timedelta

from flight_quality.load import FlightDataError, load_flights
from flight_quality.report import DEFAULT_MIN_TURNAROUND, check_inconsistencies

USAGE = "Usage: flight-quality <flights.csv> [min_turnaround_minutes]"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or len(args) > 2:
        print(USAGE)
        return 1

    minimum_turnaround = DEFAULT_MIN_TURNAROUND
    if len(args) == 2:
        try:
            minimum_turnaround = timedelta(minutes=float(args[1]))
        except (ValueError, OverflowError):
            print(f"Invalid turnaround minutes: {args[1]}")
            print(USAGE)
            return 1

    try:
        flights = load_flights(args[0])
    except (FileNotFoundError, FlightDataError) as e:
        print(f"Error: {e}")
        return 1

    for line in check_inconsistencies(flights, minimum_turnaround):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
