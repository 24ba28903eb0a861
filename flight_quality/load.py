import logging
import os
import re
from dataclasses import asdict, fields
from typing import List, Sequence

import pandas as pd

from flight_quality.schema import FlightRecord

logger = logging.getLogger(__name__)

# CSV column -> FlightRecord attribute
COLUMN_MAP = {
    'id': 'id',
    'aircraft_registration_number': 'aircraft_registration',
    'aircraft_type': 'aircraft_type',
    'flight_number': 'flight_number',
    'departure_airport': 'departure_airport',
    'departure_datetime': 'departure_datetime',
    'arrival_airport': 'arrival_airport',
    'arrival_datetime': 'arrival_datetime',
}
DATETIME_COLUMNS = ['departure_datetime', 'arrival_datetime']
RECORD_FIELDS = [f.name for f in fields(FlightRecord)]


class FlightDataError(ValueError):
    """Raised when a flight file cannot be decoded into records."""


def clean_col_names(df: pd.DataFrame) -> pd.DataFrame:
    """
    Cleans and standardizes DataFrame column names.
    - Converts to lowercase
    - Replaces spaces and special characters with underscores
    - Strips leading/trailing whitespace and underscores
    """
    rename_map = {}
    for col in df.columns:
        new_col = str(col).strip().lower()
        new_col = re.sub(r'[^a-z0-9]', '_', new_col)
        new_col = re.sub(r'_+', '_', new_col)
        rename_map[col] = new_col.strip('_')
    return df.rename(columns=rename_map)


def read_flight_table(source) -> pd.DataFrame:
    """
    Reads a flight CSV into a DataFrame with one column per FlightRecord field.

    Args:
        source: Path to the CSV file, or an open file-like object.

    Returns:
        A DataFrame with string columns, datetime columns for the two
        timestamps, and NaN/NaT where a cell was empty.
    """
    if isinstance(source, (str, os.PathLike)) and not os.path.exists(source):
        raise FileNotFoundError(f"Flight data file not found: {source}")

    try:
        # Only empty cells count as missing; codes like "NA" stay as text
        df = pd.read_csv(source, dtype=str, keep_default_na=False, na_values=[''])
    except pd.errors.EmptyDataError as e:
        raise FlightDataError("Flight data file is empty") from e
    except pd.errors.ParserError as e:
        raise FlightDataError(f"Could not parse flight data: {e}") from e

    df = clean_col_names(df)

    missing = [col for col in COLUMN_MAP if col not in df.columns]
    if missing:
        raise FlightDataError(f"Flight data is missing column(s): {', '.join(missing)}")

    df = df[list(COLUMN_MAP)].rename(columns=COLUMN_MAP)

    for col in DATETIME_COLUMNS:
        try:
            df[col] = pd.to_datetime(df[col], format='mixed')
        except (ValueError, TypeError) as e:
            raise FlightDataError(f"Unparsable value in '{col}': {e}") from e
        if not pd.api.types.is_datetime64_any_dtype(df[col]):
            raise FlightDataError(f"Mixed timezone offsets in '{col}'")
        # Offset-aware values are brought to naive UTC
        if df[col].dt.tz is not None:
            df[col] = df[col].dt.tz_convert(None)

    return df


def records_from_frame(df: pd.DataFrame) -> List[FlightRecord]:
    """Converts a flight DataFrame to records, turning NaN/NaT into None."""
    records = []
    for row in df.to_dict('records'):
        values = {}
        for name in RECORD_FIELDS:
            value = row.get(name)
            if value is None or pd.isna(value):
                value = None
            elif isinstance(value, pd.Timestamp):
                value = value.to_pydatetime()
            values[name] = value
        records.append(FlightRecord(**values))
    return records


def flights_to_frame(flights: Sequence[FlightRecord]) -> pd.DataFrame:
    frame = pd.DataFrame([asdict(f) for f in flights], columns=RECORD_FIELDS)
    for col in DATETIME_COLUMNS:
        frame[col] = pd.to_datetime(frame[col])
    return frame


def load_flights(source) -> List[FlightRecord]:
    """Loads flight records from a CSV path or file-like object."""
    flights = records_from_frame(read_flight_table(source))
    logger.info("Loaded %d flight record(s) from %s", len(flights), getattr(source, 'name', source))
    return flights


if __name__ == '__main__':
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    data_path = os.path.join(project_root, 'data', 'flights.csv')

    flight_df = read_flight_table(data_path)
    print(f"Total rows: {len(flight_df)}")
    print("Columns:", flight_df.columns.tolist())
    print(flight_df.head())
