from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from flight_quality.schema import FlightRecord


class FlightModel(BaseModel):
    """One flight record as decoded from the flight file"""
    id: Optional[str] = Field(None, description="Record identifier from the source file")
    aircraft_registration: Optional[str] = Field(None, description="Aircraft registration (tail number)")
    aircraft_type: Optional[str] = Field(None, description="Aircraft type code")
    flight_number: Optional[str] = Field(None, description="Marketed flight number")
    departure_airport: Optional[str] = Field(None, description="Departure airport code")
    arrival_airport: Optional[str] = Field(None, description="Arrival airport code")
    departure_datetime: Optional[datetime] = Field(None, description="Departure time (naive, shared reference)")
    arrival_datetime: Optional[datetime] = Field(None, description="Arrival time (naive, shared reference)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1",
                "aircraft_registration": "N123",
                "aircraft_type": "B738",
                "flight_number": "AA123",
                "departure_airport": "JFK",
                "arrival_airport": "LAX",
                "departure_datetime": "2024-01-01T08:00:00",
                "arrival_datetime": "2024-01-01T10:00:00",
            }
        }
    )

    @classmethod
    def from_record(cls, record: FlightRecord) -> "FlightModel":
        return cls(
            id=record.id,
            aircraft_registration=record.aircraft_registration,
            aircraft_type=record.aircraft_type,
            flight_number=record.flight_number,
            departure_airport=record.departure_airport,
            arrival_airport=record.arrival_airport,
            departure_datetime=record.departure_datetime,
            arrival_datetime=record.arrival_datetime,
        )
