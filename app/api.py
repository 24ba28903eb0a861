"""
HTTP service for the flight quality checks.

GET /api/flight/all
GET /api/flight/check-inconsistencies
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.models import FlightModel
from flight_quality.config import Settings, load_settings
from flight_quality.load import FlightDataError, load_flights
from flight_quality.report import DEFAULT_MIN_TURNAROUND, check_inconsistencies
from flight_quality.schema import FlightRecord

logging.basicConfig(
    level=load_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    return load_settings()


def _load(settings: Settings) -> List[FlightRecord]:
    try:
        return load_flights(settings.flights_csv_path)
    except (FileNotFoundError, FlightDataError) as e:
        logger.error("Failed to load flights from %s: %s", settings.flights_csv_path, e)
        raise HTTPException(status_code=500, detail=f"Could not load flight data: {e}")


router = APIRouter(prefix="/api/flight", tags=["Flights"])


@router.get(
    "/all",
    response_model=List[FlightModel],
    summary="List all flights",
    description="Return every flight record from the configured flight file, unmodified.",
)
def get_all_flights(settings: Settings = Depends(get_settings)):
    return [FlightModel.from_record(flight) for flight in _load(settings)]


@router.get(
    "/check-inconsistencies",
    response_model=List[str],
    summary="Run all consistency checks",
    description=(
        "Run every data-quality check over the flight file and return the "
        "combined report. Turnarounds shorter than two hours are flagged."
    ),
)
def get_inconsistencies(settings: Settings = Depends(get_settings)):
    return check_inconsistencies(_load(settings), DEFAULT_MIN_TURNAROUND)


app = FastAPI(title="Flight Quality Analysis")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
def health_check() -> Dict[str, str]:
    return {"status": "ok"}
