import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_FLIGHTS_CSV = PROJECT_ROOT / "data" / "flights.csv"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    flights_csv_path: Path
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8000


@lru_cache(maxsize=None)
def load_settings() -> Settings:
    """Reads settings from the environment (and a local .env file, if any)."""
    load_dotenv()
    return Settings(
        flights_csv_path=Path(os.getenv("FLIGHTS_CSV_PATH", str(DEFAULT_FLIGHTS_CSV))),
        log_level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "8000")),
    )


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", value)
        return "INFO"
    return level
