from pathlib import Path

import pytest

from flight_quality.config import DEFAULT_FLIGHTS_CSV, load_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        for name in ("FLIGHTS_CSV_PATH", "LOG_LEVEL", "API_HOST", "API_PORT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("flight_quality.config.load_dotenv", lambda: None)

        settings = load_settings()

        assert settings.flights_csv_path == DEFAULT_FLIGHTS_CSV
        assert settings.log_level == "INFO"
        assert settings.api_port == 8000

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FLIGHTS_CSV_PATH", str(tmp_path / "other.csv"))
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("API_PORT", "9001")

        settings = load_settings()

        assert settings.flights_csv_path == Path(tmp_path / "other.csv")
        assert settings.log_level == "DEBUG"
        assert settings.api_port == 9001

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        monkeypatch.setattr("flight_quality.config.load_dotenv", lambda: None)

        assert load_settings().log_level == "INFO"
