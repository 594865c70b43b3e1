"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from powerclima.nasa_power.models import DailyWeatherRecord


@pytest.fixture
def sample_nasa_payload() -> dict:
    """Resposta NASA POWER minima com dois dias e chaves auxiliares."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-3.7, 40.4, 650.0]},
        "properties": {
            "parameter": {
                "T2M": {"20240102": 9.5, "20240101": 8.0, "units": "C"},
                "T2M_MAX": {"20240101": 13.2, "20240102": 14.1},
                "T2M_MIN": {"20240101": 2.1, "20240102": -999.0},
                "PRECTOTCORR": {"20240101": 0.0, "20240102": 3.4},
                "RH2M": {"20240101": 71.0, "20240102": 80.5},
                "EVLAND": {"20240101": 1.2, "20240102": 0.9},
            }
        },
    }


@pytest.fixture
def mild_day() -> DailyWeatherRecord:
    """Dia ameno de primavera, sem valores ausentes relevantes."""
    return DailyWeatherRecord(
        date="20240415",
        temperature=18.0,
        max_temperature=24.0,
        min_temperature=9.0,
        precipitation=0.0,
        humidity=60.0,
        wind_speed=3.0,
        soil_temperature=14.0,
        soil_moisture=45.0,
        evapotranspiration=3.5,
    )
