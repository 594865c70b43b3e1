"""Modulo NASA POWER -- dados meteorologicos diarios por ponto para regioes da Espanha."""

from __future__ import annotations

from typing import Any

from powerclima.nasa_power.models import (
    AGRO_PARAMS,
    DEFAULT_REGION_PARAMS,
    REGION_ALIASES,
    REGION_COORDS,
    DailyWeatherRecord,
    GeoCoordinates,
    MeteoParam,
    Region,
)

_API_NAMES = (
    "agricultural_data",
    "frost_risk",
    "is_raining",
    "planting_conditions",
    "region_coordinates",
    "region_weather_data",
    "resolve_region",
    "should_irrigate",
    "weather_data",
    "weather_frame",
)

__all__ = [
    "AGRO_PARAMS",
    "DEFAULT_REGION_PARAMS",
    "REGION_ALIASES",
    "REGION_COORDS",
    "DailyWeatherRecord",
    "GeoCoordinates",
    "MeteoParam",
    "Region",
    *_API_NAMES,
]


def __getattr__(name: str) -> Any:
    """Lazy loading da API para evitar imports circulares com powerclima.agro."""
    if name in _API_NAMES:
        from powerclima.nasa_power import api

        return getattr(api, name)

    raise AttributeError(f"module 'powerclima.nasa_power' has no attribute '{name}'")
