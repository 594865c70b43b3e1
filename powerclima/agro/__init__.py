"""Indices agroclimaticos, recomendacoes e analises sobre registros diarios."""

from __future__ import annotations

from .analysis import (
    calculate_water_stress_index,
    check_weather_alert,
    estimate_crop_potential,
    generate_agricultural_calendar,
)
from .indices import calculate_indices
from .models import (
    UNDETERMINED,
    AgriculturalCalendar,
    AgriculturalData,
    AgriculturalRecommendations,
    AgroClimateIndices,
    CropPotential,
    CropType,
    FrostRiskAdvice,
    HarvestCondition,
    IrrigationAdvice,
    PlantingAdvice,
    RiskLevel,
    Undetermined,
    WaterStressResult,
    WaterStressStatus,
    WeatherAlert,
    YieldPotential,
    is_determined,
)
from .recommendations import generate_recommendations

__all__ = [
    "UNDETERMINED",
    "AgriculturalCalendar",
    "AgriculturalData",
    "AgriculturalRecommendations",
    "AgroClimateIndices",
    "CropPotential",
    "CropType",
    "FrostRiskAdvice",
    "HarvestCondition",
    "IrrigationAdvice",
    "PlantingAdvice",
    "RiskLevel",
    "Undetermined",
    "WaterStressResult",
    "WaterStressStatus",
    "WeatherAlert",
    "YieldPotential",
    "calculate_indices",
    "calculate_water_stress_index",
    "check_weather_alert",
    "estimate_crop_potential",
    "generate_agricultural_calendar",
    "generate_recommendations",
    "is_determined",
]
