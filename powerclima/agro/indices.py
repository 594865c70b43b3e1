"""Calculo de indices agroclimaticos diarios."""

from __future__ import annotations

from powerclima.agro.models import (
    UNDETERMINED,
    AgroClimateIndices,
    HarvestCondition,
    Undetermined,
)
from powerclima.constants import FILL_VALUE
from powerclima.nasa_power.models import DailyWeatherRecord


def _usable(value: float | None) -> bool:
    return value is not None and value != FILL_VALUE


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def drought_index(
    precipitation: float | None, evapotranspiration: float | None
) -> float | Undetermined:
    """0 (sem seca) a 1 (seca severa), pela razao precipitacao/evapotranspiracao."""
    if not (_usable(precipitation) and _usable(evapotranspiration)):
        return UNDETERMINED
    if evapotranspiration == 0:
        return UNDETERMINED
    return max(0.0, 1 - precipitation / evapotranspiration)


def heat_stress_index(
    max_temperature: float | None, humidity: float | None
) -> float | Undetermined:
    """Indice de calor simplificado normalizado em 0-10.

    Zero em qualquer entrada e tratado como dado ausente.
    """
    if not (_usable(max_temperature) and _usable(humidity)):
        return UNDETERMINED
    if max_temperature == 0 or humidity == 0:
        return UNDETERMINED
    heat_index = max_temperature + humidity * 0.1
    return _clamp((heat_index - 25) / 2, 0.0, 10.0)


def freeze_risk(min_temperature: float | None) -> float | Undetermined:
    if not _usable(min_temperature):
        return UNDETERMINED
    if min_temperature <= 0:
        return 1.0
    if min_temperature < 3:
        return max(0.0, (3 - min_temperature) / 3)
    return 0.0


def disease_risk(humidity: float | None, temperature: float | None) -> float | Undetermined:
    """Risco de doencas fungicas (0-1): umidade alta com temperatura amena.

    Diferente dos demais indices, nao filtra fill value nem zero: um -999
    simplesmente cai fora da faixa de risco e resulta em 0.
    """
    if humidity is None or temperature is None:
        return UNDETERMINED
    if humidity > 80 and 15 < temperature < 30:
        risk = ((humidity - 80) / 20) * ((30 - abs(temperature - 22.5)) / 7.5)
        return _clamp(risk, 0.0, 1.0)
    return 0.0


def irrigation_need(
    evapotranspiration: float | None,
    precipitation: float | None,
    soil_moisture: float | None,
) -> float | Undetermined:
    """Necessidade de irrigacao em mm: deficit hidrico mais deficit de umidade do solo.

    A umidade alvo do solo e 50%. Nao filtra fill value; quem consome o
    indice decide como tratar -999.
    """
    if evapotranspiration is None or precipitation is None or soil_moisture is None:
        return UNDETERMINED
    water_deficit = max(0.0, evapotranspiration - precipitation)
    soil_deficit = max(0.0, 50 - soil_moisture)
    return water_deficit + soil_deficit * 0.5


def optimal_planting(
    soil_temperature: float | None, soil_moisture: float | None
) -> bool | Undetermined:
    if soil_temperature is None or soil_moisture is None:
        return UNDETERMINED
    return soil_temperature >= 10 and 30 <= soil_moisture <= 70


def harvest_conditions(
    precipitation: float | None, humidity: float | None
) -> HarvestCondition | Undetermined:
    if precipitation is None or humidity is None:
        return UNDETERMINED
    if precipitation < 1 and humidity < 70:
        return HarvestCondition.GOOD
    if precipitation < 5 and humidity < 85:
        return HarvestCondition.FAIR
    return HarvestCondition.POOR


def calculate_indices(record: DailyWeatherRecord) -> AgroClimateIndices:
    """Calcula os indices agroclimaticos de um registro diario.

    Cada indice e independente: entradas ausentes marcam apenas o proprio
    indice como ``UNDETERMINED``.

    Args:
        record: Registro diario normalizado.

    Returns:
        AgroClimateIndices do dia.
    """
    return AgroClimateIndices(
        drought_index=drought_index(record.precipitation, record.evapotranspiration),
        heat_stress_index=heat_stress_index(record.max_temperature, record.humidity),
        freeze_risk=freeze_risk(record.min_temperature),
        disease_risk=disease_risk(record.humidity, record.temperature),
        irrigation_need=irrigation_need(
            record.evapotranspiration, record.precipitation, record.soil_moisture
        ),
        optimal_planting_conditions=optimal_planting(
            record.soil_temperature, record.soil_moisture
        ),
        harvest_conditions=harvest_conditions(record.precipitation, record.humidity),
    )
