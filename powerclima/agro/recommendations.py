"""Geracao de recomendacoes agricolas a partir de um dia e seus indices."""

from __future__ import annotations

import math

from powerclima.agro.models import (
    UNDETERMINED,
    AgriculturalRecommendations,
    AgroClimateIndices,
    FertilizationRecommendation,
    FieldOperationsRecommendation,
    HarvestCondition,
    HarvestingRecommendation,
    IrrigationRecommendation,
    PestControlRecommendation,
    PlantingRecommendation,
    RiskLevel,
    Undetermined,
)
from powerclima.nasa_power.models import DailyWeatherRecord

# Necessidade minima (mm) para recomendar irrigacao.
IRRIGATION_THRESHOLD_MM = 3.0

DISEASE_RISK_HIGH = 0.7
DISEASE_RISK_MEDIUM = 0.4


def round_half_up(value: float) -> int:
    """Arredonda .5 para cima (4.5 -> 5), diferente do round() bancario."""
    return math.floor(value + 0.5)


def irrigation_recommendation(indices: AgroClimateIndices) -> IrrigationRecommendation:
    need = indices.irrigation_need
    if isinstance(need, Undetermined):
        return IrrigationRecommendation(
            message="No hay datos suficientes para determinar la necesidad de riego."
        )
    if need > IRRIGATION_THRESHOLD_MM:
        amount = round_half_up(need)
        return IrrigationRecommendation(
            recommended=True,
            amount=amount,
            message=f"Se recomienda regar con aproximadamente {amount} mm de agua.",
        )
    return IrrigationRecommendation(message="No es necesario regar hoy.")


def pest_control_recommendation(indices: AgroClimateIndices) -> PestControlRecommendation:
    risk = indices.disease_risk
    if isinstance(risk, Undetermined):
        return PestControlRecommendation(
            risk_level=UNDETERMINED,
            message="No hay datos suficientes para evaluar el riesgo de enfermedades.",
        )
    if risk > DISEASE_RISK_HIGH:
        return PestControlRecommendation(
            recommended=True,
            risk_level=RiskLevel.HIGH,
            message=(
                "ALERTA: Alto riesgo de enfermedades debido a condiciones de humedad y "
                "temperatura. Considere aplicar medidas preventivas."
            ),
        )
    if risk > DISEASE_RISK_MEDIUM:
        return PestControlRecommendation(
            recommended=True,
            risk_level=RiskLevel.MEDIUM,
            message="Riesgo moderado de enfermedades. Monitoree sus cultivos con atención.",
        )
    return PestControlRecommendation(
        risk_level=RiskLevel.LOW,
        message="Riesgo bajo de plagas y enfermedades hoy.",
    )


def fertilization_recommendation(record: DailyWeatherRecord) -> FertilizationRecommendation:
    # Ausentes contam como 0 apenas nesta regra.
    precipitation = record.precipitation or 0
    soil_moisture = record.soil_moisture or 0
    if precipitation < 5 and soil_moisture > 20:
        return FertilizationRecommendation(
            recommended=True,
            message="Condiciones adecuadas para la aplicación de fertilizantes.",
        )
    return FertilizationRecommendation(message="No es recomendable fertilizar hoy.")


def field_operations_recommendation(record: DailyWeatherRecord) -> FieldOperationsRecommendation:
    if (record.precipitation or 0) > 5 or (record.soil_moisture or 0) > 80:
        return FieldOperationsRecommendation(
            can_work=False,
            message=(
                "Suelo demasiado húmedo para operaciones con maquinaria. "
                "Se recomienda posponer trabajos de campo."
            ),
        )
    return FieldOperationsRecommendation(
        message="Condiciones favorables para trabajar en el campo."
    )


def planting_recommendation(indices: AgroClimateIndices) -> PlantingRecommendation:
    optimal = indices.optimal_planting_conditions
    if isinstance(optimal, Undetermined):
        return PlantingRecommendation(
            recommended=UNDETERMINED,
            message="No hay datos suficientes para evaluar condiciones de siembra.",
        )
    if optimal:
        return PlantingRecommendation(
            recommended=True,
            message=(
                "Condiciones óptimas para siembra. "
                "Temperatura y humedad del suelo adecuadas."
            ),
        )
    return PlantingRecommendation(
        recommended=False,
        message=(
            "Condiciones no óptimas para siembra. "
            "Verifique temperatura y humedad del suelo."
        ),
    )


def harvesting_recommendation(indices: AgroClimateIndices) -> HarvestingRecommendation:
    condition = indices.harvest_conditions
    message = f"Condiciones de cosecha: {condition.value}."

    if condition == HarvestCondition.GOOD:
        message += " Aproveche para cosechar hoy."
    elif condition == HarvestCondition.POOR:
        message += " Se recomienda posponer la cosecha."

    return HarvestingRecommendation(
        recommended=condition == HarvestCondition.GOOD,
        message=message,
    )


def generate_recommendations(
    record: DailyWeatherRecord,
    indices: AgroClimateIndices,
) -> AgriculturalRecommendations:
    """Gera as recomendacoes agricolas de um dia.

    Args:
        record: Registro diario normalizado.
        indices: Indices calculados para o mesmo registro.

    Returns:
        AgriculturalRecommendations com os seis blocos preenchidos.
    """
    return AgriculturalRecommendations(
        irrigation=irrigation_recommendation(indices),
        pest_control=pest_control_recommendation(indices),
        fertilization=fertilization_recommendation(record),
        field_operations=field_operations_recommendation(record),
        planting=planting_recommendation(indices),
        harvesting=harvesting_recommendation(indices),
    )
