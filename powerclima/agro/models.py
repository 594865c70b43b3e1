"""Modelos de indices, recomendacoes e avisos agroclimaticos."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from powerclima.nasa_power.models import DailyWeatherRecord


class Undetermined(StrEnum):
    """Marcador de valor que nao pode ser determinado.

    Usado como alternativa explicita em unioes (``float | Undetermined``),
    distinto de ``None`` (dado ausente) e de um zero medido.
    """

    UNDETERMINED = "no definido"


UNDETERMINED = Undetermined.UNDETERMINED


def is_determined(value: object) -> bool:
    return value is not None and not isinstance(value, Undetermined)


class HarvestCondition(StrEnum):
    GOOD = "Buenas"
    FAIR = "Regulares"
    POOR = "Malas"


class RiskLevel(StrEnum):
    LOW = "bajo"
    MEDIUM = "medio"
    HIGH = "alto"


class AgroClimateIndices(BaseModel):
    """Indices agroclimaticos derivados de um registro diario."""

    drought_index: float | Undetermined = Field(UNDETERMINED)
    heat_stress_index: float | Undetermined = Field(UNDETERMINED)
    freeze_risk: float | Undetermined = Field(UNDETERMINED)
    disease_risk: float | Undetermined = Field(UNDETERMINED)
    irrigation_need: float | Undetermined = Field(UNDETERMINED)
    optimal_planting_conditions: bool | Undetermined = Field(UNDETERMINED)
    harvest_conditions: HarvestCondition | Undetermined = Field(UNDETERMINED)

    model_config = {"frozen": True}


class IrrigationRecommendation(BaseModel):
    recommended: bool = False
    amount: int = 0
    message: str

    model_config = {"frozen": True}


class PestControlRecommendation(BaseModel):
    recommended: bool = False
    risk_level: RiskLevel | Undetermined
    message: str

    model_config = {"frozen": True}


class FertilizationRecommendation(BaseModel):
    recommended: bool = False
    message: str

    model_config = {"frozen": True}


class FieldOperationsRecommendation(BaseModel):
    can_work: bool = True
    message: str

    model_config = {"frozen": True}


class PlantingRecommendation(BaseModel):
    recommended: bool | Undetermined
    message: str

    model_config = {"frozen": True}


class HarvestingRecommendation(BaseModel):
    recommended: bool = False
    message: str

    model_config = {"frozen": True}


class AgriculturalRecommendations(BaseModel):
    """Recomendacoes agricolas de um dia, em seis frentes independentes."""

    irrigation: IrrigationRecommendation
    pest_control: PestControlRecommendation
    fertilization: FertilizationRecommendation
    field_operations: FieldOperationsRecommendation
    planting: PlantingRecommendation
    harvesting: HarvestingRecommendation

    model_config = {"frozen": True}


class AgriculturalData(BaseModel):
    """Serie diaria com indices e recomendacoes alinhados por posicao."""

    weather_data: list[DailyWeatherRecord]
    indices: list[AgroClimateIndices]
    recommendations: list[AgriculturalRecommendations]


class IrrigationAdvice(BaseModel):
    should_irrigate: bool | Undetermined
    reason: str
    recommended_amount: int | None = None


class FrostRiskAdvice(BaseModel):
    risk_level: RiskLevel | Undetermined
    message: str
    lowest_temperature: float | None = None


class PlantingDetails(BaseModel):
    soil_moisture: float
    soil_temperature: float
    rain: float
    forecast_rain: bool


class PlantingAdvice(BaseModel):
    is_optimal: bool | Undetermined
    message: str
    details: PlantingDetails


class WeatherAlert(BaseModel):
    has_alert: bool
    alerts: list[str] = Field(default_factory=list)


class WaterStressStatus(StrEnum):
    OPTIMAL = "óptimo"
    MILD = "leve"
    MODERATE = "moderado"
    SEVERE = "severo"


class WaterStressResult(BaseModel):
    stress_index: float = Field(..., ge=0.0, le=10.0)
    status: WaterStressStatus
    recommendation: str


class CropType(StrEnum):
    CEREAL = "cereal"
    HORTICOLA = "hortícola"
    FRUTAL = "frutal"
    OLIVO = "olivo"
    VINEDO = "viñedo"


class YieldPotential(StrEnum):
    HIGH = "alto"
    MEDIUM = "medio"
    LOW = "bajo"


class CropPotential(BaseModel):
    potential_yield: YieldPotential
    limiting_factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class CalendarDay(BaseModel):
    date: str
    recommended_activities: list[str] = Field(default_factory=list)
    not_recommended_activities: list[str] = Field(default_factory=list)
    weather_summary: str


class AgriculturalCalendar(BaseModel):
    region: str
    crop_type: str
    next_days: list[CalendarDay] = Field(default_factory=list)
