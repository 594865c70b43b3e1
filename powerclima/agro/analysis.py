"""Analises agricolas sobre series diarias: alertas, estresse hidrico, potencial e calendario."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from powerclima.agro.models import (
    AgriculturalCalendar,
    CalendarDay,
    CropPotential,
    CropType,
    WaterStressResult,
    WaterStressStatus,
    WeatherAlert,
    YieldPotential,
)
from powerclima.constants import FILL_VALUE
from powerclima.nasa_power.models import DailyWeatherRecord

logger = structlog.get_logger()

ACTIVITY_PLANTING = "Siembra/trasplante"
ACTIVITY_SPRAYING = "Aplicación de tratamientos fitosanitarios"
ACTIVITY_HARVEST = "Cosecha"
ACTIVITY_IRRIGATION = "Riego"


def _present(value: float | None) -> bool:
    # Zero e fill value nao disparam alertas.
    return bool(value) and value != FILL_VALUE


def check_weather_alert(record: DailyWeatherRecord) -> WeatherAlert:
    """Verifica alertas meteorologicos e agricolas de um dia.

    Valores zero, ausentes ou iguais ao fill value (-999) nunca disparam
    alerta. Um -999 em ``min_temperature`` ou ``soil_moisture`` e dado
    ausente, entao nao gera alerta de geada nem de seca do solo.

    Args:
        record: Registro diario normalizado.

    Returns:
        WeatherAlert com a lista de alertas disparados.
    """
    alerts: list[str] = []

    if _present(record.precipitation) and record.precipitation > 50:
        alerts.append("Alerta por precipitación excesiva: posible inundación")

    if _present(record.wind_speed) and record.wind_speed > 15:
        alerts.append("Alerta por vientos fuertes")

    if _present(record.max_temperature) and record.max_temperature > 40:
        alerts.append("Alerta por calor extremo")

    if _present(record.min_temperature) and record.min_temperature < 0:
        alerts.append("Alerta por temperaturas bajo cero: riesgo de heladas")

    if _present(record.soil_moisture) and record.soil_moisture < 15:
        alerts.append("Alerta por sequía en el suelo: cultivos en riesgo")

    if _present(record.soil_moisture) and record.soil_moisture > 85:
        alerts.append(
            "Alerta por exceso de humedad en el suelo: riesgo de enfermedades radiculares"
        )

    if (
        _present(record.humidity)
        and _present(record.temperature)
        and record.humidity > 85
        and 18 < record.temperature < 30
    ):
        alerts.append("Alerta por condiciones favorables para enfermedades fúngicas")

    return WeatherAlert(has_alert=bool(alerts), alerts=alerts)


def calculate_water_stress_index(
    precipitation: float,
    evapotranspiration: float,
    soil_moisture: float,
) -> WaterStressResult:
    """Indice de estresse hidrico de 0 (sem estresse) a 10 (estresse extremo).

    Combina o balanco hidrico do dia (precipitacao - evapotranspiracao) com a
    umidade atual do solo.
    """
    water_balance = precipitation - evapotranspiration
    stress_index = max(0.0, min(10.0, 5 - water_balance - soil_moisture / 20))

    if stress_index < 3:
        status = WaterStressStatus.OPTIMAL
        recommendation = "No es necesario regar. Condiciones hídricas adecuadas."
    elif stress_index < 5:
        status = WaterStressStatus.MILD
        recommendation = (
            "Monitorear la humedad del suelo. "
            "Riego ligero recomendado si no hay previsión de lluvia."
        )
    elif stress_index < 7.5:
        status = WaterStressStatus.MODERATE
        recommendation = (
            "Estrés hídrico moderado. Se recomienda riego para evitar daños a los cultivos."
        )
    else:
        status = WaterStressStatus.SEVERE
        recommendation = (
            "Estrés hídrico severo. Riego urgente para evitar pérdidas significativas."
        )

    return WaterStressResult(
        stress_index=stress_index,
        status=status,
        recommendation=recommendation,
    )


def estimate_crop_potential(
    records: Sequence[DailyWeatherRecord],
    crop_type: CropType | str,
) -> CropPotential:
    """Estima o potencial produtivo de uma cultura a partir da serie diaria.

    Medicoes ausentes entram como 0 nas medias e extremos.

    Args:
        records: Serie diaria (historica ou prevista).
        crop_type: Tipo de cultura (cereal, hortícola, frutal, olivo, viñedo).

    Returns:
        CropPotential com fatores limitantes e recomendacoes.

    Raises:
        ValueError: Se crop_type nao for reconhecido.
    """
    crop = CropType(crop_type)

    if not records:
        return CropPotential(
            potential_yield=YieldPotential.MEDIUM,
            limiting_factors=["Datos insuficientes para una estimación precisa"],
            recommendations=["Recolectar más datos meteorológicos"],
        )

    limiting_factors: list[str] = []
    recommendations: list[str] = []

    n = len(records)
    avg_temp = sum(r.temperature or 0 for r in records) / n
    avg_soil_moisture = sum(r.soil_moisture or 0 for r in records) / n
    total_rain = sum(r.precipitation or 0 for r in records)
    max_temp = max(r.max_temperature or 0 for r in records)
    min_temp = min(r.min_temperature or 0 for r in records)

    if crop == CropType.CEREAL:
        if total_rain < 200:
            limiting_factors.append("Precipitación insuficiente para cereales")
            recommendations.append("Implementar riego suplementario")
        if avg_temp < 8 or avg_temp > 22:
            limiting_factors.append("Temperatura media fuera del rango óptimo para cereales")
            recommendations.append("Considerar variedades adaptadas a las condiciones locales")

    elif crop == CropType.HORTICOLA:
        if avg_soil_moisture < 40:
            limiting_factors.append("Humedad de suelo insuficiente para cultivos hortícolas")
            recommendations.append("Aumentar frecuencia de riego")
        if max_temp > 35:
            limiting_factors.append("Temperaturas máximas excesivas para hortícolas")
            recommendations.append("Considerar sombreo o cultivo protegido")

    elif crop == CropType.FRUTAL:
        if min_temp < -2:
            limiting_factors.append("Riesgo de daño por heladas en frutales")
            recommendations.append("Implementar sistemas de protección contra heladas")
        # Horas-frio so fazem sentido com mais de um mes de dados.
        if n > 30:
            cold_hours = sum(1 for r in records if (r.temperature or 0) < 7) * 24
            if cold_hours < 200:
                limiting_factors.append("Posible insuficiencia de horas-frío para frutales")

    elif crop == CropType.OLIVO:
        if total_rain > 600:
            limiting_factors.append("Precipitación excesiva para olivo")
            recommendations.append("Asegurar buen drenaje en suelo")
        if min_temp < -10:
            limiting_factors.append("Temperaturas mínimas peligrosas para olivos")
            recommendations.append("Proteger árboles jóvenes en invierno")

    elif crop == CropType.VINEDO:
        if avg_soil_moisture > 60:
            limiting_factors.append("Humedad excesiva del suelo para viñedo")
            recommendations.append("Mejorar drenaje")
        high_humidity_days = sum(1 for r in records if (r.humidity or 0) > 75)
        if high_humidity_days > n * 0.5:
            limiting_factors.append(
                "Alta humedad ambiental: mayor riesgo de enfermedades fúngicas"
            )
            recommendations.append(
                "Implementar programa preventivo de control de mildiu y oídio"
            )

    if not limiting_factors:
        potential = YieldPotential.HIGH
        recommendations.append("Condiciones óptimas, mantener prácticas de manejo estándar")
    elif len(limiting_factors) <= 2:
        potential = YieldPotential.MEDIUM
        recommendations.append(
            "Implementar las recomendaciones para mitigar factores limitantes"
        )
    else:
        potential = YieldPotential.LOW
        recommendations.append(
            "Considerar rotación a cultivos más adaptados a las condiciones locales"
        )

    logger.debug(
        "crop_potential",
        crop=crop.value,
        days=n,
        total_rain=total_rain,
        avg_temp=round(avg_temp, 2),
        factors=len(limiting_factors),
    )

    return CropPotential(
        potential_yield=potential,
        limiting_factors=limiting_factors,
        recommendations=recommendations,
    )


def _calendar_day(day: DailyWeatherRecord) -> CalendarDay:
    recommended: list[str] = []
    not_recommended: list[str] = []

    sm = day.soil_moisture
    st = day.soil_temperature
    rain = day.precipitation

    # Umidade ou temperatura do solo zeradas contam como ausentes.
    if (
        sm
        and 30 <= sm <= 70
        and st
        and st >= 10
        and (rain is None or rain < 5)
    ):
        recommended.append(ACTIVITY_PLANTING)
    else:
        not_recommended.append(ACTIVITY_PLANTING)

    if (day.wind_speed is None or day.wind_speed < 10) and (rain is None or rain < 1):
        recommended.append(ACTIVITY_SPRAYING)
    else:
        not_recommended.append(ACTIVITY_SPRAYING)

    if (rain is None or rain < 1) and (day.humidity is None or day.humidity < 70):
        recommended.append(ACTIVITY_HARVEST)
    else:
        not_recommended.append(ACTIVITY_HARVEST)

    irrigation = "sin datos"
    if sm is not None and rain is not None:
        if sm < 30 and rain < 3:
            recommended.append(ACTIVITY_IRRIGATION)
            irrigation = "Necesario"
        elif 30 <= sm <= 60:
            irrigation = "Opcional"
        else:
            not_recommended.append(ACTIVITY_IRRIGATION)
            irrigation = "No recomendado"

    temperature = f"{day.temperature:.1f}" if day.temperature is not None else "n/d"
    summary = f"Temperatura: {temperature}°C"
    if rain is not None:
        summary += f", Precipitación: {rain:.1f} mm"
    if day.humidity is not None:
        summary += f", Humedad: {day.humidity:.0f}%"
    if sm is not None:
        summary += f", Humedad suelo: {sm:.0f}%"
    summary += f", Riego: {irrigation}"

    return CalendarDay(
        date=day.date,
        recommended_activities=recommended,
        not_recommended_activities=not_recommended,
        weather_summary=summary,
    )


def generate_agricultural_calendar(
    region: str,
    forecast: Sequence[DailyWeatherRecord],
    crop_type: str,
) -> AgriculturalCalendar:
    """Gera calendario de atividades agricolas dia a dia.

    Para cada dia classifica plantio, tratamentos fitossanitarios, colheita e
    irrigacao em recomendadas ou nao recomendadas, com um resumo do tempo.

    Args:
        region: Nome da regiao (informativo).
        forecast: Serie diaria, normalmente uma previsao curta.
        crop_type: Cultura de referencia (informativo).

    Returns:
        AgriculturalCalendar com um CalendarDay por registro, na mesma ordem.
    """
    return AgriculturalCalendar(
        region=str(region),
        crop_type=str(crop_type),
        next_days=[_calendar_day(day) for day in forecast],
    )
