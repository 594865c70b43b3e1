"""API publica do modulo NASA POWER."""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pandas as pd
import structlog

from powerclima.agro.indices import calculate_indices
from powerclima.agro.models import (
    UNDETERMINED,
    AgriculturalData,
    FrostRiskAdvice,
    IrrigationAdvice,
    PlantingAdvice,
    PlantingDetails,
    RiskLevel,
)
from powerclima.agro.recommendations import generate_recommendations, round_half_up
from powerclima.constants import FILL_VALUE, HTTPSettings
from powerclima.exceptions import EmptyResultError, RegionNotFoundError
from powerclima.models import MetaInfo

from . import client, parser
from .models import (
    AGRO_PARAMS,
    DEFAULT_REGION_PARAMS,
    REGION_ALIASES,
    REGION_COORDS,
    DailyWeatherRecord,
    GeoCoordinates,
    MeteoParam,
    Region,
)

logger = structlog.get_logger()

IRRIGATION_PARAMS = (
    MeteoParam.PRECTOTCORR,
    MeteoParam.T2M,
    MeteoParam.RH2M,
    MeteoParam.TSOIL1,
    MeteoParam.EVLAND,
)
FROST_PARAMS = (MeteoParam.T2M_MIN,)
PLANTING_PARAMS = (
    MeteoParam.TSOIL1,
    MeteoParam.TSOIL2,
    MeteoParam.PRECTOTCORR,
    MeteoParam.T2M,
)


def resolve_region(region: Region | str) -> Region:
    """Resolve nome ou membro de Region (sem diferenciar maiusculas).

    Aceita o nome exibido ("Castilla y León"), o nome do membro
    ("CASTILLA_Y_LEON") ou uma grafia de REGION_ALIASES ("Catalunna").

    Raises:
        RegionNotFoundError: Se a regiao nao existir na tabela.
    """
    if isinstance(region, Region):
        if region not in REGION_COORDS:
            raise RegionNotFoundError(region)
        return region

    key = str(region).strip().casefold()
    if key in REGION_ALIASES:
        return REGION_ALIASES[key]

    for candidate in Region:
        if key in (candidate.value.casefold(), candidate.name.casefold()):
            return candidate

    raise RegionNotFoundError(region, available=[r.value for r in Region])


def region_coordinates(region: Region | str) -> GeoCoordinates:
    return REGION_COORDS[resolve_region(region)]


async def weather_data(
    coordinates: GeoCoordinates,
    start: str | date,
    end: str | date,
    parameters: Sequence[str],
    community: str | None = None,
    response_format: str = "JSON",
    return_meta: bool = False,
) -> list[DailyWeatherRecord] | tuple[list[DailyWeatherRecord], MetaInfo]:
    """Registros diarios de um ponto (lat/lon).

    Uma unica requisicao; erros HTTP e de transporte sao propagados.

    Args:
        coordinates: Ponto consultado.
        start: Data inicial (YYYYMMDD, ISO ou date).
        end: Data final (YYYYMMDD, ISO ou date).
        parameters: Codigos NASA POWER solicitados.
        community: Comunidade da API (padrao de HTTPSettings).
        response_format: Formato de resposta da API.
        return_meta: Se True, retorna tupla (registros, MetaInfo).

    Returns:
        Lista de DailyWeatherRecord ordenada por data.

    Raises:
        ValueError: Se datas forem invalidas ou start > end.
    """
    params = client.build_params(
        coordinates, start, end, parameters, community, response_format
    )

    t0 = time.monotonic()
    data = await client.fetch_daily(
        coordinates, start, end, parameters, community, response_format
    )
    fetch_ms = int((time.monotonic() - t0) * 1000)

    t1 = time.monotonic()
    records = parser.normalize_response(data)
    parse_ms = int((time.monotonic() - t1) * 1000)

    if return_meta:
        meta = MetaInfo(
            source="nasa_power",
            source_url=(
                f"{HTTPSettings().base_url}?latitude={params['latitude']}"
                f"&longitude={params['longitude']}"
                f"&start={params['start']}&end={params['end']}"
            ),
            source_method="httpx",
            fetched_at=datetime.now(UTC),
            fetch_duration_ms=fetch_ms,
            parse_duration_ms=parse_ms,
            records_count=len(records),
            parameters=params["parameters"].split(","),
            columns=sorted({f for r in records for f in r.measurements()}),
            parser_version=parser.PARSER_VERSION,
        )
        return records, meta

    return records


async def region_weather_data(
    region: Region | str,
    start: str | date,
    end: str | date,
    parameters: Sequence[str] | None = None,
    community: str | None = None,
    response_format: str = "JSON",
    return_meta: bool = False,
) -> list[DailyWeatherRecord] | tuple[list[DailyWeatherRecord], MetaInfo]:
    """Registros diarios do ponto central de uma regiao.

    Sem ``parameters``, usa DEFAULT_REGION_PARAMS.

    Raises:
        RegionNotFoundError: Se a regiao nao for reconhecida (antes de qualquer requisicao).
    """
    coordinates = region_coordinates(region)
    return await weather_data(
        coordinates,
        start,
        end,
        parameters or DEFAULT_REGION_PARAMS,
        community=community,
        response_format=response_format,
        return_meta=return_meta,
    )


async def weather_frame(
    coordinates: GeoCoordinates,
    start: str | date,
    end: str | date,
    parameters: Sequence[str] | None = None,
    aggregation: str = "daily",
    return_meta: bool = False,
    **kwargs: Any,
) -> pd.DataFrame | tuple[pd.DataFrame, MetaInfo]:
    """Dados diarios ou mensais de um ponto como DataFrame.

    Args:
        coordinates: Ponto consultado.
        start: Data inicial.
        end: Data final.
        parameters: Codigos NASA POWER (padrao DEFAULT_REGION_PARAMS).
        aggregation: "daily" (padrao) ou "monthly".
        return_meta: Se True, retorna tupla (DataFrame, MetaInfo).

    Returns:
        DataFrame com coluna ``date`` (ou ``month``) e uma coluna por medicao.

    Raises:
        ValueError: Se aggregation nao for "daily" nem "monthly".
    """
    if aggregation not in ("daily", "monthly"):
        raise ValueError(f"aggregation deve ser 'daily' ou 'monthly', recebido: {aggregation}")

    records, meta = await weather_data(
        coordinates,
        start,
        end,
        parameters or DEFAULT_REGION_PARAMS,
        return_meta=True,
        **kwargs,
    )

    t0 = time.monotonic()
    df = parser.to_dataframe(records)
    if aggregation == "monthly":
        df = parser.aggregate_monthly(df)
    meta.parse_duration_ms += int((time.monotonic() - t0) * 1000)
    meta.columns = df.columns.tolist()

    if return_meta:
        return df, meta
    return df


async def agricultural_data(
    region: Region | str,
    start: str | date,
    end: str | date,
) -> AgriculturalData:
    """Serie diaria com indices agroclimaticos e recomendacoes por dia.

    Consulta AGRO_PARAMS; as tres listas do resultado tem o mesmo tamanho
    e sao alinhadas por posicao.
    """
    records = await region_weather_data(region, start, end, AGRO_PARAMS)

    indices = [calculate_indices(r) for r in records]
    recommendations = [generate_recommendations(r, i) for r, i in zip(records, indices)]

    logger.info("agricultural_data", region=str(region), days=len(records))

    return AgriculturalData(
        weather_data=records,
        indices=indices,
        recommendations=recommendations,
    )


def _num(value: float) -> str:
    return f"{value:g}"


async def _advisory_records(
    operation: str,
    region: Region | str,
    start: date,
    end: date,
    parameters: Sequence[str],
) -> list[DailyWeatherRecord]:
    records = await region_weather_data(region, start, end, parameters)
    if not records:
        raise EmptyResultError(operation, region)
    return records


async def is_raining(region: Region | str, today: date | None = None) -> bool:
    """Indica se houve precipitacao no dia.

    Raises:
        EmptyResultError: Se a API nao retornar registros.
    """
    today = today or date.today()
    records = await _advisory_records(
        "is_raining", region, today, today, (MeteoParam.PRECTOTCORR,)
    )
    raining = (records[0].precipitation or 0) > 0
    logger.info("advisory_result", operation="is_raining", region=str(region), result=raining)
    return raining


async def should_irrigate(region: Region | str, today: date | None = None) -> IrrigationAdvice:
    """Avalia necessidade de irrigacao com base no dia mais recente de uma janela de 3 dias.

    Umidade do solo zerada conta como dado indisponivel.

    Raises:
        EmptyResultError: Se a API nao retornar registros.
    """
    today = today or date.today()
    records = await _advisory_records(
        "should_irrigate", region, today - timedelta(days=2), today, IRRIGATION_PARAMS
    )
    latest = records[-1]

    if (
        latest.precipitation == FILL_VALUE
        or latest.soil_moisture == FILL_VALUE
        or latest.evapotranspiration == FILL_VALUE
        or latest.soil_moisture == 0
    ):
        advice = IrrigationAdvice(
            should_irrigate=UNDETERMINED,
            reason="No hay datos suficientes para determinar la necesidad de riego.",
        )
    elif (latest.precipitation or 0) > 5:
        advice = IrrigationAdvice(
            should_irrigate=False,
            reason=(
                f"Ha llovido suficiente hoy ({_num(latest.precipitation)} mm), "
                "no es necesario regar."
            ),
        )
    else:
        soil_moisture = latest.soil_moisture or 0
        evapotranspiration = latest.evapotranspiration or 0
        if soil_moisture < 30 and evapotranspiration > 4:
            advice = IrrigationAdvice(
                should_irrigate=True,
                reason=(
                    f"Baja humedad del suelo ({_num(soil_moisture)}%) y alta "
                    f"evapotranspiración ({_num(evapotranspiration)} mm/día)."
                ),
                recommended_amount=round_half_up((30 - soil_moisture) * 0.5),
            )
        else:
            advice = IrrigationAdvice(
                should_irrigate=False,
                reason=(
                    f"Condiciones adecuadas: humedad del suelo ({_num(soil_moisture)}%) y "
                    f"evapotranspiración ({_num(evapotranspiration)} mm/día)."
                ),
            )

    logger.info(
        "advisory_result",
        operation="should_irrigate",
        region=str(region),
        result=str(advice.should_irrigate),
    )
    return advice


async def frost_risk(region: Region | str, today: date | None = None) -> FrostRiskAdvice:
    """Risco de geada para hoje e amanha pela menor temperatura minima.

    Raises:
        EmptyResultError: Se a API nao retornar registros.
    """
    today = today or date.today()
    records = await _advisory_records(
        "frost_risk", region, today, today + timedelta(days=1), FROST_PARAMS
    )
    min_temps = [r.min_temperature or 0 for r in records]

    # Zero conta como dado indisponivel.
    if any(t in (FILL_VALUE, 0) for t in min_temps):
        advice = FrostRiskAdvice(
            risk_level=UNDETERMINED,
            message="No hay datos disponibles para determinar el riesgo de heladas.",
        )
    else:
        lowest = min(min_temps)
        if lowest <= 0:
            risk_level = RiskLevel.HIGH
            message = (
                f"¡ALERTA! Riesgo alto de heladas. Temperatura mínima prevista: "
                f"{_num(lowest)}°C. Se recomienda proteger cultivos sensibles."
            )
        elif lowest <= 3:
            risk_level = RiskLevel.MEDIUM
            message = (
                f"Riesgo medio de heladas. Temperatura mínima prevista: {_num(lowest)}°C. "
                "Considere medidas preventivas para cultivos sensibles."
            )
        else:
            risk_level = RiskLevel.LOW
            message = f"Riesgo bajo de heladas. Temperatura mínima prevista: {_num(lowest)}°C."
        advice = FrostRiskAdvice(risk_level=risk_level, message=message, lowest_temperature=lowest)

    logger.info(
        "advisory_result",
        operation="frost_risk",
        region=str(region),
        result=str(advice.risk_level),
    )
    return advice


async def planting_conditions(region: Region | str, today: date | None = None) -> PlantingAdvice:
    """Verifica condicoes de plantio de hoje, considerando a chuva prevista para amanha.

    Raises:
        EmptyResultError: Se a API nao retornar registros.
    """
    today = today or date.today()
    records = await _advisory_records(
        "planting_conditions", region, today, today + timedelta(days=1), PLANTING_PARAMS
    )
    current = records[0]
    forecast = records[1] if len(records) > 1 else None

    soil_moisture = current.soil_moisture or 0
    soil_temperature = current.soil_temperature or 0
    rain = current.precipitation or 0
    forecast_rain = forecast is not None and (forecast.precipitation or 0) > 1

    details = PlantingDetails(
        soil_moisture=soil_moisture,
        soil_temperature=soil_temperature,
        rain=rain,
        forecast_rain=forecast_rain,
    )

    if (
        FILL_VALUE in (soil_moisture, soil_temperature, rain)
        or soil_moisture == 0
        or soil_temperature == 0
        or (forecast is not None and forecast.precipitation == FILL_VALUE)
    ):
        advice = PlantingAdvice(
            is_optimal=UNDETERMINED,
            message="No hay datos suficientes para determinar condiciones de siembra.",
            details=details,
        )
    elif 30 <= soil_moisture <= 70 and soil_temperature >= 10 and rain < 5 and not forecast_rain:
        advice = PlantingAdvice(
            is_optimal=True,
            message=(
                "Condiciones óptimas para siembra. Humedad y temperatura del suelo "
                "adecuadas, sin lluvias previstas."
            ),
            details=details,
        )
    else:
        message = "Condiciones no óptimas para siembra:"
        if soil_moisture < 30:
            message += " Suelo demasiado seco."
        elif soil_moisture > 70:
            message += " Suelo demasiado húmedo."
        if soil_temperature < 10:
            message += " Temperatura del suelo demasiado baja."
        if rain >= 5:
            message += " Lluvia reciente."
        if forecast_rain:
            message += " Lluvia prevista para mañana."
        advice = PlantingAdvice(is_optimal=False, message=message, details=details)

    logger.info(
        "advisory_result",
        operation="planting_conditions",
        region=str(region),
        result=str(advice.is_optimal),
    )
    return advice
