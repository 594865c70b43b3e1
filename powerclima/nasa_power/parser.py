"""Parser para dados NASA POWER -- converte JSON da API em registros diarios."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd
import structlog

from powerclima.constants import FILL_VALUE
from powerclima.nasa_power.models import PARAM_FIELD_MAP, DailyWeatherRecord
from powerclima.normalize.dates import is_date_key

logger = structlog.get_logger()

PARSER_VERSION = 2


def normalize_response(data: dict[str, Any] | None) -> list[DailyWeatherRecord]:
    """Converte resposta JSON NASA POWER em registros diarios ordenados por data.

    Resposta sem ``properties.parameter`` (ou vazia) nao e erro: retorna
    lista vazia e registra um warning. Valores sao mantidos como vieram,
    inclusive o fill value (-999).

    Args:
        data: Dict completo da API NASA POWER.

    Returns:
        Lista de DailyWeatherRecord, uma por data valida com ao menos uma medicao.
    """
    parameters = _extract_parameters(data)
    if not parameters:
        logger.warning(
            "nasa_power_empty_response",
            keys=sorted(data) if isinstance(data, dict) else None,
        )
        return []

    first_param = next(iter(parameters))
    first_values = parameters[first_param]
    if not isinstance(first_values, dict):
        logger.warning("nasa_power_unexpected_format", param=first_param)
        return []

    dates = sorted(key for key in first_values if is_date_key(key))

    records: list[DailyWeatherRecord] = []
    for date_str in dates:
        values: dict[str, float] = {}

        for nasa_param, field_name in PARAM_FIELD_MAP:
            daily_values = parameters.get(nasa_param)
            if not isinstance(daily_values, dict):
                continue
            raw = daily_values.get(date_str)
            if raw is None:
                continue
            try:
                values[field_name] = float(raw)
            except (ValueError, TypeError):
                logger.debug(
                    "nasa_power_value_skipped", param=nasa_param, date=date_str, value=raw
                )

        if not values:
            continue

        records.append(DailyWeatherRecord(date=date_str, **values))

    logger.debug("nasa_power_parse_ok", records=len(records), params=list(parameters))

    return records


def _extract_parameters(data: dict[str, Any] | None) -> dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    properties = data.get("properties")
    if not isinstance(properties, dict):
        return {}
    parameters = properties.get("parameter")
    if not isinstance(parameters, dict):
        return {}
    return parameters


def to_dataframe(records: Sequence[DailyWeatherRecord]) -> pd.DataFrame:
    """Converte registros diarios em DataFrame.

    No DataFrame o fill value vira NaN, para que agregacoes nao o somem.

    Returns:
        DataFrame com coluna ``date`` (datetime) e uma coluna por medicao presente.
    """
    if not records:
        return pd.DataFrame()

    rows = [{"date": r.date, **r.measurements()} for r in records]
    df = pd.DataFrame(rows)

    value_cols = [c for c in df.columns if c != "date"]
    for col in value_cols:
        values = pd.to_numeric(df[col], errors="coerce")
        df[col] = values.where(values != FILL_VALUE)

    df["date"] = pd.to_datetime(df["date"], format="%Y%m%d")
    df = df.sort_values("date").reset_index(drop=True)

    return df


def _sum_or_nan(values: pd.Series) -> float:
    # Mes sem nenhum valor medido fica NaN, nunca 0.0.
    return values.sum(min_count=1)


def aggregate_monthly(df: pd.DataFrame) -> pd.DataFrame:
    """Agrega dados diarios em resumo mensal.

    Precipitacao e evapotranspiracao: soma mensal.
    Demais medicoes: media mensal.
    Mes sem nenhuma medicao valida resulta em NaN, nao em 0.

    Args:
        df: DataFrame diario (output de to_dataframe).

    Returns:
        DataFrame mensal com coluna ``month`` e colunas ``<campo>_sum`` ou
        ``<campo>_mean``.
    """
    if df.empty:
        return df

    df = df.copy()
    df["month"] = df["date"].dt.to_period("M")

    summed = {"precipitation", "evapotranspiration"}
    agg: dict[str, pd.NamedAgg] = {}

    for col in df.columns:
        if col in ("date", "month"):
            continue
        if col in summed:
            agg[f"{col}_sum"] = pd.NamedAgg(column=col, aggfunc=_sum_or_nan)
        else:
            agg[f"{col}_mean"] = pd.NamedAgg(column=col, aggfunc="mean")

    if not agg:
        return df

    result = df.groupby("month").agg(**agg).reset_index()
    result["month"] = result["month"].dt.to_timestamp()

    return result
