"""Cliente HTTP para API NASA POWER (power.larc.nasa.gov)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

import httpx
import structlog

from powerclima.constants import HTTPSettings
from powerclima.http.settings import get_client_kwargs
from powerclima.nasa_power.models import GeoCoordinates
from powerclima.normalize.dates import to_api_date

logger = structlog.get_logger()


def build_params(
    coordinates: GeoCoordinates,
    start: str | date,
    end: str | date,
    parameters: Sequence[str],
    community: str | None = None,
    response_format: str = "JSON",
) -> dict[str, Any]:
    """Monta os query params de uma consulta diaria por ponto.

    Raises:
        ValueError: Se datas forem invalidas, start > end ou sem parametros.
    """
    start_str = to_api_date(start)
    end_str = to_api_date(end)

    if start_str > end_str:
        raise ValueError(f"start ({start_str}) deve ser <= end ({end_str})")

    if not parameters:
        raise ValueError("Lista de parametros vazia")

    return {
        "parameters": ",".join(str(p) for p in parameters),
        "community": community or HTTPSettings().community,
        "latitude": str(coordinates.latitude),
        "longitude": str(coordinates.longitude),
        "start": start_str,
        "end": end_str,
        "format": response_format,
    }


async def _get_json(
    params: dict[str, Any],
    settings: HTTPSettings | None = None,
) -> dict[str, Any]:
    """Faz GET na API NASA POWER e retorna JSON parseado.

    Erros de transporte (timeout, status HTTP) sao propagados sem retry.
    """
    settings = settings or HTTPSettings()

    async with httpx.AsyncClient(**get_client_kwargs(settings)) as client:
        try:
            response = await client.get(settings.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "nasa_power_http_error",
                status=e.response.status_code,
                params=params,
            )
            raise
        except httpx.HTTPError as e:
            logger.error("nasa_power_transport_error", error=str(e), params=params)
            raise

        data = response.json()
        if not isinstance(data, dict):
            return {}
        return data


async def fetch_daily(
    coordinates: GeoCoordinates,
    start: str | date,
    end: str | date,
    parameters: Sequence[str],
    community: str | None = None,
    response_format: str = "JSON",
) -> dict[str, Any]:
    """Busca dados diarios de um ponto na API NASA POWER.

    Uma unica requisicao por chamada, sem divisao do periodo.

    Args:
        coordinates: Ponto consultado.
        start: Data inicial (YYYYMMDD, ISO ou date).
        end: Data final (YYYYMMDD, ISO ou date).
        parameters: Codigos de parametros NASA POWER.
        community: Comunidade da API. Se None, usa HTTPSettings.community ("SB").
        response_format: Formato de resposta (padrao "JSON").

    Returns:
        Dict com estrutura NASA POWER (properties.parameter contendo os dados).
    """
    params = build_params(coordinates, start, end, parameters, community, response_format)

    logger.info(
        "nasa_power_fetch",
        lat=coordinates.latitude,
        lon=coordinates.longitude,
        start=params["start"],
        end=params["end"],
        params=len(parameters),
    )

    return await _get_json(params)
