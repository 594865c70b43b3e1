"""Constantes e configuracoes do powerclima."""

from __future__ import annotations

from pydantic_settings import BaseSettings

# Valor sentinela da NASA POWER para dados indisponiveis.
FILL_VALUE: float = -999.0

NASA_POWER_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"


class HTTPSettings(BaseSettings):
    base_url: str = NASA_POWER_URL
    community: str = "SB"
    user_agent: str = "powerclima/0.3.0"

    timeout_connect: float = 10.0
    timeout_read: float = 30.0
    timeout_write: float = 10.0
    timeout_pool: float = 10.0

    class Config:
        env_prefix = "POWERCLIMA_HTTP_"
