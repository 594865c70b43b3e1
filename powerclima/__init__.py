"""powerclima - Dados meteorologicos NASA POWER e avisos agricolas para regioes da Espanha."""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "Bruno"

from powerclima import agro, nasa_power
from powerclima.exceptions import EmptyResultError, PowerClimaError, RegionNotFoundError
from powerclima.models import MetaInfo

__all__ = [
    "agro",
    "nasa_power",
    "EmptyResultError",
    "MetaInfo",
    "PowerClimaError",
    "RegionNotFoundError",
    "__version__",
]
