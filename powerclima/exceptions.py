"""Excecoes tipadas do powerclima."""

from __future__ import annotations

from typing import Any


class PowerClimaError(Exception):
    """Base para todas as excecoes do powerclima."""

    pass


class RegionNotFoundError(PowerClimaError, ValueError):
    """Regiao sem coordenadas na tabela de regioes."""

    def __init__(self, region: Any, available: list[str] | None = None) -> None:
        self.region = region
        self.available = available or []
        msg = f"No se encontraron coordenadas para la región: {region}"
        if self.available:
            msg += f" (disponiveis: {', '.join(self.available)})"
        super().__init__(msg)


class EmptyResultError(PowerClimaError):
    """Consulta nao retornou nenhum registro diario."""

    def __init__(self, operation: str, region: Any = None) -> None:
        self.operation = operation
        self.region = region
        msg = f"No se obtuvieron datos meteorológicos ({operation})"
        if region is not None:
            msg += f" para {region}"
        super().__init__(msg)
