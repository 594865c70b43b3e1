"""Normalizacao de datas no formato da API NASA POWER."""

from __future__ import annotations

from .dates import format_date, is_date_key, parse_date, to_api_date

__all__: list[str] = [
    "format_date",
    "is_date_key",
    "parse_date",
    "to_api_date",
]
