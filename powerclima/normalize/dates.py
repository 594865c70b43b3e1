"""
Utilitarios para datas no formato da API NASA POWER.

A API recebe e devolve datas diarias como strings de 8 digitos (YYYYMMDD).
Como o formato tem largura fixa, a ordem lexica coincide com a cronologica.
"""

from __future__ import annotations

import re
from datetime import date

REGEX_API_DATE = re.compile(r"[0-9]{8}")


def is_date_key(key: str) -> bool:
    """
    Indica se a chave e uma data valida da serie (8 caracteres, todos digitos).

    Chaves auxiliares como "units" ou "longname" retornam False.

    Examples:
        >>> is_date_key("20240115")
        True
        >>> is_date_key("units")
        False
    """
    return isinstance(key, str) and REGEX_API_DATE.fullmatch(key) is not None


def format_date(data: date) -> str:
    """
    Formata data no padrao YYYYMMDD.

    Examples:
        >>> format_date(date(2023, 1, 15))
        '20230115'
    """
    return data.strftime("%Y%m%d")


def parse_date(valor: str) -> date:
    """
    Converte string YYYYMMDD em date.

    Raises:
        ValueError: Se a string nao tiver 8 digitos ou nao for uma data real.

    Examples:
        >>> parse_date("20230115")
        datetime.date(2023, 1, 15)
    """
    if not REGEX_API_DATE.fullmatch(valor):
        raise ValueError(f"Data '{valor}' fora do formato YYYYMMDD")
    return date(int(valor[:4]), int(valor[4:6]), int(valor[6:8]))


def to_api_date(valor: str | date) -> str:
    """
    Normaliza data para o formato aceito pela API.

    Aceita ``date``, string YYYYMMDD ou string ISO (YYYY-MM-DD).

    Examples:
        >>> to_api_date("2024-01-15")
        '20240115'
        >>> to_api_date("20240115")
        '20240115'
    """
    if isinstance(valor, date):
        return format_date(valor)

    valor = valor.strip()
    if REGEX_API_DATE.fullmatch(valor):
        return format_date(parse_date(valor))
    return format_date(date.fromisoformat(valor))
