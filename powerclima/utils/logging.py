"""Configuracao de logging estruturado com structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

# Bibliotecas HTTP que logam cada requisicao em INFO, duplicando nasa_power_request.
_HTTP_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Nivel de log invalido: {level!r}")
    return resolved


def configure_logging(
    level: str | int = "INFO",
    json_format: bool = True,
    log_file: Path | str | None = None,
) -> None:
    """Configura structlog sobre o logging da stdlib.

    Pode ser chamada mais de uma vez (a CLI reconfigura com ``--verbose``):
    handlers anteriores do root logger sao substituidos.

    Args:
        level: Nome ("DEBUG", "info") ou valor numerico do nivel.
        json_format: JSON por linha se True, saida de console se False.
        log_file: Arquivo que recebe uma copia dos eventos.

    Raises:
        ValueError: Se o nome do nivel nao existir.
    """
    numeric_level = _resolve_level(level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=numeric_level,
        force=True,
    )

    http_level = numeric_level if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
