"""Helpers centralizados para configuracao HTTP."""

from __future__ import annotations

from typing import Any

import httpx

from powerclima.constants import HTTPSettings


def get_timeout(settings: HTTPSettings | None = None) -> httpx.Timeout:
    """Constroi ``httpx.Timeout`` a partir de ``HTTPSettings``.

    Args:
        settings: Instancia de HTTPSettings. Se None, usa defaults.

    Returns:
        httpx.Timeout configurado.
    """
    s = settings or HTTPSettings()
    return httpx.Timeout(
        connect=s.timeout_connect,
        read=s.timeout_read,
        write=s.timeout_write,
        pool=s.timeout_pool,
    )


def get_client_kwargs(
    settings: HTTPSettings | None = None,
    extra_headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Retorna dict pronto para ``httpx.AsyncClient(**kwargs)``.

    Args:
        settings: Instancia de HTTPSettings. Se None, usa defaults.
        extra_headers: Headers adicionais a mesclar.

    Returns:
        Dict com ``timeout``, ``headers``, ``follow_redirects``.
    """
    s = settings or HTTPSettings()
    headers = {
        "User-Agent": s.user_agent,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    return {
        "timeout": get_timeout(s),
        "headers": headers,
        "follow_redirects": True,
    }
