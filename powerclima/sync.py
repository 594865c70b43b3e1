"""Wrappers síncronos para APIs async do powerclima."""

from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def _get_running_loop() -> asyncio.AbstractEventLoop | None:
    """
    Obtém o event loop em execução, preparado para reentrada.

    Em Jupyter notebooks o loop já está rodando e precisa de nest_asyncio.
    Fora dele (scripts, CLI, threads secundárias) retorna None.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return None

    try:
        import nest_asyncio
    except ImportError:
        raise RuntimeError(
            "Event loop already running. Install nest_asyncio for Jupyter support: "
            "pip install nest_asyncio"
        ) from None

    nest_asyncio.apply()
    return loop


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """
    Executa coroutine de forma síncrona.

    Args:
        coro: Coroutine a executar

    Returns:
        Resultado da coroutine
    """
    loop = _get_running_loop()

    if loop is None:
        return asyncio.run(coro)
    return loop.run_until_complete(coro)


def sync_wrapper(async_func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """
    Decorator que cria versão síncrona de função async.

    Usage:
        @sync_wrapper
        async def fetch_data():
            ...

        # Agora pode chamar:
        fetch_data()  # Síncrono
    """

    @functools.wraps(async_func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return run_sync(async_func(*args, **kwargs))

    if wrapper.__doc__:
        wrapper.__doc__ = f"[SYNC] {wrapper.__doc__}"

    return wrapper


class _SyncModule:
    """Módulo que expõe versões síncronas da API."""

    def __init__(self, async_module: Any) -> None:
        self._async_module = async_module

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._async_module, name)

        if inspect.iscoroutinefunction(attr):
            return sync_wrapper(attr)

        return attr


class _SyncNasaPower(_SyncModule):
    """API síncrona da NASA POWER."""

    pass


_nasa_power: _SyncNasaPower | None = None


def __getattr__(name: str) -> Any:
    """Lazy loading para evitar imports circulares."""
    global _nasa_power

    if name == "nasa_power":
        if _nasa_power is None:
            from powerclima import nasa_power as async_nasa_power

            _nasa_power = _SyncNasaPower(async_nasa_power)
        return _nasa_power

    raise AttributeError(f"module 'powerclima.sync' has no attribute '{name}'")
