from __future__ import annotations

from powerclima.http.settings import get_client_kwargs, get_timeout

__all__ = [
    "get_client_kwargs",
    "get_timeout",
]
