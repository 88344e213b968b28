"""Ambient "current host" resolution.

The host is stored in a :class:`contextvars.ContextVar`, so each thread and
each asyncio task sees its own binding. Web hosts bind themselves per request
through :class:`HostContextMiddleware`.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from .errors import NoActiveHostError, require

_CURRENT_HOST: ContextVar[Optional[Any]] = ContextVar("bootstrap_theme_current_host", default=None)


def current_host() -> Optional[Any]:
    return _CURRENT_HOST.get()


def require_current_host() -> Any:
    host = _CURRENT_HOST.get()
    if host is None:
        raise NoActiveHostError("There is no active host bound to this thread.")
    return host


@contextmanager
def bind_host(host: Any) -> Iterator[Any]:
    """Bind ``host`` as the current host for the duration of the block."""

    token = _CURRENT_HOST.set(require(host, "host"))
    try:
        yield host
    finally:
        _CURRENT_HOST.reset(token)


class HostContextMiddleware:
    """Pure ASGI middleware binding a host for every HTTP/websocket call."""

    def __init__(self, app: Any, host: Any) -> None:
        self.app = app
        self.host = host

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return
        with bind_host(self.host):
            await self.app(scope, receive, send)


__all__ = ["HostContextMiddleware", "bind_host", "current_host", "require_current_host"]
