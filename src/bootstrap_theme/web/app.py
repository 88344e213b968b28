from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from fastapi import FastAPI

from ..core.context import HostContextMiddleware
from ..core.host import InstantiationListener, ResourceGuard
from .guard import SecurePatternGuard

logger = logging.getLogger(__name__)


@dataclass
class MarkupSettings:
    strip_framework_tags: bool = False


class WebApplication:
    """Host adapter around a FastAPI application.

    Provides markup settings, a static resource guard and component
    instantiation listeners, and binds itself as the current host for every
    request it serves.
    """

    def __init__(
        self,
        app: Optional[FastAPI] = None,
        *,
        resource_guard: Optional[ResourceGuard] = None,
        title: str = "Bootstrap Theme",
    ) -> None:
        self.app = app if app is not None else FastAPI(title=title)
        self.markup_settings = MarkupSettings()
        self._resource_guard: Optional[ResourceGuard] = (
            resource_guard if resource_guard is not None else SecurePatternGuard()
        )
        self._listeners_lock = threading.Lock()
        self._listeners: List[InstantiationListener] = []
        self.app.add_middleware(HostContextMiddleware, host=self)

    def set_markup_stripping(self, enabled: bool) -> None:
        self.markup_settings.strip_framework_tags = enabled

    def get_resource_guard(self) -> Optional[ResourceGuard]:
        return self._resource_guard

    def add_instantiation_listener(self, listener: InstantiationListener) -> None:
        with self._listeners_lock:
            self._listeners.append(listener)

    @property
    def instantiation_listeners(self) -> tuple[InstantiationListener, ...]:
        with self._listeners_lock:
            return tuple(self._listeners)

    def notify_instantiation(self, component: Any) -> None:
        for listener in self.instantiation_listeners:
            listener(component)

    @property
    def routes(self) -> Sequence[Any]:
        return self.app.routes

    def mount(self, path: str, app: Any, name: Optional[str] = None) -> None:
        logger.debug("Mounting %r at %s", name or app, path)
        self.app.mount(path, app, name=name)

    async def __call__(self, scope, receive, send) -> None:
        await self.app(scope, receive, send)


__all__ = ["MarkupSettings", "WebApplication"]
