"""FastAPI host adapter, resource guards and UI components."""

from __future__ import annotations

from .app import MarkupSettings, WebApplication
from .components import Component, Page
from .guard import BasicResourceGuard, SecurePatternGuard
from .static import GuardedStaticFiles

__all__ = [
    "BasicResourceGuard",
    "Component",
    "GuardedStaticFiles",
    "MarkupSettings",
    "Page",
    "SecurePatternGuard",
    "WebApplication",
]
