"""Head resource references and the Bootstrap renderer."""

from __future__ import annotations

from .appender import ResourceAppender
from .header import HeaderResponse, HeaderSink
from .references import ResourceKind, ResourceReference
from .renderer import RESOURCES_RENDERER, BootstrapResourcesRenderer

__all__ = [
    "BootstrapResourcesRenderer",
    "HeaderResponse",
    "HeaderSink",
    "RESOURCES_RENDERER",
    "ResourceAppender",
    "ResourceKind",
    "ResourceReference",
]
