from __future__ import annotations

import os
from typing import Tuple

from ..config.settings import BootstrapSettings
from ..config.theme import BOOTSTRAP_PACKAGE
from ..core.errors import require
from .header import HeaderSink
from .references import ResourceKind, ResourceReference


class BootstrapResourcesRenderer:
    """Renders the Bootstrap stylesheet and script references.

    The emitted sequence depends on the settings only: the active theme's
    stylesheet first, then the Bootstrap bundle (which ships Popper). A
    packaged URL is used only when the file exists in the settings' resource
    directory; otherwise the reference points at the CDN.
    """

    def references(self, settings: BootstrapSettings) -> Tuple[ResourceReference, ...]:
        require(settings, "settings")
        theme = settings.active_theme
        stylesheet = ResourceReference(
            ResourceKind.CSS,
            self._url(settings, theme.package, theme.stylesheet_path(minify=settings.minify)),
        )
        script_name = "bootstrap.bundle.min.js" if settings.minify else "bootstrap.bundle.js"
        script = ResourceReference(
            ResourceKind.JS,
            self._url(settings, BOOTSTRAP_PACKAGE, f"js/{script_name}"),
            defer=settings.defer_javascript,
        )
        return (stylesheet, script)

    def render(self, settings: BootstrapSettings, sink: HeaderSink) -> None:
        require(settings, "settings")
        require(sink, "sink")
        for reference in self.references(settings):
            sink.render(reference)

    @staticmethod
    def is_packaged(settings: BootstrapSettings, package: str, path: str) -> bool:
        if settings.use_cdn_resources or not settings.use_resource_packaging:
            return False
        local = os.path.join(settings.packaged_resource_directory, package, settings.version, *path.split("/"))
        return os.path.isfile(local)

    @classmethod
    def _url(cls, settings: BootstrapSettings, package: str, path: str) -> str:
        if cls.is_packaged(settings, package, path):
            return f"{settings.resource_mount_path}/{package}/{settings.version}/{path}"
        return f"{settings.cdn_base_url}/{package}@{settings.version}/dist/{path}"


RESOURCES_RENDERER = BootstrapResourcesRenderer()

__all__ = ["BootstrapResourcesRenderer", "RESOURCES_RENDERER"]
