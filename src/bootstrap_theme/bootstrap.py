"""Bootstrap initializer.

Call :func:`install` once (with or without custom settings) to enable the
Bootstrap theme on a host application. Installing changes the host as
follows:

* markup stripping is switched on (always);
* font and source-map patterns are whitelisted on the host's resource guard
  when ``settings.update_security_manager`` is true and the guard supports
  whitelisting;
* a :class:`ResourceAppender` is registered as instantiation listener when
  ``settings.auto_append_resources`` is true;
* packaged resources are mounted when ``settings.use_resource_packaging`` is
  true and the host can mount static files.

Repeated calls for the same host are ignored.

Minimal usage::

    web_app = WebApplication()
    install(web_app)

With custom settings::

    install(web_app, BootstrapSettings(use_cdn_resources=True, theme="darkly"))
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config.settings import BootstrapSettings
from .core.context import require_current_host
from .core.errors import DuplicateInstallationError, NotInstalledError, require
from .core.host import Host, PackagingInstaller, SelectorInstaller, is_web_capable, supports_whitelisting
from .core.registry import SETTINGS_REGISTRY, SettingsRegistry
from .integrations.packaging import StaticPackagingInstaller
from .integrations.selectors import SELECTOR_UTILITIES
from .resources.appender import ResourceAppender
from .resources.header import HeaderSink
from .resources.renderer import RESOURCES_RENDERER, BootstrapResourcesRenderer

logger = logging.getLogger(__name__)

GUARD_PATTERNS = (
    "+*.woff",
    "+*.woff2",
    "+*.eot",
    "+*.svg",
    "+*.ttf",
    "+*.css.map",
)


class BootstrapInstaller:
    def __init__(
        self,
        registry: Optional[SettingsRegistry] = None,
        *,
        selectors: Optional[SelectorInstaller] = None,
        packaging: Optional[PackagingInstaller] = None,
        renderer: Optional[BootstrapResourcesRenderer] = None,
    ) -> None:
        self.registry: SettingsRegistry = registry if registry is not None else SETTINGS_REGISTRY
        self.selectors = selectors if selectors is not None else SELECTOR_UTILITIES
        self.packaging = packaging if packaging is not None else StaticPackagingInstaller()
        self.renderer = renderer if renderer is not None else RESOURCES_RENDERER

    def install(self, host: Host, settings: Optional[BootstrapSettings] = None) -> None:
        """Install ``settings`` (or the defaults) on ``host``; no-op when already installed.

        Steps are not rolled back when a collaborator fails, and the registry
        entry is only written at the end, so a retry re-runs every step.
        """

        require(host, "host")
        if self.registry.get(host) is not None:
            logger.debug("Bootstrap already installed for %r; ignoring install call", host)
            return

        if settings is None:
            settings = BootstrapSettings()

        if not self.selectors.is_installed(host):
            self.selectors.install(host)

        if settings.use_resource_packaging:
            if is_web_capable(host):
                self.packaging.install(host, settings)
            else:
                logger.debug("%r cannot mount static files; skipping resource packaging", host)

        if settings.update_security_manager:
            self._update_resource_guard(host)

        if settings.auto_append_resources:
            host.add_instantiation_listener(ResourceAppender(self.render_head))

        # framework markup leaks into the DOM and breaks Bootstrap's css selectors
        host.set_markup_stripping(True)

        try:
            self.registry.put(host, settings)
        except DuplicateInstallationError:
            logger.info("Concurrent Bootstrap install for %r won the race; keeping its settings", host)
            return
        logger.info(
            "Bootstrap %s installed (theme=%s, cdn=%s)",
            settings.version,
            settings.theme,
            settings.use_cdn_resources,
        )

    @staticmethod
    def _update_resource_guard(host: Host) -> None:
        guard = host.get_resource_guard()
        if not supports_whitelisting(guard):
            logger.debug("Resource guard %r does not support whitelisting; leaving it unchanged", guard)
            return
        for pattern in GUARD_PATTERNS:
            guard.add_pattern(pattern)

    def is_installed(self, host: Any) -> bool:
        return self.registry.get(require(host, "host")) is not None

    def get_settings(self, host: Any = None) -> BootstrapSettings:
        """Return the settings installed on ``host``, or on the current host when omitted.

        Raises:
            NoActiveHostError: no host given and none bound to this thread
            NotInstalledError: Bootstrap was never installed on the host
        """

        if host is None:
            host = require_current_host()
        settings = self.registry.get(host)
        if settings is None:
            raise NotInstalledError(f"Bootstrap is not installed for {type(host).__name__}.")
        return settings

    def render_head(self, response: HeaderSink, component: Any = None) -> None:
        """Render the core Bootstrap references into ``response``.

        The host is taken from ``component`` when given, otherwise from the
        ambient context.
        """

        require(response, "response")
        if component is not None:
            host = require(getattr(component, "host", None), "component.host")
        else:
            host = require_current_host()
        self.renderer.render(self.get_settings(host), response)


DEFAULT_INSTALLER = BootstrapInstaller()


def install(host: Any, settings: Optional[BootstrapSettings] = None) -> None:
    DEFAULT_INSTALLER.install(host, settings)


def is_installed(host: Any) -> bool:
    return DEFAULT_INSTALLER.is_installed(host)


def get_settings(host: Any = None) -> BootstrapSettings:
    return DEFAULT_INSTALLER.get_settings(host)


def render_head(response: HeaderSink, component: Any = None) -> None:
    DEFAULT_INSTALLER.render_head(response, component)


__all__ = [
    "BootstrapInstaller",
    "DEFAULT_INSTALLER",
    "GUARD_PATTERNS",
    "get_settings",
    "install",
    "is_installed",
    "render_head",
]
