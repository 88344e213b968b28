from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from ..core.errors import DuplicateInstallationError, NotInstalledError, require
from ..core.registry import SettingsRegistry

logger = logging.getLogger(__name__)

_CSS_SPECIAL = re.compile(r"([!\"#$%&'()*+,./:;<=>?@\[\\\]^`{|}~])")


@dataclass(frozen=True)
class SelectorSettings:
    id_prefix: str = ""


def css_escape(identifier: str) -> str:
    """Escape an identifier for use inside a CSS/JS selector string."""

    return _CSS_SPECIAL.sub(r"\\\1", identifier)


class SelectorUtilities:
    """Installs selector helpers used by client-side Bootstrap plugins."""

    def __init__(self, registry: Optional[SettingsRegistry] = None) -> None:
        self._registry: SettingsRegistry = registry if registry is not None else SettingsRegistry()

    def is_installed(self, host: Any) -> bool:
        return require(host, "host") in self._registry

    def install(self, host: Any, settings: Optional[SelectorSettings] = None) -> None:
        require(host, "host")
        try:
            self._registry.put(host, settings or SelectorSettings())
        except DuplicateInstallationError:
            logger.debug("Selector utilities already installed for %r", host)
            return
        logger.debug("Selector utilities installed for %r", host)

    def get_settings(self, host: Any) -> SelectorSettings:
        settings = self._registry.get(require(host, "host"))
        if settings is None:
            raise NotInstalledError("Selector utilities are not installed for this host.")
        return settings

    def markup_id(self, component: Any) -> str:
        settings = self.get_settings(component.host)
        return f"{settings.id_prefix}{component.id}"

    def selector_for(self, component: Any) -> str:
        return "#" + css_escape(self.markup_id(component))


SELECTOR_UTILITIES = SelectorUtilities()

__all__ = ["SELECTOR_UTILITIES", "SelectorSettings", "SelectorUtilities", "css_escape"]
