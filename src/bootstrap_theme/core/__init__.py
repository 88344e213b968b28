"""Registry, ambient context and capability protocols."""

from __future__ import annotations

from .context import HostContextMiddleware, bind_host, current_host, require_current_host
from .errors import (
    BootstrapError,
    DuplicateInstallationError,
    InvalidArgumentError,
    NoActiveHostError,
    NotInstalledError,
)
from .host import is_web_capable, supports_whitelisting
from .registry import SETTINGS_REGISTRY, SettingsRegistry

__all__ = [
    "BootstrapError",
    "DuplicateInstallationError",
    "HostContextMiddleware",
    "InvalidArgumentError",
    "NoActiveHostError",
    "NotInstalledError",
    "SETTINGS_REGISTRY",
    "SettingsRegistry",
    "bind_host",
    "current_host",
    "is_web_capable",
    "require_current_host",
    "supports_whitelisting",
]
