"""Collaborators installed alongside Bootstrap."""

from __future__ import annotations

from .packaging import MOUNT_NAME, StaticPackagingInstaller
from .selectors import SELECTOR_UTILITIES, SelectorSettings, SelectorUtilities, css_escape

__all__ = [
    "MOUNT_NAME",
    "SELECTOR_UTILITIES",
    "SelectorSettings",
    "SelectorUtilities",
    "StaticPackagingInstaller",
    "css_escape",
]
