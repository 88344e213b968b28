"""Configuration models and helpers."""

from __future__ import annotations

from .settings import BootstrapSettings, load_settings
from .theme import BUILTIN_THEMES, Theme, resolve_theme

__all__ = ["BUILTIN_THEMES", "BootstrapSettings", "Theme", "load_settings", "resolve_theme"]
