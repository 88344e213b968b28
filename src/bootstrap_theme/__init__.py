"""Bootstrap theme integration for FastAPI applications."""

from __future__ import annotations

from .bootstrap import BootstrapInstaller, get_settings, install, is_installed, render_head
from .config import BootstrapSettings, load_settings
from .core.errors import (
    BootstrapError,
    InvalidArgumentError,
    NoActiveHostError,
    NotInstalledError,
)

__all__ = [
    "BootstrapError",
    "BootstrapInstaller",
    "BootstrapSettings",
    "InvalidArgumentError",
    "NoActiveHostError",
    "NotInstalledError",
    "get_settings",
    "install",
    "is_installed",
    "load_settings",
    "main",
    "render_head",
]


def main() -> None:
    from .cli import main as cli_main

    raise SystemExit(cli_main())
