from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.errors import InvalidArgumentError

BOOTSTRAP_PACKAGE = "bootstrap"
BOOTSWATCH_PACKAGE = "bootswatch"


@dataclass(frozen=True)
class Theme:
    name: str
    package: str = BOOTSTRAP_PACKAGE

    @property
    def is_stock(self) -> bool:
        return self.package == BOOTSTRAP_PACKAGE

    def stylesheet_path(self, *, minify: bool) -> str:
        """Path of the theme stylesheet relative to the package root."""

        filename = "bootstrap.min.css" if minify else "bootstrap.css"
        if self.is_stock:
            return f"css/{filename}"
        return f"{self.name}/{filename}"


BUILTIN_THEMES: Dict[str, Theme] = {
    theme.name: theme
    for theme in (
        Theme("bootstrap"),
        Theme("cerulean", BOOTSWATCH_PACKAGE),
        Theme("cosmo", BOOTSWATCH_PACKAGE),
        Theme("darkly", BOOTSWATCH_PACKAGE),
        Theme("flatly", BOOTSWATCH_PACKAGE),
        Theme("lux", BOOTSWATCH_PACKAGE),
        Theme("sandstone", BOOTSWATCH_PACKAGE),
        Theme("slate", BOOTSWATCH_PACKAGE),
    )
}

DEFAULT_THEME = "bootstrap"


def resolve_theme(name: str) -> Theme:
    try:
        return BUILTIN_THEMES[name.strip().lower()]
    except (KeyError, AttributeError) as exc:
        known = ", ".join(sorted(BUILTIN_THEMES))
        raise InvalidArgumentError(f"Unknown theme {name!r}; expected one of: {known}.") from exc


__all__ = ["BUILTIN_THEMES", "DEFAULT_THEME", "Theme", "resolve_theme"]
