from __future__ import annotations

import html
from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    CSS = "css"
    JS = "js"


@dataclass(frozen=True)
class ResourceReference:
    kind: ResourceKind
    url: str
    defer: bool = False

    def to_html(self) -> str:
        href = html.escape(self.url, quote=True)
        if self.kind is ResourceKind.CSS:
            return f'<link rel="stylesheet" href="{href}">'
        defer = " defer" if self.defer else ""
        return f'<script src="{href}"{defer}></script>'


__all__ = ["ResourceKind", "ResourceReference"]
