from __future__ import annotations

import html
from typing import Any, Callable, List, Optional

from ..core.context import require_current_host
from ..resources.header import HeaderResponse, HeaderSink

HeadContributor = Callable[["Component", HeaderSink], None]


class Component:
    """Minimal UI component.

    Creating a component notifies the host's instantiation listeners, which
    is how head resources get attached automatically. Without an explicit
    ``host`` the current host is used.
    """

    def __init__(self, component_id: str, *, host: Any = None) -> None:
        self.id = component_id
        self.host = host if host is not None else require_current_host()
        self.children: List[Component] = []
        self._head_contributors: List[HeadContributor] = []
        notify = getattr(self.host, "notify_instantiation", None)
        if notify is not None:
            notify(self)

    def add(self, *children: "Component") -> "Component":
        self.children.extend(children)
        return self

    def add_head_contributor(self, contributor: HeadContributor) -> None:
        self._head_contributors.append(contributor)

    @property
    def head_contributors(self) -> tuple[HeadContributor, ...]:
        return tuple(self._head_contributors)

    def render_head(self, response: HeaderSink) -> None:
        for contributor in self._head_contributors:
            contributor(self, response)
        for child in self.children:
            child.render_head(response)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class Page(Component):
    def __init__(self, component_id: str = "page", *, title: str = "", host: Any = None) -> None:
        super().__init__(component_id, host=host)
        self.title = title

    def _strips_markup(self) -> bool:
        markup_settings = getattr(self.host, "markup_settings", None)
        return bool(getattr(markup_settings, "strip_framework_tags", False))

    def render_document(self, body: str = "", *, response: Optional[HeaderResponse] = None) -> str:
        response = response if response is not None else HeaderResponse()
        self.render_head(response)
        body_attrs = "" if self._strips_markup() else f' data-page="{html.escape(self.id, quote=True)}"'
        head = response.to_html()
        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "  <head>",
            '    <meta charset="utf-8">',
            '    <meta name="viewport" content="width=device-width, initial-scale=1">',
            f"    <title>{html.escape(self.title)}</title>",
        ]
        if head:
            lines.append(head)
        lines.extend(["  </head>", f"  <body{body_attrs}>", body, "  </body>", "</html>"])
        return "\n".join(lines) + "\n"


__all__ = ["Component", "HeadContributor", "Page"]
