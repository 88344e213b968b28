from __future__ import annotations

import logging
from typing import Any, Callable

from .header import HeaderSink

logger = logging.getLogger(__name__)

HeadRenderer = Callable[[HeaderSink, Any], None]


class ResourceAppender:
    """Instantiation listener giving each new component the Bootstrap head resources."""

    def __init__(self, render_head: HeadRenderer) -> None:
        self._render_head = render_head

    def __call__(self, component: Any) -> None:
        add_contributor = getattr(component, "add_head_contributor", None)
        if add_contributor is None:
            return
        logger.debug("Appending Bootstrap resources to %r", component)
        add_contributor(self._contribute)

    def _contribute(self, component: Any, response: HeaderSink) -> None:
        self._render_head(response, component)


__all__ = ["ResourceAppender"]
