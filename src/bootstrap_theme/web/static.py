from __future__ import annotations

import logging
import os
from typing import Any, MutableMapping, Optional

from fastapi import HTTPException
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles

from ..core.host import ResourceGuard

logger = logging.getLogger(__name__)


class GuardedStaticFiles(StaticFiles):
    """Static files application that asks a resource guard before serving."""

    def __init__(self, *, guard: Optional[ResourceGuard] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.guard = guard

    async def get_response(self, path: str, scope: MutableMapping[str, Any]) -> Response:
        relative = path.replace(os.sep, "/")
        if self.guard is not None and not self.guard.accepts(relative):
            logger.warning("Resource guard rejected static path: %s", relative)
            raise HTTPException(status_code=403, detail="Access to this resource is not allowed.")
        return await super().get_response(path, scope)


__all__ = ["GuardedStaticFiles"]
