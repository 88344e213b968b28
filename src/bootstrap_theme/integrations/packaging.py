from __future__ import annotations

import logging
from typing import Any, Optional

from ..config.settings import BootstrapSettings
from ..core.errors import InvalidArgumentError, require
from ..core.host import is_web_capable
from ..web.static import GuardedStaticFiles

logger = logging.getLogger(__name__)

MOUNT_NAME = "bootstrap-vendor"


class StaticPackagingInstaller:
    """Serves packaged front-end distributions from a guarded static mount.

    The mount path and directory come from the settings, the same values the
    resources renderer builds packaged URLs from. The directory is laid out as
    ``<package>/<version>/<path>``.
    """

    def is_installed(self, host: Any) -> bool:
        return any(getattr(route, "name", None) == MOUNT_NAME for route in host.routes)

    def install(self, host: Any, settings: Optional[BootstrapSettings] = None) -> None:
        require(host, "host")
        if not is_web_capable(host):
            raise InvalidArgumentError(f"{type(host).__name__} cannot mount static resources.")
        settings = settings if settings is not None else BootstrapSettings()
        if self.is_installed(host):
            logger.debug("Packaged resources already mounted for %r", host)
            return
        guard_getter = getattr(host, "get_resource_guard", None)
        guard = guard_getter() if guard_getter is not None else None
        directory = settings.packaged_resource_directory
        host.mount(
            settings.resource_mount_path,
            GuardedStaticFiles(directory=directory, check_dir=False, guard=guard),
            name=MOUNT_NAME,
        )
        logger.info("Packaged resources mounted at %s from %s", settings.resource_mount_path, directory)


__all__ = ["MOUNT_NAME", "StaticPackagingInstaller"]
