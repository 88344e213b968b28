from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..assets import vendor_dir
from ..core.errors import InvalidArgumentError
from .theme import DEFAULT_THEME, Theme, resolve_theme

load_dotenv()

DEFAULT_VERSION = "5.3.3"
DEFAULT_CDN_BASE_URL = "https://cdn.jsdelivr.net/npm"
DEFAULT_RESOURCE_MOUNT_PATH = "/vendor"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BootstrapSettings:
    """Options applied when Bootstrap is installed into a host.

    Instances are immutable; the installer keeps the instance it was handed.

    Packaged resources are served from ``resource_directory`` (the bundled
    ``assets/vendor`` folder when unset) under ``resource_mount_path``. A
    reference whose packaged file is not present there is rendered with its
    CDN URL instead, so pages never link to missing files.
    """

    version: str = DEFAULT_VERSION
    theme: str = DEFAULT_THEME
    use_cdn_resources: bool = False
    cdn_base_url: str = DEFAULT_CDN_BASE_URL
    use_resource_packaging: bool = True
    update_security_manager: bool = True
    auto_append_resources: bool = True
    minify: bool = True
    defer_javascript: bool = False
    resource_mount_path: str = DEFAULT_RESOURCE_MOUNT_PATH
    resource_directory: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.version or not self.version.strip():
            raise InvalidArgumentError("Bootstrap version must not be empty.")
        resolve_theme(self.theme)
        if not self.cdn_base_url or not self.cdn_base_url.strip("/"):
            raise InvalidArgumentError("CDN base url must not be empty.")
        mount_path = "/" + self.resource_mount_path.strip("/")
        if mount_path == "/":
            raise InvalidArgumentError("Resource mount path must not be the site root.")
        object.__setattr__(self, "cdn_base_url", self.cdn_base_url.rstrip("/"))
        object.__setattr__(self, "resource_mount_path", mount_path)

    @property
    def packaged_resource_directory(self) -> str:
        return self.resource_directory or vendor_dir()

    @property
    def active_theme(self) -> Theme:
        return resolve_theme(self.theme)


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@lru_cache(maxsize=1)
def load_settings() -> BootstrapSettings:
    return BootstrapSettings(
        version=os.getenv("BOOTSTRAP_VERSION", DEFAULT_VERSION),
        theme=os.getenv("BOOTSTRAP_THEME", DEFAULT_THEME),
        use_cdn_resources=_bool_from_env("BOOTSTRAP_USE_CDN", False),
        cdn_base_url=os.getenv("BOOTSTRAP_CDN_BASE_URL", DEFAULT_CDN_BASE_URL),
        use_resource_packaging=_bool_from_env("BOOTSTRAP_USE_PACKAGING", True),
        update_security_manager=_bool_from_env("BOOTSTRAP_UPDATE_SECURITY_MANAGER", True),
        auto_append_resources=_bool_from_env("BOOTSTRAP_AUTO_APPEND_RESOURCES", True),
        minify=_bool_from_env("BOOTSTRAP_MINIFY", True),
        defer_javascript=_bool_from_env("BOOTSTRAP_DEFER_JAVASCRIPT", False),
        resource_mount_path=os.getenv("BOOTSTRAP_RESOURCE_MOUNT_PATH", DEFAULT_RESOURCE_MOUNT_PATH),
        resource_directory=os.getenv("BOOTSTRAP_RESOURCE_DIR") or None,
    )
