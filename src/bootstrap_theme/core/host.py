"""Capability protocols for the objects bootstrap-theme collaborates with.

Hosts opt into a capability by providing the methods below; no inheritance
is required.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

InstantiationListener = Callable[[Any], None]


@runtime_checkable
class ResourceGuard(Protocol):
    def accepts(self, path: str) -> bool: ...


@runtime_checkable
class WhitelistingGuard(ResourceGuard, Protocol):
    def supports_pattern_whitelist(self) -> bool: ...

    def add_pattern(self, pattern: str) -> None: ...


@runtime_checkable
class Host(Protocol):
    def set_markup_stripping(self, enabled: bool) -> None: ...

    def get_resource_guard(self) -> Optional[ResourceGuard]: ...

    def add_instantiation_listener(self, listener: InstantiationListener) -> None: ...


@runtime_checkable
class WebCapableHost(Protocol):
    @property
    def routes(self) -> Sequence[Any]: ...

    def mount(self, path: str, app: Any, name: Optional[str] = None) -> None: ...


@runtime_checkable
class SelectorInstaller(Protocol):
    def is_installed(self, host: Any) -> bool: ...

    def install(self, host: Any) -> None: ...


@runtime_checkable
class PackagingInstaller(Protocol):
    def install(self, host: Any, settings: Any) -> None: ...


def is_web_capable(host: Any) -> bool:
    return isinstance(host, WebCapableHost)


def supports_whitelisting(guard: Any) -> bool:
    if guard is None or not isinstance(guard, WhitelistingGuard):
        return False
    return bool(guard.supports_pattern_whitelist())


__all__ = [
    "Host",
    "InstantiationListener",
    "PackagingInstaller",
    "ResourceGuard",
    "SelectorInstaller",
    "WebCapableHost",
    "WhitelistingGuard",
    "is_web_capable",
    "supports_whitelisting",
]
