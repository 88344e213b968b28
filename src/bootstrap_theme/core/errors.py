from __future__ import annotations


class BootstrapError(Exception):
    """Base class for every error raised by bootstrap-theme."""


class InvalidArgumentError(BootstrapError, ValueError):
    """A required argument was missing or carried an unusable value."""


class NotInstalledError(BootstrapError, LookupError):
    """Settings were requested for a host that was never installed."""


class NoActiveHostError(BootstrapError, RuntimeError):
    """No host is bound to the calling thread or task."""


class DuplicateInstallationError(BootstrapError):
    """A registry entry already exists for the host."""


def require(value, name: str):
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None.")
    return value


__all__ = [
    "BootstrapError",
    "DuplicateInstallationError",
    "InvalidArgumentError",
    "NoActiveHostError",
    "NotInstalledError",
    "require",
]
