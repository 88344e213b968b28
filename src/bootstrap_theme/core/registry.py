from __future__ import annotations

import threading
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from .errors import DuplicateInstallationError

T = TypeVar("T")


class SettingsRegistry(Generic[T]):
    """Thread-safe map from host identity to the value installed for it.

    Entries are created once and never replaced. The host itself is kept
    alongside the value so its ``id()`` cannot be recycled while the entry
    lives.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[int, Tuple[Any, T]] = {}

    def get(self, host: Any) -> Optional[T]:
        with self._lock:
            entry = self._entries.get(id(host))
        if entry is None:
            return None
        return entry[1]

    def put(self, host: Any, value: T) -> None:
        with self._lock:
            if id(host) in self._entries:
                raise DuplicateInstallationError(
                    f"{type(host).__name__} at {id(host):#x} is already installed."
                )
            self._entries[id(host)] = (host, value)

    def __contains__(self, host: Any) -> bool:
        with self._lock:
            return id(host) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


SETTINGS_REGISTRY: SettingsRegistry = SettingsRegistry()

__all__ = ["SETTINGS_REGISTRY", "SettingsRegistry"]
