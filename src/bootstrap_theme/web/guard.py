from __future__ import annotations

import posixpath
import threading
from fnmatch import fnmatchcase
from typing import List, Tuple

from ..core.errors import InvalidArgumentError

DEFAULT_PATTERNS: Tuple[str, ...] = (
    "+*.js",
    "+*.css",
    "+*.png",
    "+*.jpg",
    "+*.jpeg",
    "+*.gif",
    "+*.ico",
    "+*.html",
    "+*.txt",
)


def _normalize(path: str) -> str:
    normalized = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
    return normalized


def _is_traversal(path: str) -> bool:
    return path == ".." or path.startswith("../")


class SecurePatternGuard:
    """Whitelisting guard for static resources.

    Patterns are globs prefixed with ``+`` (accept) or ``-`` (reject). The
    most recently added matching pattern decides; unmatched paths are
    rejected.
    """

    def __init__(self, patterns: Tuple[str, ...] = DEFAULT_PATTERNS) -> None:
        self._lock = threading.Lock()
        self._rules: List[Tuple[bool, str]] = []
        for pattern in patterns:
            self.add_pattern(pattern)

    @property
    def patterns(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(("+" if accept else "-") + glob for accept, glob in self._rules)

    def supports_pattern_whitelist(self) -> bool:
        return True

    def add_pattern(self, pattern: str) -> None:
        if not pattern or pattern[0] not in "+-" or len(pattern) < 2:
            raise InvalidArgumentError(f"Pattern must start with '+' or '-': {pattern!r}")
        rule = (pattern[0] == "+", pattern[1:])
        with self._lock:
            if rule not in self._rules:
                self._rules.append(rule)

    def accepts(self, path: str) -> bool:
        normalized = _normalize(path)
        if _is_traversal(normalized):
            return False
        with self._lock:
            rules = list(self._rules)
        for accept, glob in reversed(rules):
            if fnmatchcase(normalized, glob):
                return accept
        return False


class BasicResourceGuard:
    """Non-extensible guard that only hides Python sources and dot files."""

    blocked_suffixes: Tuple[str, ...] = (".py", ".pyc", ".pyo")

    def accepts(self, path: str) -> bool:
        normalized = _normalize(path)
        if _is_traversal(normalized):
            return False
        name = posixpath.basename(normalized)
        if name.startswith("."):
            return False
        return not name.endswith(self.blocked_suffixes)


__all__ = ["BasicResourceGuard", "DEFAULT_PATTERNS", "SecurePatternGuard"]
