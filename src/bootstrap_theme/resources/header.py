from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable

from .references import ResourceReference


@runtime_checkable
class HeaderSink(Protocol):
    def render(self, reference: ResourceReference) -> None: ...


class HeaderResponse:
    """Collects head references for one rendered document.

    A reference rendered twice is kept once, at its first position.
    """

    def __init__(self) -> None:
        self._references: List[ResourceReference] = []

    def render(self, reference: ResourceReference) -> None:
        if reference in self._references:
            return
        self._references.append(reference)

    @property
    def references(self) -> Tuple[ResourceReference, ...]:
        return tuple(self._references)

    def to_html(self, indent: str = "    ") -> str:
        return "\n".join(f"{indent}{reference.to_html()}" for reference in self._references)


__all__ = ["HeaderResponse", "HeaderSink"]
