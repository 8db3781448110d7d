# nlg_realiser\core\domain\elements\lists.py
"""
Ordered partial output.

Helpers build a `ListElement` per phrase and splice tokens into it by
position (a subject after the finite verb, a relocated object before the
verb phrase). Positions are found by identity, never by equality.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .base import NLGElement


class ListElement(NLGElement):
    def __init__(
        self,
        components: Optional[Iterable[NLGElement]] = None,
        source: Optional[NLGElement] = None,
    ) -> None:
        super().__init__(None)
        self.components: List[NLGElement] = []
        self.source = source
        if source is not None:
            self.category = source.category
            self.features = source.features.copy()
        for component in components or ():
            self.add(component)

    def add(self, element: Optional[NLGElement]) -> None:
        """Append; None (an unrealisable constituent) is skipped."""
        if element is None:
            return
        if isinstance(element, ListElement) and not element.components:
            return
        self.components.append(element)

    def extend(self, elements: Iterable[Optional[NLGElement]]) -> None:
        for element in elements:
            self.add(element)

    def insert(self, index: int, element: Optional[NLGElement]) -> None:
        if element is None:
            return
        self.components.insert(index, element)

    def index_of(self, element: NLGElement) -> int:
        for i, component in enumerate(self.components):
            if component is element:
                return i
        return -1

    def remove(self, element: NLGElement) -> bool:
        i = self.index_of(element)
        if i < 0:
            return False
        del self.components[i]
        return True

    @property
    def children(self) -> List[NLGElement]:
        return list(self.components)

    def leaves(self) -> Iterator[NLGElement]:
        """Depth-first walk over the non-list components."""
        for component in self.components:
            if isinstance(component, ListElement):
                yield from component.leaves()
            else:
                yield component

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[NLGElement]:
        return iter(self.components)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<ListElement {self.components!r}>"
