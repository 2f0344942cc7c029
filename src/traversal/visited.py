"""
Identity-keyed vertex set.

Visited and result sets key on object identity rather than on a vertex's
own __eq__/__hash__, so membership stays correct even for vertex types
that compare by value.
"""

from collections.abc import MutableSet
from typing import Any, Dict, Iterable, Iterator, Optional


class IdentitySet(MutableSet):
    """Set of objects keyed on id(); holds a reference to each member"""

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: Dict[int, Any] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def __contains__(self, item: Any) -> bool:
        return id(item) in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Any) -> None:
        self._items[id(item)] = item

    def discard(self, item: Any) -> None:
        self._items.pop(id(item), None)

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    def __repr__(self) -> str:
        return f"IdentitySet({list(self._items.values())!r})"
