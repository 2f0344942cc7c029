"""
Vertex data model.

A vertex carries one value and an ordered list of outgoing edges. Vertices
are compared and hashed by identity, so two vertices holding equal values
are still distinct nodes.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Protocol


class VertexLike(Protocol):
    """Read-only surface the traversal engine relies on"""
    value: Any
    neighbors: Optional[Iterable["VertexLike"]]


@dataclass(eq=False)
class Vertex:
    """A node in a directed graph of value-bearing vertices"""
    value: Any
    neighbors: List["Vertex"] = field(default_factory=list)
    id: Optional[str] = None  # Label from the graph document, not identity

    def add_neighbor(self, *vertices: "Vertex") -> "Vertex":
        """Add outgoing edges to each of the given vertices."""
        self.neighbors.extend(vertices)
        return self

    @property
    def is_leaf(self) -> bool:
        return not self.neighbors

    def __repr__(self) -> str:
        label = f"{self.id}=" if self.id is not None else ""
        return f"Vertex({label}{self.value!r}, out={len(self.neighbors or ())})"
