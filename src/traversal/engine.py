"""
Graph Traversal Engine

Implements cycle-safe depth-first traversal over in-memory vertex graphs.
Every query shares one visitation walk (each vertex visited at most once per
call); the strictly-increasing-path search has its own short-circuiting DFS.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TextIO

from src.graph.vertex import VertexLike
from src.utils import Config
from .visited import IdentitySet

# Returned by max_value() when there is no start vertex
MIN_VALUE = float("-inf")

STRATEGIES = ("iterative", "recursive")


class MissingVertexError(ValueError):
    pass


@dataclass
class TraversalResult:
    """Result of a full traversal from one start vertex"""
    start: Optional[VertexLike]
    vertices: IdentitySet
    leaves: IdentitySet
    max_value: Any
    metadata: Dict = field(default_factory=dict)


def _out(vertex: VertexLike):
    """Outgoing neighbors, treating a missing collection as no edges."""
    return [n for n in (vertex.neighbors or ()) if n is not None]


class TraversalEngine:
    """
    Depth-first traversal engine.

    Two interchangeable strategies:
    - iterative: explicit work-stack, safe for arbitrarily deep graphs
    - recursive: native call recursion up to max_depth frames; deeper
      vertices continue on an explicit stack sharing the same visited set

    Visited state is created fresh for every top-level call and never
    shared between calls. The graph is never mutated.
    """

    def __init__(self, strategy: Optional[str] = None, max_depth: Optional[int] = None):
        """
        Initialize traversal engine.

        Args:
            strategy: 'iterative' or 'recursive'. Defaults to
                      Config.TRAVERSAL_STRATEGY.
            max_depth: Recursion budget for the recursive strategy.
                       Defaults to Config.RECURSION_DEPTH.
        """
        strategy = strategy or Config.TRAVERSAL_STRATEGY
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown traversal strategy {strategy!r}. Allowed: {list(STRATEGIES)}")
        self.strategy = strategy

        self.max_depth = Config.RECURSION_DEPTH if max_depth is None else max_depth
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    # ---- Visitation walk ----

    def walk(self, start: Optional[VertexLike], action: Callable[[VertexLike], None]) -> IdentitySet:
        """
        Visit every vertex reachable from start exactly once.

        Args:
            start: Starting vertex, or None for an empty walk
            action: Called with each vertex as it is visited

        Returns:
            IdentitySet of visited vertices
        """
        visited = IdentitySet()
        if start is None:
            return visited

        if self.strategy == "recursive":
            self._walk_recursive(start, action, visited, 0)
        else:
            self._walk_stack([start], action, visited)

        return visited

    def _walk_stack(self, stack: list, action: Callable, visited: IdentitySet):
        while stack:
            current = stack.pop()
            if current in visited:
                continue

            # Mark before expanding so cycles and diamonds are not re-entered
            visited.add(current)
            action(current)

            for neighbor in _out(current):
                if neighbor not in visited:
                    stack.append(neighbor)

    def _walk_recursive(self, vertex: VertexLike, action: Callable, visited: IdentitySet, depth: int):
        visited.add(vertex)
        action(vertex)
        for neighbor in _out(vertex):
            if neighbor in visited:
                continue
            if depth < self.max_depth:
                self._walk_recursive(neighbor, action, visited, depth + 1)
            else:
                self._walk_stack([neighbor], action, visited)

    # ---- Exhaustive queries ----

    def print_vertex_vals(self, start: Optional[VertexLike], out: Optional[TextIO] = None):
        """Print the value of every reachable vertex, one per line."""
        stream = out if out is not None else sys.stdout
        self.walk(start, lambda vertex: print(vertex.value, file=stream))

    def reachable(self, start: Optional[VertexLike]) -> IdentitySet:
        """
        All vertices reachable from start, including start itself.

        Returns an empty set when start is None.
        """
        result = IdentitySet()
        self.walk(start, result.add)
        return result

    def max_value(self, start: Optional[VertexLike]):
        """
        Maximum value over all vertices reachable from start.

        Returns MIN_VALUE when start is None; callers must treat it as
        "no value" rather than a real maximum.
        """
        best = MIN_VALUE

        def visit(vertex):
            nonlocal best
            if vertex.value > best:
                best = vertex.value

        self.walk(start, visit)
        return best

    def leaves(self, start: Optional[VertexLike]) -> IdentitySet:
        """
        Reachable vertices with no outgoing edges.

        Non-leaf vertices are still expanded, so leaves only reachable
        through a cycle are found too.
        """
        result = IdentitySet()

        def visit(vertex):
            if not _out(vertex):
                result.add(vertex)

        self.walk(start, visit)
        return result

    def traverse(self, start: Optional[VertexLike]) -> TraversalResult:
        """
        Run one walk and summarise it.

        Args:
            start: Starting vertex (may be None)

        Returns:
            TraversalResult with visited vertices, leaves, max value and metadata
        """
        leaves = IdentitySet()
        edge_count = 0

        def visit(vertex):
            nonlocal edge_count
            neighbors = _out(vertex)
            edge_count += len(neighbors)
            if not neighbors:
                leaves.add(vertex)

        vertices = self.walk(start, visit)

        if not vertices:
            max_value = MIN_VALUE
        else:
            try:
                max_value = max(v.value for v in vertices)
            except TypeError:
                # Values are not mutually comparable
                max_value = None

        return TraversalResult(
            start=start,
            vertices=vertices,
            leaves=leaves,
            max_value=max_value,
            metadata={
                'total_vertices_visited': len(vertices),
                'total_leaves': len(leaves),
                'total_edges_traversed': edge_count,
                'strategy': self.strategy
            }
        )

    # ---- Strictly increasing path search ----

    def has_strictly_increasing_path(self, start: VertexLike, end: VertexLike) -> bool:
        """
        Whether a path start -> ... -> end exists whose values strictly increase.

        Only neighbors with a value greater than the current vertex are
        expanded. Each vertex is explored on first entry only: the edges
        leaving a vertex depend on nothing but its own value, so a later
        arrival could not reach anything new. A zero-length path (start is
        end) counts.

        Args:
            start: Starting vertex
            end: Target vertex

        Returns:
            True as soon as end is reached, False once the search is exhausted

        Raises:
            MissingVertexError: if start or end is None
        """
        if start is None or end is None:
            missing = [name for name, v in (("start", start), ("end", end)) if v is None]
            raise MissingVertexError(f"Strictly increasing path search requires both endpoints; missing: {missing}")

        visited = IdentitySet()

        if self.strategy == "recursive":
            return self._search_recursive(start, end, visited, 0)

        return self._search_stack([start], end, visited)

    def _search_stack(self, stack: list, end: VertexLike, visited: IdentitySet) -> bool:
        while stack:
            current = stack.pop()
            if current is end:
                return True
            if current in visited:
                continue

            visited.add(current)

            for neighbor in _out(current):
                if neighbor not in visited and neighbor.value > current.value:
                    stack.append(neighbor)

        return False

    def _search_recursive(self, current: VertexLike, end: VertexLike, visited: IdentitySet, depth: int) -> bool:
        if current is end:
            return True

        visited.add(current)

        for neighbor in _out(current):
            if neighbor in visited or not neighbor.value > current.value:
                continue
            if depth < self.max_depth:
                found = self._search_recursive(neighbor, end, visited, depth + 1)
            else:
                found = self._search_stack([neighbor], end, visited)
            if found:
                return True

        return False
