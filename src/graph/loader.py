"""Graph document validation and vertex construction (YAML or dict input)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .vertex import Vertex


class DataValidationError(ValueError):
    pass


@dataclass
class LoadedGraph:
    """Vertices built from a graph document, indexed by document id"""
    vertices: Dict[str, Vertex] = field(default_factory=dict)
    edges: List[Tuple[str, str]] = field(default_factory=list)
    start: Optional[Vertex] = None

    def get(self, vertex_id: Optional[str]) -> Optional[Vertex]:
        """Look up a vertex by id; None passes through as an absent vertex."""
        if vertex_id is None:
            return None
        if vertex_id not in self.vertices:
            raise DataValidationError(f"Unknown vertex id: {vertex_id!r}")
        return self.vertices[vertex_id]


def _vertex_id(raw: Any) -> str:
    """Ids may be written as ints in YAML; normalize to str."""
    if raw is None or raw == "":
        raise DataValidationError("Vertex id must not be empty")
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise DataValidationError(f"Vertex id must be a string or integer, got {type(raw).__name__}: {raw!r}")
    return str(raw)


class GraphLoader:
    """
    Builds Vertex graphs from documents of the form:

        vertices: [{id: a, value: 1}, ...]
        edges:    [{from: a, to: b}, ...]
        start:    a            # optional
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def load_file(self, path) -> LoadedGraph:
        """
        Load a graph document from a YAML file.

        Args:
            path: Path to the YAML document

        Returns:
            LoadedGraph with constructed vertices
        """
        path = Path(path)
        self._log(f"📖 Reading graph document {path}...")
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return self.load(data)

    def load(self, data: Dict[str, Any]) -> LoadedGraph:
        if not isinstance(data, dict):
            raise DataValidationError("Graph document must be a mapping with 'vertices' and 'edges'.")

        graph = LoadedGraph()
        self._create_vertices(graph, self._validate_vertices(data))
        self._create_edges(graph, self._validate_edges(graph, data))

        start_id = data.get("start")
        if start_id is not None:
            start_id = _vertex_id(start_id)
            if start_id not in graph.vertices:
                raise DataValidationError(f"Start vertex {start_id!r} not found in vertices")
            graph.start = graph.vertices[start_id]

        self._log(f"🎉 Graph loaded: {len(graph.vertices)} vertices, {len(graph.edges)} edges")
        return graph

    # ---- Validation helpers ----

    def _validate_vertices(self, data: Dict[str, Any]) -> List[Dict[str, Any]]:
        items = data.get("vertices")
        if items is None:
            raise DataValidationError("Graph document missing 'vertices'.")
        if not isinstance(items, list):
            raise DataValidationError("'vertices' must be a list of {id, value} objects.")

        seen: Dict[str, bool] = {}
        out: List[Dict[str, Any]] = []
        for obj in items:
            if not isinstance(obj, dict):
                raise DataValidationError(f"vertices contains a non-object: {obj!r}")
            if "id" not in obj:
                raise DataValidationError(f"Vertex missing 'id'. Offending object: {obj}")
            if "value" not in obj:
                raise DataValidationError(f"Vertex missing 'value'. Offending object: {obj}")

            vid = _vertex_id(obj["id"])
            if vid in seen:
                raise DataValidationError(f"Duplicate vertex id: {vid}")
            seen[vid] = True
            out.append({"id": vid, "value": obj["value"]})

        return out

    def _validate_edges(self, graph: LoadedGraph, data: Dict[str, Any]) -> List[Tuple[str, str]]:
        edges = data.get("edges") or []
        if not isinstance(edges, list):
            raise DataValidationError("'edges' must be a list of {from, to} objects.")

        validated: List[Tuple[str, str]] = []
        violations: List[str] = []
        for e in edges:
            if not isinstance(e, dict):
                raise DataValidationError(f"Edge must be an object: {e!r}")
            if e.get("from") is None or e.get("to") is None:
                raise DataValidationError(f"Edge missing fields (from/to): {e}")

            from_id = _vertex_id(e["from"])
            to_id = _vertex_id(e["to"])
            unknown = [vid for vid in (from_id, to_id) if vid not in graph.vertices]
            if unknown:
                violations.append(f"{from_id} -> {to_id} (unknown: {', '.join(unknown)})")
                continue
            validated.append((from_id, to_id))

        if violations:
            raise DataValidationError(
                "Edge Reference Violations:\n  " + "\n  ".join(violations)
            )
        return validated

    # ---- Construction ----

    def _create_vertices(self, graph: LoadedGraph, items: List[Dict[str, Any]]):
        self._log("📦 Creating vertices...")
        for obj in items:
            graph.vertices[obj["id"]] = Vertex(value=obj["value"], id=obj["id"])
        self._log(f"  ✅ {len(graph.vertices)} vertices")

    def _create_edges(self, graph: LoadedGraph, edges: List[Tuple[str, str]]):
        self._log("🔗 Wiring edges...")
        for from_id, to_id in edges:
            graph.vertices[from_id].add_neighbor(graph.vertices[to_id])
            graph.edges.append((from_id, to_id))
        self._log(f"  ✅ {len(graph.edges)} edges")
