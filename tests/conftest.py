"""
Pytest configuration and fixtures for traversal engine tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.graph.loader import GraphLoader
from src.graph.vertex import Vertex
from src.traversal.engine import STRATEGIES, TraversalEngine
from src.utils import get_graphs_path


def build_graph(values, edges):
    """
    Build vertices keyed by name.

    Args:
        values: {name: value}
        edges: iterable of (from_name, to_name)
    """
    vertices = {name: Vertex(value, id=name) for name, value in values.items()}
    for source, target in edges:
        vertices[source].add_neighbor(vertices[target])
    return vertices


@pytest.fixture(params=STRATEGIES)
def engine(request):
    """Traversal engine, once per strategy"""
    return TraversalEngine(request.param)


@pytest.fixture
def diamond():
    """1 -> 2, 1 -> 3, 2 -> 4, 3 -> 4"""
    return build_graph(
        {'1': 1, '2': 2, '3': 3, '4': 4},
        [('1', '2'), ('1', '3'), ('2', '4'), ('3', '4')]
    )


@pytest.fixture
def cyclic():
    """Cycle a -> b -> c -> a, self-loop on c, root <-> b, sink only past the cycle"""
    return build_graph(
        {'root': 7, 'a': -3, 'b': 12, 'c': 5, 'sink': 9, 'island': 100},
        [
            ('root', 'a'), ('a', 'b'), ('b', 'c'), ('c', 'a'),
            ('c', 'c'), ('b', 'root'), ('c', 'sink'), ('island', 'root')
        ]
    )


@pytest.fixture(scope="session")
def graph_loader():
    return GraphLoader()


@pytest.fixture(scope="session")
def diamond_document_path():
    return get_graphs_path("diamond.yaml")


@pytest.fixture(scope="session")
def cyclic_document_path():
    return get_graphs_path("cyclic.yaml")
