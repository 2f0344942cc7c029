"""Shared utility functions."""
import os
from pathlib import Path


def get_project_root() -> Path:
    """
    Get the project root directory.

    Returns:
        Path to project root
    """
    return Path(__file__).parent.parent


def get_graphs_path(filename: str = None) -> Path:
    """
    Get path to the sample graphs directory or a graph document in it.

    Args:
        filename: Optional graph document filename

    Returns:
        Path to graphs directory or specific graph file
    """
    graphs_dir = get_project_root() / "graphs"
    if filename:
        return graphs_dir / filename
    return graphs_dir


class Config:
    """Configuration constants."""

    # Traversal
    TRAVERSAL_STRATEGY = os.getenv("TRAVERSAL_STRATEGY", "iterative")
    RECURSION_DEPTH = int(os.getenv("RECURSION_DEPTH", "500"))

    # Graph documents
    GRAPH_PATH = os.getenv("GRAPH_PATH", str(get_graphs_path("diamond.yaml")))
