#!/usr/bin/env python3
"""
Generate a static visualization of a traversal.

Usage:
    pip install networkx matplotlib
    python visualize_static.py [graph.yaml] [--start ID] [--output FILE]
"""

import argparse

import networkx as nx
import matplotlib
import matplotlib.pyplot as plt

from src.graph.loader import GraphLoader
from src.traversal.engine import TraversalEngine
from src.utils import Config


def create_graph(graph):
    """Create NetworkX graph from a loaded graph document."""
    G = nx.DiGraph()

    for vertex_id, vertex in graph.vertices.items():
        G.add_node(vertex_id, value=vertex.value, label=f"{vertex_id}\n{vertex.value}")

    for source, target in graph.edges:
        G.add_edge(source, target)

    return G


def get_node_color(vertex_id, start_id, reachable_ids, leaf_ids):
    """Get color for a vertex by its role in the traversal."""
    if vertex_id == start_id:
        return '#E91E63'
    if vertex_id in leaf_ids:
        return '#FF9800'
    if vertex_id in reachable_ids:
        return '#4CAF50'
    return '#9E9E9E'


def visualize_graph(graph, start, output_file='traversal_graph.png'):
    """Create and save visualization."""
    result = TraversalEngine().traverse(start)
    G = create_graph(graph)

    start_id = start.id if start is not None else None
    reachable_ids = {v.id for v in result.vertices}
    leaf_ids = {v.id for v in result.leaves}

    fig, ax = plt.subplots(1, 1, figsize=(14, 10))
    fig.suptitle(
        f'Traversal from {start_id} '
        f'({result.metadata["total_vertices_visited"]} of {G.number_of_nodes()} vertices reachable)',
        fontsize=16,
        fontweight='bold'
    )

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

    node_colors = [get_node_color(n, start_id, reachable_ids, leaf_ids) for n in G.nodes()]
    node_sizes = [1500 if n == start_id else 800 for n in G.nodes()]

    nx.draw_networkx_nodes(
        G, pos,
        node_color=node_colors,
        node_size=node_sizes,
        alpha=0.9,
        edgecolors='black',
        linewidths=2,
        ax=ax
    )

    nx.draw_networkx_edges(
        G, pos,
        edge_color='gray',
        arrows=True,
        arrowsize=15,
        arrowstyle='->',
        width=2,
        alpha=0.6,
        connectionstyle='arc3,rad=0.1',
        ax=ax
    )

    labels = {n: G.nodes[n]['label'] for n in G.nodes()}
    nx.draw_networkx_labels(
        G, pos,
        labels,
        font_size=8,
        font_weight='bold',
        font_color='white',
        ax=ax
    )

    stats_text = (
        f'Reachable: {result.metadata["total_vertices_visited"]}\n'
        f'Leaves: {result.metadata["total_leaves"]}\n'
        f'Edges traversed: {result.metadata["total_edges_traversed"]}\n'
        f'Max value: {result.max_value}'
    )

    ax.text(
        0.98, 0.98, stats_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment='top',
        horizontalalignment='right',
        bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8)
    )

    ax.axis('off')
    plt.tight_layout()

    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\n✅ Visualization saved to: {output_file}")
    return output_file


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Render a traversal as a PNG")
    parser.add_argument("graph", nargs="?", default=Config.GRAPH_PATH, help="Graph YAML document")
    parser.add_argument("--start", default=None, help="Start vertex id (default: document start)")
    parser.add_argument("--output", default="traversal_graph.png", help="Output PNG path")
    args = parser.parse_args()

    # Render to file only; no display needed
    matplotlib.use("Agg")

    print("🎨 Loading graph document...")
    graph = GraphLoader(verbose=True).load_file(args.graph)
    start = graph.get(args.start) if args.start else graph.start

    print("\n🖼️  Creating visualization...")
    visualize_graph(graph, start, args.output)


if __name__ == "__main__":
    main()
