"""
Generate a large graph document for stress-testing traversal.

The graph is a long chain (deep enough to exhaust native recursion) with
random extra edges layered on top, some pointing backwards to form cycles.
All values are distinct.
"""
import argparse
import random
from typing import Any, Dict

import yaml


def generate_graph(depth: int = 5000, extra_edges: int = 2000, back_edge_ratio: float = 0.3,
                   seed: int = 42) -> Dict[str, Any]:
    """
    Build the graph document.

    Args:
        depth: Number of vertices in the backbone chain
        extra_edges: Number of random edges added on top of the chain
        back_edge_ratio: Fraction of extra edges pointing to an earlier vertex
        seed: Random seed so output is reproducible

    Returns:
        Graph document dict (vertices, edges, start)
    """
    rng = random.Random(seed)

    # Shuffled distinct values so the chain is not trivially increasing
    values = list(range(depth))
    rng.shuffle(values)

    vertices = [{'id': f"v-{i:05d}", 'value': values[i]} for i in range(depth)]
    edges = [{'from': f"v-{i:05d}", 'to': f"v-{i + 1:05d}"} for i in range(depth - 1)]

    for _ in range(extra_edges):
        src = rng.randrange(depth)
        if rng.random() < back_edge_ratio:
            dst = rng.randrange(src + 1)
        else:
            dst = rng.randrange(src, depth)
        edges.append({'from': f"v-{src:05d}", 'to': f"v-{dst:05d}"})

    return {'start': vertices[0]['id'], 'vertices': vertices, 'edges': edges}


def main():
    parser = argparse.ArgumentParser(description="Generate a large graph document")
    parser.add_argument("--output", default="graphs/large.yaml", help="Output YAML path")
    parser.add_argument("--depth", type=int, default=5000, help="Backbone chain length")
    parser.add_argument("--extra-edges", type=int, default=2000, help="Random extra edges")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    print(f"Generating chain of {args.depth} vertices with {args.extra_edges} extra edges...")
    data = generate_graph(depth=args.depth, extra_edges=args.extra_edges, seed=args.seed)

    with open(args.output, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, width=120)

    print(f"✅ Generated {args.output} with {len(data['vertices'])} vertices")
    print(f"✅ Total edges: {len(data['edges'])}")


if __name__ == "__main__":
    main()
