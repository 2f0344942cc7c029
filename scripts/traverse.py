#!/usr/bin/env python3
"""Run traversal queries against a graph document."""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.graph.loader import GraphLoader, DataValidationError
from src.traversal.engine import MIN_VALUE, MissingVertexError, STRATEGIES, TraversalEngine
from src.utils import Config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Depth-first traversal queries over a vertex graph document")
    parser.add_argument(
        "--graph",
        type=str,
        default=Config.GRAPH_PATH,
        help=f"Path to graph YAML document (default: {Config.GRAPH_PATH})"
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Start vertex id (default: the document's 'start')"
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help=f"Traversal strategy (default: {Config.TRAVERSAL_STRATEGY})"
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("print", help="Print every reachable value, one per line")
    sub.add_parser("reachable", help="List reachable vertex ids")
    sub.add_parser("max", help="Maximum reachable value")
    sub.add_parser("leaves", help="List reachable vertices with no outgoing edges")
    sub.add_parser("summary", help="Traversal summary")
    increasing = sub.add_parser("increasing", help="Check for a strictly increasing path")
    increasing.add_argument("--end", type=str, required=True, help="Target vertex id")
    return parser


def _ids(vertices):
    return sorted(v.id for v in vertices)


def run(args) -> int:
    """Execute one query; returns the process exit code."""
    graph = GraphLoader().load_file(args.graph)
    start = graph.get(args.start) if args.start else graph.start
    engine = TraversalEngine(args.strategy)

    if args.command == "print":
        engine.print_vertex_vals(start)
    elif args.command == "reachable":
        print("\n".join(_ids(engine.reachable(start))))
    elif args.command == "max":
        value = engine.max_value(start)
        print("(no value)" if value == MIN_VALUE else value)
    elif args.command == "leaves":
        print("\n".join(_ids(engine.leaves(start))))
    elif args.command == "increasing":
        found = engine.has_strictly_increasing_path(start, graph.get(args.end))
        print("true" if found else "false")
        return 0 if found else 1
    elif args.command == "summary":
        result = engine.traverse(start)
        print(f"Start: {start.id if start is not None else '(none)'}")
        for key, value in result.metadata.items():
            print(f"  {key}: {value}")
        print(f"  max_value: {result.max_value}")
        print(f"  leaves: {', '.join(_ids(result.leaves)) or '(none)'}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except (DataValidationError, MissingVertexError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"❌ Graph document not found: {e.filename}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
