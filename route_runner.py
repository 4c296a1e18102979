"""
CLI to compute a traced shortest route over a graph file.

Reads graphs/city.yml unless another graph is given, runs the chosen engine
and prints a text report (or the raw result as JSON).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence, Type
import argparse
import json
import logging

from algorithms import ShortestPathEngine
from dijkstra_engine import HeapDijkstraEngine, SimpleDijkstraEngine
from errors import GraphValidationError, UnknownNodeError
from graph_loader import load_graph
from report import render_report


DEFAULT_GRAPH = Path(__file__).parent / "graphs" / "city.yml"

ENGINES: Dict[str, Type[ShortestPathEngine]] = {
    "scan": SimpleDijkstraEngine,
    "heap": HeapDijkstraEngine,
}

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two locations and show each step of Dijkstra's algorithm."
    )
    parser.add_argument("source", help="id of the start location")
    parser.add_argument("target", help="id of the destination")
    parser.add_argument("--graph", type=Path, default=DEFAULT_GRAPH, help="YAML graph file")
    parser.add_argument("--engine", choices=sorted(ENGINES), default="scan")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="log each relaxation")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source, target = args.source, args.target
    if source == target:
        print("[route] Please select different start and end nodes")
        return EXIT_USAGE

    try:
        graph = load_graph(args.graph)
    except (OSError, GraphValidationError) as exc:
        print(f"[route] could not load graph {args.graph}: {exc}")
        return EXIT_ERROR

    engine = ENGINES[args.engine]()
    try:
        result = engine.compute_shortest_path(graph, source, target)
    except (UnknownNodeError, GraphValidationError) as exc:
        known = ", ".join(graph.node_ids())
        print(f"[route] {exc} (known nodes: {known})")
        return EXIT_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_report(graph, result))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
