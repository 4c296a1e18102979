"""
Load graphs from YAML documents.

Expected shape:

    nodes:
      - id: "0"
        label: Main Square
    edges:
      - source: "0"
        target: "1"
        weight: 4
        traffic: low

Integer ids are accepted and normalized to strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence
import logging

import yaml

from adjacency_list_graph import AdjacencyListGraph
from errors import GraphValidationError
from nodes import Node, Traffic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeConfig:
    id: str
    label: str


@dataclass(frozen=True)
class EdgeConfig:
    source: Any
    target: Any
    weight: float
    traffic: Optional[Traffic]


@dataclass(frozen=True)
class GraphConfig:
    nodes: Sequence[NodeConfig]
    edges: Sequence[EdgeConfig]


def load_graph(path: Path) -> AdjacencyListGraph:
    """Read a YAML graph document and build the graph it describes."""
    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise GraphValidationError(f"{path}: not valid YAML: {exc}") from exc
    graph = build_graph(parse_graph_config(data))
    logger.info("loaded graph %s: %d nodes, %d edges", path, len(graph), len(list(graph.edges())))
    return graph


def parse_graph(data: Any) -> AdjacencyListGraph:
    """Build a graph from an already-parsed mapping."""
    return build_graph(parse_graph_config(data))


def parse_graph_config(data: Any) -> GraphConfig:
    if not isinstance(data, Mapping):
        raise GraphValidationError("Graph document must be a mapping with 'nodes' and 'edges'")
    if "nodes" not in data:
        raise GraphValidationError("Graph document is missing 'nodes'")

    raw_nodes = data["nodes"] or []
    raw_edges = data.get("edges") or []
    if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
        raise GraphValidationError("'nodes' and 'edges' must be lists")

    nodes: List[NodeConfig] = []
    for i, entry in enumerate(raw_nodes):
        if not isinstance(entry, Mapping) or "id" not in entry:
            raise GraphValidationError(f"nodes[{i}]: expected a mapping with an 'id'")
        try:
            node = Node(entry["id"], str(entry.get("label") or ""))
        except GraphValidationError as exc:
            raise GraphValidationError(f"nodes[{i}]: {exc}") from exc
        nodes.append(NodeConfig(id=node.id, label=node.label))

    edges: List[EdgeConfig] = []
    for i, entry in enumerate(raw_edges):
        if not isinstance(entry, Mapping):
            raise GraphValidationError(f"edges[{i}]: expected a mapping")
        missing = [k for k in ("source", "target", "weight") if k not in entry]
        if missing:
            raise GraphValidationError(f"edges[{i}]: missing {', '.join(missing)}")
        edges.append(
            EdgeConfig(
                source=entry["source"],
                target=entry["target"],
                weight=entry["weight"],
                traffic=_parse_traffic(entry.get("traffic"), i),
            )
        )

    return GraphConfig(nodes=nodes, edges=edges)


def build_graph(cfg: GraphConfig) -> AdjacencyListGraph:
    graph = AdjacencyListGraph()
    for i, node in enumerate(cfg.nodes):
        try:
            graph.add_node(Node(node.id, node.label))
        except GraphValidationError as exc:
            raise GraphValidationError(f"nodes[{i}]: {exc}") from exc
    for i, edge in enumerate(cfg.edges):
        try:
            graph.add_edge(edge.source, edge.target, edge.weight, edge.traffic)
        except GraphValidationError as exc:
            raise GraphValidationError(f"edges[{i}]: {exc}") from exc
    return graph


def _parse_traffic(value: Any, index: int) -> Optional[Traffic]:
    if value is None:
        return None
    try:
        return Traffic(str(value).lower())
    except ValueError:
        levels = ", ".join(t.value for t in Traffic)
        raise GraphValidationError(f"edges[{index}]: unknown traffic level {value!r} (expected {levels})") from None
