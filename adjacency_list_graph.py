"""
Concrete undirected, weighted graph implementation for routetrace.

Implements the Graph interface using a simple adjacency-list representation.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Union

from errors import GraphValidationError, UnknownNodeError
from graph import Graph
from nodes import Edge, Node, NodeId, Traffic, normalize_node_id


class AdjacencyListGraph(Graph):
    """
    Undirected, weighted graph backed by a node -> (neighbor -> edge) mapping.

    Each edge is stored under both of its endpoints.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}
        self._adj: Dict[NodeId, Dict[NodeId, Edge]] = {}

    @classmethod
    def from_parts(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> "AdjacencyListGraph":
        """Build a graph from nodes first, then edges between them."""
        g = cls()
        for node in nodes:
            g.add_node(node)
        for edge in edges:
            g.add_edge(edge.u, edge.v, edge.weight, edge.traffic)
        return g

    # --- Build API (not part of Graph interface) ------------------------------

    def add_node(self, node: Union[Node, str, int], label: str = "") -> Node:
        """
        Add a node. Re-adding an existing id with a different label is an error.
        """
        if not isinstance(node, Node):
            node = Node(normalize_node_id(node), label)
        existing = self._nodes.get(node.id)
        if existing is not None and existing != node:
            raise GraphValidationError(f"Node {node.id!r} already exists with label {existing.label!r}")
        self._nodes[node.id] = node
        self._adj.setdefault(node.id, {})
        return node

    def add_edge(
        self,
        u: Union[str, int],
        v: Union[str, int],
        weight: float,
        traffic: Optional[Traffic] = None,
    ) -> Edge:
        """
        Add or replace the undirected edge u <-> v.
        Both endpoints must already be in the graph.
        """
        edge = Edge(u, v, weight, traffic)
        for endpoint in (edge.u, edge.v):
            if endpoint not in self._nodes:
                raise GraphValidationError(f"Edge {edge.u}-{edge.v} references unknown node {endpoint!r}")
        self._adj[edge.u][edge.v] = edge
        self._adj[edge.v][edge.u] = edge
        return edge

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Node]:
        return list(self._nodes.values())

    def node(self, node_id: NodeId) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def edges(self) -> Iterable[Edge]:
        seen: List[Edge] = []
        ids = set()
        for neighbors in self._adj.values():
            for edge in neighbors.values():
                if id(edge) not in ids:
                    ids.add(id(edge))
                    seen.append(edge)
        return seen

    def neighbors(self, node_id: NodeId) -> Mapping[NodeId, float]:
        if node_id not in self._adj:
            raise UnknownNodeError(node_id)
        return {v: e.weight for v, e in self._adj[node_id].items()}  # copy

    def edge_between(self, u: NodeId, v: NodeId) -> Optional[Edge]:
        return self._adj.get(u, {}).get(v)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
