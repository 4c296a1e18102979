"""
Undirected, weighted graph abstraction for routetrace.

Nodes are identified by string ids.
Edges are undirected: u <-> v with one non-negative weight.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional, Sequence

from errors import GraphValidationError, UnknownNodeError
from nodes import Edge, Node, NodeId


class Graph(ABC):
    """Undirected, weighted graph over Node objects."""

    @abstractmethod
    def nodes(self) -> Iterable[Node]:
        """Return all nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def node(self, node_id: NodeId) -> Node:
        """
        Look up a node by id.

        Raises UnknownNodeError if the id is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterable[Edge]:
        """Return every edge once."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, node_id: NodeId) -> Mapping[NodeId, float]:
        """
        Neighbours and edge weights for a given node.

        Returns: dict[NodeId, float]
        """
        raise NotImplementedError

    @abstractmethod
    def edge_between(self, u: NodeId, v: NodeId) -> Optional[Edge]:
        """Return the edge joining u and v in either direction, if any."""
        raise NotImplementedError

    def __contains__(self, node_id: object) -> bool:
        try:
            self.node(node_id)  # type: ignore[arg-type]
        except UnknownNodeError:
            return False
        return True

    def node_ids(self) -> List[NodeId]:
        return [n.id for n in self.nodes()]

    def label(self, node_id: NodeId) -> str:
        return self.node(node_id).label


def path_edges(graph: Graph, path: Sequence[NodeId]) -> List[Edge]:
    """
    Edges along a path, in travel order.

    This is what a renderer highlights once a route has been found.
    """
    edges: List[Edge] = []
    for u, v in zip(path, path[1:]):
        edge = graph.edge_between(u, v)
        if edge is None:
            raise GraphValidationError(f"No edge between {u!r} and {v!r}")
        edges.append(edge)
    return edges


def path_cost(graph: Graph, path: Sequence[NodeId]) -> float:
    """Sum of edge weights along a path; 0 for a single node."""
    return sum((e.weight for e in path_edges(graph, path)), 0)
