"""
Node and edge value types for routetrace.

Node identifiers are strings at every interface; integers are accepted at
the boundary and normalized to their decimal form.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import math

from errors import GraphValidationError


NodeId = str


def normalize_node_id(value: Union[str, int]) -> NodeId:
    """
    Convert an identifier supplied by a caller into the canonical string form.

    Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool):
        raise GraphValidationError(f"Node id must be a string or integer, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        if not value:
            raise GraphValidationError("Node id must not be empty")
        return value
    raise GraphValidationError(f"Node id must be a string or integer, got {value!r}")


class Traffic(Enum):
    """Congestion level of a road; display only, never affects cost."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Node:
    """A location in the graph."""

    id: NodeId
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", normalize_node_id(self.id))
        if not self.label:
            object.__setattr__(self, "label", self.id)


@dataclass(frozen=True)
class Edge:
    """
    Undirected, weighted connection between two distinct nodes.

    ``u`` and ``v`` keep the order they were declared in, but the edge is
    traversable both ways at the same cost.
    """

    u: NodeId
    v: NodeId
    weight: float
    traffic: Optional[Traffic] = None

    def __post_init__(self) -> None:
        u = normalize_node_id(self.u)
        v = normalize_node_id(self.v)
        if u == v:
            raise GraphValidationError(f"Edge must join two distinct nodes, got {u!r} twice")
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise GraphValidationError(f"Edge {u}-{v} weight must be a number, got {self.weight!r}")
        if not math.isfinite(self.weight) or self.weight < 0:
            raise GraphValidationError(
                f"Edge {u}-{v} weight must be finite and non-negative, got {self.weight!r}"
            )
        object.__setattr__(self, "u", u)
        object.__setattr__(self, "v", v)

    def other(self, node_id: NodeId) -> NodeId:
        """Endpoint on the far side from node_id."""
        if node_id == self.u:
            return self.v
        if node_id == self.v:
            return self.u
        raise ValueError(f"Node {node_id!r} is not an endpoint of edge {self.u}-{self.v}")
