"""
Result and trace data emitted by the shortest-path engines.

A PathResult carries the final tables plus every Step the engine took, so a
renderer can replay the search one finalized node at a time.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple
import math

from nodes import NodeId


@dataclass(frozen=True)
class Step:
    """
    One iteration of the search.

    ``distances`` is a value copy of the distance table taken right after
    ``node_id`` was finalized and before its neighbours were relaxed.
    """

    node_id: NodeId
    distances: Mapping[NodeId, float]

    @property
    def distance(self) -> float:
        """Distance of the node finalized at this step."""
        return self.distances[self.node_id]


@dataclass(frozen=True)
class SearchStats:
    """Work counters for a single query."""

    selected: int = 0
    edges_examined: int = 0
    relaxed: int = 0


@dataclass(frozen=True)
class PathResult:
    source: NodeId
    target: NodeId
    path: Tuple[NodeId, ...]
    distances: Mapping[NodeId, float]
    predecessors: Mapping[NodeId, Optional[NodeId]]
    steps: Tuple[Step, ...]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def reachable(self) -> bool:
        return len(self.path) > 0

    @property
    def cost(self) -> float:
        """Distance from source to target; math.inf when unreachable."""
        return self.distances[self.target]

    def to_dict(self) -> Dict[str, object]:
        """
        JSON-safe form of the result. Infinite distances become None.
        """
        return {
            "source": self.source,
            "target": self.target,
            "path": list(self.path),
            "cost": _finite_or_none(self.cost),
            "distances": _table_to_dict(self.distances),
            "predecessors": dict(self.predecessors),
            "steps": [
                {"node_id": step.node_id, "distances": _table_to_dict(step.distances)}
                for step in self.steps
            ],
            "stats": {
                "selected": self.stats.selected,
                "edges_examined": self.stats.edges_examined,
                "relaxed": self.stats.relaxed,
            },
        }


def reconstruct_path(
    predecessors: Mapping[NodeId, Optional[NodeId]],
    distances: Mapping[NodeId, float],
    source: NodeId,
    target: NodeId,
) -> Tuple[NodeId, ...]:
    """
    Walk predecessors back from target, prepending each node.

    Returns an empty tuple when the target was never reached or the chain
    does not lead back to the source.
    """
    if math.isinf(distances.get(target, math.inf)):
        return ()

    path: List[NodeId] = []
    current: Optional[NodeId] = target
    while current is not None:
        path.insert(0, current)
        current = predecessors.get(current)
        # A chain longer than the table can only mean a cycle.
        if len(path) > len(predecessors) + 1:
            return ()

    if path[0] != source:
        return ()
    return tuple(path)


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) else value


def _table_to_dict(table: Mapping[NodeId, float]) -> Dict[NodeId, Optional[float]]:
    return {node_id: _finite_or_none(d) for node_id, d in table.items()}
