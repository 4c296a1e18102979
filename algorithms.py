"""
Algorithm interfaces for routetrace.

Keeps graph algorithms separate from graph loading and presentation.
"""

from abc import ABC, abstractmethod
from typing import Union

from graph import Graph
from search_trace import PathResult


class ShortestPathEngine(ABC):
    """
    Interface for single-source, single-target shortest-path computation
    that also records a replayable trace.

    Implementations must not keep per-query state on the instance, so one
    engine can serve concurrent callers on the same graph.
    """

    @abstractmethod
    def compute_shortest_path(
        self, graph: Graph, source_id: Union[str, int], target_id: Union[str, int]
    ) -> PathResult:
        """
        Compute distances from source to every reachable node, the path to
        target and the ordered steps taken.

        Raises:
            UnknownNodeError: source or target is not in the graph.
        """
        raise NotImplementedError
