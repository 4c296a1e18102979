"""
Dijkstra engines for routetrace.

Both engines finalize nodes in the same order: lowest distance first, ties
broken by the lowest node id in string order. That makes their traces
interchangeable.
"""

from typing import Dict, List, Optional, Set, Tuple, Union
import heapq
import logging
import math

from algorithms import ShortestPathEngine
from errors import GraphValidationError, UnknownNodeError
from graph import Graph
from nodes import NodeId, normalize_node_id
from search_trace import PathResult, SearchStats, Step, reconstruct_path

logger = logging.getLogger(__name__)


def _resolve_endpoints(
    graph: Graph, source_id: Union[str, int], target_id: Union[str, int]
) -> Tuple[NodeId, NodeId]:
    resolved: List[NodeId] = []
    for raw in (source_id, target_id):
        try:
            node_id = normalize_node_id(raw)
        except GraphValidationError as exc:
            raise UnknownNodeError(raw) from exc
        if node_id not in graph:
            raise UnknownNodeError(node_id)
        resolved.append(node_id)
    return resolved[0], resolved[1]


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Label-setting Dijkstra with a linear minimum scan over the working set.

    Complexity:
        O(V^2), fine for the small graphs this is meant to visualize.
    """

    def compute_shortest_path(
        self, graph: Graph, source_id: Union[str, int], target_id: Union[str, int]
    ) -> PathResult:
        source, target = _resolve_endpoints(graph, source_id, target_id)

        working: Set[NodeId] = set(graph.node_ids())
        dist: Dict[NodeId, float] = {n: math.inf for n in graph.node_ids()}
        prev: Dict[NodeId, Optional[NodeId]] = {n: None for n in dist}
        dist[source] = 0.0
        steps: List[Step] = []
        edges_examined = 0
        relaxed = 0

        while working:
            u = min(working, key=lambda n: (dist[n], n))
            if math.isinf(dist[u]):
                break
            working.remove(u)
            steps.append(Step(u, dict(dist)))
            logger.debug("step %d: finalized %s at %s", len(steps), u, dist[u])

            for v, w in graph.neighbors(u).items():
                edges_examined += 1
                if v not in working:
                    continue
                alt = dist[u] + w
                if alt < dist[v]:
                    logger.debug("relaxed %s via %s: %s -> %s", v, u, dist[v], alt)
                    dist[v] = alt
                    prev[v] = u
                    relaxed += 1

        return PathResult(
            source=source,
            target=target,
            path=reconstruct_path(prev, dist, source, target),
            distances=dist,
            predecessors=prev,
            steps=tuple(steps),
            stats=SearchStats(selected=len(steps), edges_examined=edges_examined, relaxed=relaxed),
        )


class HeapDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap keyed on (distance, node id).

    Complexity:
        O((V + E) log V) over the nodes reachable from the source.
    """

    def compute_shortest_path(
        self, graph: Graph, source_id: Union[str, int], target_id: Union[str, int]
    ) -> PathResult:
        source, target = _resolve_endpoints(graph, source_id, target_id)

        dist: Dict[NodeId, float] = {n: math.inf for n in graph.node_ids()}
        prev: Dict[NodeId, Optional[NodeId]] = {n: None for n in dist}
        dist[source] = 0.0
        finalized: Set[NodeId] = set()
        steps: List[Step] = []
        edges_examined = 0
        relaxed = 0
        pq = [(0.0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if u in finalized or d_u != dist[u]:
                continue

            finalized.add(u)
            steps.append(Step(u, dict(dist)))
            logger.debug("step %d: finalized %s at %s", len(steps), u, d_u)

            for v, w in graph.neighbors(u).items():
                edges_examined += 1
                if v in finalized:
                    continue
                alt = d_u + w
                if alt < dist[v]:
                    logger.debug("relaxed %s via %s: %s -> %s", v, u, dist[v], alt)
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))
                    relaxed += 1

        return PathResult(
            source=source,
            target=target,
            path=reconstruct_path(prev, dist, source, target),
            distances=dist,
            predecessors=prev,
            steps=tuple(steps),
            stats=SearchStats(selected=len(steps), edges_examined=edges_examined, relaxed=relaxed),
        )
