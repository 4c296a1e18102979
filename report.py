"""
Plain-text rendering of a PathResult.

Node ids are shown by their labels; infinite distances are shown as "∞".
"""

from typing import List, Mapping
import math

from graph import Graph, path_edges
from nodes import NodeId
from search_trace import PathResult


UNREACHABLE_MESSAGE = "No route: the destination cannot be reached from the start."
SAME_NODE_MESSAGE = "Start and destination are the same location."


def format_distance(value: float, unit: str = "min") -> str:
    if math.isinf(value):
        return "∞"
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = f"{value:g}"
    return f"{text} {unit}" if unit else text


def _table_text(graph: Graph, table: Mapping[NodeId, float], unit: str) -> str:
    return ", ".join(f"{graph.label(n)}: {format_distance(d, unit)}" for n, d in table.items())


def distance_lines(graph: Graph, result: PathResult, unit: str = "minutes") -> List[str]:
    """Final distance per node; unlike step lines the unit follows "∞" too."""
    return [f"{graph.label(n)}: {format_distance(d, unit='')} {unit}" for n, d in result.distances.items()]


def path_line(graph: Graph, result: PathResult) -> str:
    if not result.reachable:
        return UNREACHABLE_MESSAGE
    if len(result.path) == 1:
        return SAME_NODE_MESSAGE
    return " → ".join(graph.label(n) for n in result.path)


def route_lines(graph: Graph, result: PathResult, unit: str = "min") -> List[str]:
    """One line per road on the path, with its cost and traffic."""
    lines = []
    for edge in path_edges(graph, result.path):
        # Edges are stored in declaration order; orient them along the path.
        start = edge.u if result.path.index(edge.u) < result.path.index(edge.v) else edge.v
        end = edge.other(start)
        traffic = f" ({edge.traffic.value} traffic)" if edge.traffic else ""
        lines.append(
            f"{graph.label(start)} → {graph.label(end)}: {format_distance(edge.weight, unit)}{traffic}"
        )
    return lines


def step_lines(graph: Graph, result: PathResult, unit: str = "min") -> List[str]:
    lines = []
    for index, step in enumerate(result.steps, start=1):
        lines.append(f"Step {index}: Processing {graph.label(step.node_id)}")
        lines.append(f"  Current travel times: {_table_text(graph, step.distances, unit)}")
    return lines


def render_report(
    graph: Graph, result: PathResult, unit: str = "min", distance_unit: str = "minutes"
) -> str:
    sections = [
        "Shortest travel times:",
        *(f"  {line}" for line in distance_lines(graph, result, distance_unit)),
        "",
        f"Route: {path_line(graph, result)}",
    ]
    if len(result.path) > 1:
        sections.append(f"Total: {format_distance(result.cost, unit)}")
        sections.extend(f"  {line}" for line in route_lines(graph, result, unit))
    sections.append("")
    sections.append("Algorithm steps:")
    sections.extend(step_lines(graph, result, unit))
    return "\n".join(sections)
