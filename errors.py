"""Exception hierarchy for routetrace."""


class RouteTraceError(Exception):
    """Base exception for all routetrace errors."""


class UnknownNodeError(RouteTraceError, LookupError):
    """Raised when a node identifier is not present in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Unknown node: {node_id!r}")
        self.node_id = node_id


class GraphValidationError(RouteTraceError, ValueError):
    """Raised when nodes, edges or a graph document break the graph invariants."""
