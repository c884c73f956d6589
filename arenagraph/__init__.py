"""arenagraph package initialization.

Exposes the arena backed :class:`Graph` and its identifier types, the
primary entry points used by embedding applications.
"""

from .graph import Edge, EdgeIndex, Graph, GraphExporter, Node, NodeIndex, QueryService
from .obs import Event, EventBus

__all__ = [
    "Edge",
    "EdgeIndex",
    "Event",
    "EventBus",
    "Graph",
    "GraphExporter",
    "Node",
    "NodeIndex",
    "QueryService",
]
