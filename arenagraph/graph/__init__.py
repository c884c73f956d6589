"""Graph subpackage containing the arena store and its read helpers."""

from .export import GraphExporter
from .ids import EdgeIndex, NodeIndex
from .model import Edge, Node
from .query import QueryService
from .store import Graph

__all__ = [
    "Edge",
    "EdgeIndex",
    "Graph",
    "GraphExporter",
    "Node",
    "NodeIndex",
    "QueryService",
]
