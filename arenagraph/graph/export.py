"""Conversion of the arena graph into other in-memory representations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import networkx as nx

from .query import QueryService
from .store import Graph


@dataclass
class GraphExporter:
    """Build a ``networkx`` view of the live part of a :class:`Graph`."""

    graph: Graph[Any, Any]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return a :class:`networkx.MultiDiGraph` keyed by integer identifiers.

        Deleted nodes and edges are left out.  Each edge keeps its arena
        identifier as its ``key`` so parallel edges stay distinguishable.
        """

        query = QueryService(self.graph)
        result = nx.MultiDiGraph()
        for ind, node in query.nodes():
            result.add_node(ind.value, data=node.data)
        for source, edge_ind, edge in query.edges():
            result.add_edge(source.value, edge.dest.value, key=edge_ind.value, data=edge.data)
        return result

    def export(self, *, format: Literal["networkx"] = "networkx") -> nx.MultiDiGraph:
        """Export the graph to the requested ``format``."""

        if format == "networkx":
            return self.to_networkx()
        raise ValueError(f"Unsupported export format: {format}")
