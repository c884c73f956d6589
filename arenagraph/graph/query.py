"""Query helpers for the arena graph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from .ids import EdgeIndex, NodeIndex
from .model import Edge, Node
from .store import Graph


@dataclass
class QueryService:
    """Read-only views over a :class:`Graph` that never expose deleted records."""

    graph: Graph[Any, Any]

    def nodes(self) -> Iterator[Tuple[NodeIndex, Node[Any]]]:
        """Yield ``(index, node)`` for live nodes in creation order."""

        for ind in self.graph.node_indices():
            node = self.graph.get_node_from_index(ind)
            if node is not None:
                yield ind, node

    def edges(self) -> Iterator[Tuple[NodeIndex, EdgeIndex, Edge[Any]]]:
        """Yield ``(source, index, edge)`` for every live edge.

        Edges are grouped by owning node, in adjacency order.
        """

        for source, _ in self.nodes():
            for edge_ind, edge in self.out_edges(source):
                yield source, edge_ind, edge

    def out_edges(self, node_ind: NodeIndex) -> Iterator[Tuple[EdgeIndex, Edge[Any]]]:
        """Yield the live edges owned by ``node_ind``."""

        node = self.graph.get_node_from_index(node_ind)
        if node is None:
            return
        for edge_ind in node.edges:
            edge = self.graph.get_edge_from_index(edge_ind)
            if edge is not None:
                yield edge_ind, edge

    def successors(self, node_ind: NodeIndex) -> List[NodeIndex]:
        """Return the destination of each live out-edge, parallel edges included."""

        return [edge.dest for _, edge in self.out_edges(node_ind)]

    def in_edges(self, node_ind: NodeIndex) -> List[Tuple[NodeIndex, EdgeIndex]]:
        """Return ``(source, edge)`` for every live edge that ends at ``node_ind``."""

        if not self.graph.has_node(node_ind):
            return []
        return [(source, edge_ind) for source, edge_ind, edge in self.edges() if edge.dest == node_ind]

    def predecessors(self, node_ind: NodeIndex) -> List[NodeIndex]:
        return [source for source, _ in self.in_edges(node_ind)]

    def source_of(self, edge_ind: EdgeIndex) -> Optional[NodeIndex]:
        """Return the node whose adjacency list owns ``edge_ind``."""

        if not self.graph.has_edge(edge_ind):
            return None
        for source, _ in self.nodes():
            node = self.graph.get_node_from_index(source)
            if node is not None and edge_ind in node.edges:
                return source
        return None

    def out_degree(self, node_ind: NodeIndex) -> int:
        return sum(1 for _ in self.out_edges(node_ind))

    def in_degree(self, node_ind: NodeIndex) -> int:
        return len(self.in_edges(node_ind))
